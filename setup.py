from setuptools import setup, find_packages

setup(
    name='pyProcMod',
    version='0.1',
    description='Exact continuous time process models for particle filter object tracking in pyTorch',
    author='Jeff Beck',
    author_email='bayesian.empirimancer@gmail.com',
    url='None',
    packages=find_packages(exclude=['tests', 'examples']),
    install_requires=[
        'numpy',
        'torch',
        'matplotlib',
        # add any other dependencies here
    ],
    extras_require={
        'test': ['pytest'],
    },
)
