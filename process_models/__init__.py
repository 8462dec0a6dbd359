from .StationaryProcess import StationaryProcess, Conditional, NoNoise, NO_NOISE
from .OcclusionProcessModel import OcclusionProcessModel
from .DampedBrownianMotion import DampedBrownianMotion
