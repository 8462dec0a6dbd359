import torch
from collections import namedtuple
# This is the template for a stationary process model.
# A stationary process predicts the state at time t + delta_time from the state at
# time t, and its transition law depends on delta_time only.  The hosting filter
# drives every model through the same routines:
#
#   conditional(delta_time, state, control) -> Conditional
#   map_normal(sample, conditional)         -> predicted state given a N(0,I) sample
#   predict(conditional)                    -> noise free prediction
#   variable_size(), control_size(), sample_size()
#
# The conditional is returned as an immutable value and is also remembered so that
# map_normal/predict can be called without passing it back in.

Conditional = namedtuple('Conditional', ['delta_time', 'state', 'control'])


class NoNoise():
    # noise sample of a model with sample_size() == 0
    def __repr__(self):
        return 'NO_NOISE'

NO_NOISE = NoNoise()


class StationaryProcess():
    VARIABLE_SIZE = 0
    CONTROL_SIZE = 0
    SAMPLE_SIZE = 0

    def __init__(self,batch_shape=(),dtype=torch.float64,verbose=False):
        self.batch_shape = batch_shape
        self.batch_dim = len(batch_shape)
        self.dtype = dtype
        self.verbose = verbose
        self.last_conditional = None

    def variable_size(self):
        return self.VARIABLE_SIZE

    def control_size(self):
        return self.CONTROL_SIZE

    def sample_size(self):
        return self.SAMPLE_SIZE

    def conditional(self,delta_time,state,control=None):
        self.last_conditional = Conditional(delta_time,state,control)
        return self.last_conditional

    def resolve(self,conditional=None):
        if conditional is None:
            conditional = self.last_conditional
        assert conditional is not None, 'conditional() must be called before predicting'
        return conditional

    def _map_normal(self,sample,conditional):
        # returns the predicted state given the noise sample
        pass

    def map_normal(self,sample=NO_NOISE,conditional=None):
        conditional = self.resolve(conditional)
        if self.sample_size() == 0:
            sample = NO_NOISE
        else:
            assert sample is not NO_NOISE, 'a noise sample is required'
            assert sample.shape[-1] == self.sample_size()
        return self._map_normal(sample,conditional)

    def predict(self,conditional=None):
        # noise free prediction, i.e. the prediction at the mode of the noise
        conditional = self.resolve(conditional)
        if self.sample_size() == 0:
            return self._map_normal(NO_NOISE,conditional)
        sample = torch.zeros(conditional.state.shape[:-1] + (self.sample_size(),),dtype=self.dtype)
        return self._map_normal(sample,conditional)

    def sample_noise(self,sample_shape=()):
        if self.sample_size() == 0:
            return NO_NOISE
        return torch.randn(sample_shape + self.batch_shape + (self.sample_size(),),dtype=self.dtype)

    def sample(self,sample_shape=(),conditional=None):
        noise = self.sample_noise(sample_shape)
        out = self.map_normal(noise,conditional)
        if noise is NO_NOISE:  # every draw is the prediction
            out = out.expand(sample_shape + out.shape)
        return out
