import torch
from dists.Delta import Delta
from utils.torch_functions import powm1_ratio, as_delta_time
from .StationaryProcess import StationaryProcess

# Occlusion of an observation source (pixel or surface point) as a two state,
# continuous time Markov chain with states {visible, occluded}.
#
# p_occluded_visible  : prob the source is occluded now given it was visible one time unit ago
# p_occluded_occluded : prob the source is occluded now given it was occluded one time unit ago
#
# The one step transition matrix has eigenvalues 1 and c = p_occluded_occluded - p_occluded_visible,
# so the generator has eigenvalues 0 and log(c) and the transition over delta_time is exact:
#
#   p(t+dt) = 1 - ( c**dt*(1-p(t)) + (1-p_occluded_occluded)*(c**dt-1)/(c-1) )
#           = c**dt*p(t) + p_occluded_visible*(c**dt-1)/(c-1)
#
# The second form is evaluated: it is exact at dt == 0 and keeps relative precision for small p.
#
# Calibration parameters can be tensors with shape batch_shape, one chain per source.
# The model is deterministic given delta_time: sample_size() == 0.

class OcclusionProcessModel(StationaryProcess):
    VARIABLE_SIZE = 1
    CONTROL_SIZE = 0
    SAMPLE_SIZE = 0

    def __init__(self,p_occluded_visible=0.1,p_occluded_occluded=0.7,batch_shape=(),tol=1e-6,dtype=torch.float64,verbose=False):
        super().__init__(batch_shape=batch_shape,dtype=dtype,verbose=verbose)
        self.p_occluded_visible = torch.as_tensor(p_occluded_visible,dtype=dtype).expand(batch_shape)
        self.p_occluded_occluded = torch.as_tensor(p_occluded_occluded,dtype=dtype).expand(batch_shape)
        self.c = self.p_occluded_occluded - self.p_occluded_visible
        self.log_c = self.c.log()
        self.tol = tol
        if verbose:
            print('OcclusionProcessModel:  c = ', self.c, ' log_c = ', self.log_c)

    @classmethod
    def from_parms(cls,parms,batch_shape=(),**kwargs):
        return cls(parms['p_occluded_visible'],parms['p_occluded_occluded'],batch_shape=batch_shape,**kwargs)

    def conditional(self,delta_time,state,control=None):
        # control is unused, the chain is autonomous
        state = torch.as_tensor(state,dtype=self.dtype)
        return super().conditional(as_delta_time(delta_time,self.dtype),state,control)

    def propagate(self,occlusion_probability,delta_time):
        occlusion_probability = torch.as_tensor(occlusion_probability,dtype=self.dtype)
        self.conditional(delta_time,occlusion_probability.unsqueeze(-1))
        return self.predict()[...,0]

    def _map_normal(self,sample,conditional):
        p = conditional.state[...,0]
        delta_time = conditional.delta_time
        unset = delta_time.isnan()
        dt = torch.where(unset,torch.zeros_like(delta_time),delta_time)

        pow_c_time = (dt*self.log_c).exp()
        ratio = powm1_ratio(self.c,self.log_c,dt,self.tol)
        predicted = pow_c_time*p + self.p_occluded_visible*ratio
        predicted = torch.where(unset,p,predicted)

        if predicted.isnan().any() and not unset.all():
            print('OcclusionProcessModel:  NaN in predicted occlusion probability')
        return predicted.unsqueeze(-1)

    def predictive(self,conditional=None):
        return Delta(self.predict(conditional))

    def stationary_probability(self):
        return self.p_occluded_visible/(1.-self.c)
