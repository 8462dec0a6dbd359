import torch
from dists.Delta import Delta
from utils.torch_functions import expm1_div, as_delta_time
from .StationaryProcess import StationaryProcess

# Damped Brownian motion (Ornstein-Uhlenbeck process) dx = -damping*x dt + sigma dW
# Exact transition over delta_time:
#   x(t+dt) = exp(-damping*dt) x(t) + sigma*sqrt((1-exp(-2*damping*dt))/(2*damping)) * eps
# with eps ~ N(0,I).  damping -> 0 recovers Brownian motion with variance sigma**2*dt.
#
# predictive() is a Delta when no entry has any spread (unset or zero delta_time, or sigma == 0).
# Otherwise it is a Normal, and entries with zero spread get scale tol since Normal needs scale > 0.

class DampedBrownianMotion(StationaryProcess):
    CONTROL_SIZE = 0

    def __init__(self,dim,damping=1.0,sigma=1.0,batch_shape=(),tol=1e-6,dtype=torch.float64,verbose=False):
        super().__init__(batch_shape=batch_shape,dtype=dtype,verbose=verbose)
        self.dim = dim
        self.damping = torch.as_tensor(damping,dtype=dtype).expand(batch_shape).unsqueeze(-1)
        self.sigma = torch.as_tensor(sigma,dtype=dtype).expand(batch_shape).unsqueeze(-1)
        self.tol = tol

    def variable_size(self):
        return self.dim

    def sample_size(self):
        return self.dim

    def conditional(self,delta_time,state,control=None):
        state = torch.as_tensor(state,dtype=self.dtype)
        assert state.shape[-1] == self.dim
        return super().conditional(as_delta_time(delta_time,self.dtype),state,control)

    def propagate(self,state,delta_time,sample=None):
        self.conditional(delta_time,state)
        if sample is None:
            return self.predict()
        return self.map_normal(sample)

    def _parms(self,conditional):
        delta_time = conditional.delta_time
        unset = delta_time.isnan()
        dt = torch.where(unset,torch.zeros_like(delta_time),delta_time).unsqueeze(-1)
        decay = (-self.damping*dt).exp()
        # (1-exp(-2*damping*dt))/(2*damping)
        variance_factor = expm1_div(-2.0*self.damping,dt,self.tol)
        std = self.sigma*variance_factor.clamp(min=0.0).sqrt()
        return unset.unsqueeze(-1), decay, std

    def _map_normal(self,sample,conditional):
        unset, decay, std = self._parms(conditional)
        state = conditional.state
        predicted = decay*state + std*sample
        return torch.where(unset,state,predicted)

    def predictive(self,conditional=None):
        conditional = self.resolve(conditional)
        unset, decay, std = self._parms(conditional)
        mean = decay*conditional.state
        std = torch.where(unset,torch.zeros_like(std),std).expand(mean.shape)
        if (std == 0).all():
            return Delta(mean)
        std = torch.where(std == 0,torch.full_like(std,self.tol),std)
        return torch.distributions.Normal(mean,std)
