import torch

def expm1_rel(x,tol=1e-6):
    # expm1(x)/x, with the series 1 + x/2 when |x| < tol
    small = x.abs() < tol
    safe_x = torch.where(small,torch.ones_like(x),x)
    return torch.where(small, 1.0 + 0.5*x, torch.expm1(x)/safe_x)

def expm1_div(a,t,tol=1e-6):
    # (exp(a*t)-1)/a, equal to t at a == 0
    return t*expm1_rel(a*t,tol)

def powm1_ratio(c,log_c,t,tol=1e-6):
    # (c**t - 1)/(c - 1) = t * expm1(x)/x * log(c)/(c-1) with x = t*log(c)
    # c-1 is exact near 1, so log(c)/(c-1) only needs its limit at c == 1
    cm1 = c - 1.0
    unit = cm1 == 0
    safe_cm1 = torch.where(unit,torch.ones_like(cm1),cm1)
    log_ratio = torch.where(unit,torch.ones_like(cm1),log_c/safe_cm1)
    return t*expm1_rel(t*log_c,tol)*log_ratio

def as_delta_time(delta_time,dtype=torch.float64):
    # None and NaN both mean no time has elapsed since the first observation
    if delta_time is None:
        return torch.tensor(torch.nan,dtype=dtype)
    return torch.as_tensor(delta_time,dtype=dtype)
