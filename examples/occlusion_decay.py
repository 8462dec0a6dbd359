from matplotlib import pyplot as plt
import numpy as np
import torch
from process_models import OcclusionProcessModel

# Occlusion probability of a pixel after its last observation, for a few calibrations.
# Every curve starts at the observed value and relaxes to p_occluded_visible/(1-c).

dt = torch.linspace(0.0, 10.0, 500, dtype=torch.float64)
calibrations = [(0.1, 0.7), (0.1, 0.9), (0.02, 0.98)]

for p_ov, p_oo in calibrations:
    model = OcclusionProcessModel(p_ov, p_oo, verbose=True)
    for p in [0.0, 1.0]:
        plt.plot(dt.numpy(), model.propagate(p, dt).numpy(), label='p_ov=%.2f p_oo=%.2f p0=%.0f' % (p_ov, p_oo, p))
    plt.axhline(model.stationary_probability().item(), color='k', linestyle=':')

plt.xlabel('time since last observation (s)')
plt.ylabel('occlusion probability')
plt.legend()
plt.show()

# a per pixel model: one chain per pixel of a small depth image
height, width = 4, 6
p_ov = torch.rand(height, width)*0.2
p_oo = 0.8 + torch.rand(height, width)*0.19
pixels = OcclusionProcessModel(p_ov, p_oo, batch_shape=(height, width))
occlusion = torch.zeros(height, width, dtype=torch.float64)
occlusion[1:3, 2:4] = 1.0
last_seen = np.full((height, width), np.nan)  # never observed
last_seen[1:3, 2:4] = 0.0
occlusion = pixels.propagate(occlusion, torch.as_tensor(1.0 - last_seen))
plt.imshow(occlusion.numpy())
plt.colorbar()
plt.show()
