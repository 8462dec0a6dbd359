import sys
import os
import pytest
import torch

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from process_models import OcclusionProcessModel


@pytest.fixture
def occlusion_model():
    # c = 0.8
    return OcclusionProcessModel(p_occluded_visible=0.1, p_occluded_occluded=0.9)


@pytest.fixture
def probabilities():
    return torch.linspace(0.0, 1.0, 11, dtype=torch.float64)
