"""
hubbard_ed Test Configuration
"""

import pytest
import numpy as np


@pytest.fixture
def hubbard_2site():
    """2-site Hubbard model, t=1, U=2"""
    from hubbard_ed.core.hubbard_model import HubbardModel
    return HubbardModel(2, hopping_amplitude=1.0, interaction_strength=2.0)


@pytest.fixture
def hubbard_3site():
    """3-site fully connected Hubbard model, t=1, U=2"""
    from hubbard_ed.core.hubbard_model import HubbardModel
    return HubbardModel(3, hopping_amplitude=1.0, interaction_strength=2.0)


@pytest.fixture
def random_symmetric():
    """Random 6x6 real symmetric matrix"""
    rng = np.random.default_rng(42)
    A = rng.standard_normal((6, 6))
    return (A + A.T) / 2


def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
