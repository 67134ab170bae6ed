import os
import sys

import pytest

# Get the path to the project root (one level up from 'tests')
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
src_path = os.path.join(project_root, 'src')

# Add 'src' to sys.path
sys.path.insert(0, src_path)

from quatkit.sampling import Sampler  # noqa: E402

# Number of seeded samples used by the property-style tests
N_SAMPLES = 50


@pytest.fixture
def sampler():
    """Deterministic sampler for reproducible property checks."""
    return Sampler(seed=42)
