import matplotlib

matplotlib.use("Agg")

import pytest

from core.param_builder import default_spec


@pytest.fixture
def tower_spec():
    """Default tower: 300 high, 60 -> 5 radius, 6 sections, 24 struts, 4 rings, 50 deg twist."""
    return default_spec(partition_mode="uniform")
