import numpy as np
import pytest


@pytest.fixture(params=[float, np.float32, np.float64], ids=lambda tp: tp.__name__)
def scalar_type(request):
    """Scalar types callers are expected to pass into the routines."""
    yield request.param
