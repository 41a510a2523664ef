import numpy as np


def bitcast(eltype, value):
    """Reinterpret the bits of ``value`` as ``eltype`` without conversion."""
    arr = np.asarray(value)
    eltype = np.dtype(eltype)
    if arr.dtype.itemsize != eltype.itemsize:
        raise TypeError(
            f"cannot bitcast {arr.dtype.name} to {eltype.name}: "
            f"element sizes differ ({arr.dtype.itemsize} != {eltype.itemsize})"
        )
    return arr.view(eltype)


def ulp_distance(actual, expected):
    """Number of float32 steps between ``actual`` and ``expected``."""
    bits = [
        bitcast(np.uint32, np.asarray(v, dtype=np.float32)).astype(np.int64)
        for v in (actual, expected)
    ]
    # map sign-magnitude onto a monotonic integer line, +0 and -0 coincide
    ordered = [np.where(b & 0x80000000, -(b & 0x7FFFFFFF), b) for b in bits]
    return np.abs(ordered[0] - ordered[1])
