"""Table-driven single-precision sine.

The period is folded onto ``[0, 1)``, scaled onto the 256-sample table and
the result is interpolated with a four-point cubic through the samples
around the input. Every intermediate is a ``numpy.float32``.
"""

import logging

import numpy as np

from .data.sin_table import SIN_TABLE, TABLE_SIZE

__all__ = ["sin"]

_log = logging.getLogger(__name__)

_INV_TWO_PI = np.float32(0.159154943092)
_SIZE = np.float32(TABLE_SIZE)
_MAX_INDEX = TABLE_SIZE - 1
_ZERO = np.float32(0.0)
_ONE = np.float32(1.0)
_HALF = np.float32(0.5)
_SIXTH = np.float32(0.166666667)
_THIRD = np.float32(0.3333333333333)
_NAN = np.float32(np.nan)


def sin(x):
    """Approximate ``sin(x)`` for ``x`` in radians.

    The input is narrowed to float32. The absolute error against the true
    sine stays below 1e-4 while ``x * (1 / 2pi)`` still carries enough
    fraction bits; for very large ``|x|`` the folded phase loses precision.
    NaN and infinite inputs return NaN.
    """
    x = np.float32(x)
    if not np.isfinite(x):
        return _NAN

    # scale to periods and floor toward -inf
    u = x * _INV_TWO_PI
    n = np.trunc(u)
    if x < _ZERO:
        n = n - _ONE
    u = u - n

    pos = _SIZE * u
    index = int(pos)
    # u rounds up to 1.0 for tiny negative inputs and to 2.0 once the
    # period count outgrows the float32 mantissa; the last window is
    # [255, 258], so anything past it lands on fract == 1 at index 255
    if index < 0:
        _log.debug("table index %d clamped to 0 (x=%r)", index, x)
        index = 0
        fract = _ZERO
    elif index > _MAX_INDEX:
        _log.debug("table index %d clamped to %d (x=%r)", index, _MAX_INDEX, x)
        index = _MAX_INDEX
        fract = _ONE
    else:
        fract = pos - np.float32(index)

    a, b, c, d = SIN_TABLE[index : index + 4]

    fractsq = fract * fract
    fractby2 = fract * _HALF
    fractby6 = fract * _SIXTH
    fractby3 = fract * _THIRD
    fractsqby2 = fractsq * _HALF
    frby2xfrsq = fractby2 * fractsq
    frby6xfrsq = fractby6 * fractsq
    oneminusfractby2 = _ONE - fractby2

    wb = fractsqby2 - fractby3
    wc = fractsqby2 + fract
    wa = wb - frby6xfrsq
    wb = frby2xfrsq - fractsq
    wc = wc - frby2xfrsq
    wd = frby6xfrsq - fractby6
    wb = wb + oneminusfractby2

    return (wa * a + b * wb) + (c * wc + d * wd)
