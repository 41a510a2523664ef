"""Assertion helpers shared by the test suites."""

import numpy as np

from .utils import bitcast, ulp_distance

__all__ = ["bitcast", "ulp_distance", "assert_ulp", "assert_close"]


def _report(header, rows, per_line):
    lines = []
    for i in range(0, len(rows), per_line):
        lines.append(" ".join(rows[i : i + per_line]))
    return header + "\n " + "\n ".join(lines) + "\n"


def assert_ulp(actual, expected, input, max_ulp=1, per_line=4):
    __tracebackhide__ = True  # Hide traceback for py.test
    actual, expected, input = np.broadcast_arrays(
        *(np.atleast_1d(np.asarray(v, dtype=np.float32)) for v in (actual, expected, input))
    )
    ulp = np.atleast_1d(ulp_distance(actual, expected))
    if np.any(ulp > max_ulp):
        rows = [
            str((float(input[i]), float(actual[i]), float(expected[i]), int(ul)))
            for i, ul in enumerate(ulp)
            if ul > max_ulp
        ]
        raise AssertionError(
            _report(
                f"Expected ULP distance {max_ulp}, worst {int(ulp.max())}, "
                "interleaved(input, actual, expected, ulp) as follow:",
                rows,
                per_line,
            )
        )


def assert_close(actual, expected, input, atol, per_line=4):
    __tracebackhide__ = True  # Hide traceback for py.test
    actual, expected, input = np.broadcast_arrays(
        *(np.atleast_1d(np.asarray(v, dtype=np.float64)) for v in (actual, expected, input))
    )
    err = np.abs(actual - expected)
    # NaN never compares below atol
    bad = ~(err <= atol)
    if np.any(bad):
        rows = [
            str((float(input[i]), float(actual[i]), float(expected[i]), float(err[i])))
            for i in np.flatnonzero(bad)
        ]
        raise AssertionError(
            _report(
                f"Expected absolute error {atol}, worst {float(np.max(err))}, "
                "interleaved(input, actual, expected, error) as follow:",
                rows,
                per_line,
            )
        )
