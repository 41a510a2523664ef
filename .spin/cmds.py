import os
import pathlib
import sys
import click
import spin

curdir = pathlib.Path(__file__).parent
rootdir = curdir.parent


@click.command()
@click.option(
    "-m",
    "markexpr",
    metavar="MARKEXPR",
    default="not slow",
    help="Run tests with the given markers, `full` runs everything",
)
@click.argument("pytest_args", nargs=-1)
def test(*, markexpr, pytest_args):
    """🔧 Run the test suite

    By default the `slow` sweeps are skipped. To run the full test suite, use
    `spin test -m full`
    """
    if "-m" not in pytest_args and markexpr != "full":
        pytest_args = ("-m", markexpr) + pytest_args

    env = os.environ
    env["PYTHONWARNINGS"] = env.get("PYTHONWARNINGS", "all")
    spin.util.run(
        [sys.executable, "-m", "pytest", str(rootdir / "fastsin")] + list(pytest_args),
    )


@click.command()
@click.option("-p", "--periods", default=8, show_default=True, help="Periods to sweep")
@click.option(
    "-s", "--samples", default=100001, show_default=True, help="Points in the sweep"
)
def accuracy(*, periods, samples):
    """📈 Measure the worst absolute error of fastsin.sin against numpy.sin"""
    import numpy as np
    import fastsin

    half = periods * np.pi
    xs = np.linspace(-half, half, samples).astype(np.float32)
    actual = np.array([fastsin.sin(x) for x in xs], dtype=np.float64)
    err = np.abs(actual - np.sin(xs.astype(np.float64)))
    worst = int(np.argmax(err))
    click.echo(
        f"fastsin {fastsin.__version__}: {samples} samples over "
        f"[{-half:.6g}, {half:.6g}]"
    )
    click.echo(f"max abs error {err[worst]:.3e} at x={float(xs[worst])!r}")
    click.echo(f"rms error     {float(np.sqrt(np.mean(err**2))):.3e}")
