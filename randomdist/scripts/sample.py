# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Command line tools drawing random numbers from one distribution."""
import logging
import click
from randomdist.distributions import (
    EnsembleSpacingGenerator,
    GaussianGenerator,
    rayleigh_sample,
    uniform_choice,
)
from randomdist.utils.check import InvalidParameterError, check_finite
from randomdist.utils.random import get_random_state
from randomdist.utils.scripts import split_words

__all__ = ["cli_choice", "cli_gauss", "cli_gue", "cli_rayleigh"]

log = logging.getLogger(__name__)


def parse_random_state(ctx, param, value):
    """Turn the ``--random-state`` option into a `~numpy.random.RandomState`."""
    try:
        value = int(value)
    except ValueError:
        pass

    try:
        return get_random_state(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


def random_state_option(func):
    return click.option(
        "--random-state",
        default="random-seed",
        show_default=True,
        callback=parse_random_state,
        help="Integer seed, 'random-seed' or 'global-rng'.",
    )(func)


def n_samples_option(func):
    return click.option(
        "-n",
        "--n-samples",
        default=20,
        show_default=True,
        type=click.IntRange(min=1),
        help="Number of random numbers to draw.",
    )(func)


def echo_samples(draw, n_samples, param_hint):
    """Print ``n_samples`` values returned by ``draw()``, one per line.

    An `InvalidParameterError` raised while drawing is reported as a bad
    value of the option named by ``param_hint``.
    """
    try:
        values = [draw() for _ in range(n_samples)]
    except InvalidParameterError as exc:
        raise click.BadParameter(str(exc), param_hint=param_hint) from exc

    for value in values:
        click.echo(value)


@click.command(name="gauss")
@click.option("--mean", default=0.0, show_default=True, help="Mean.")
@click.option("--stddev", default=1.0, show_default=True, help="Standard deviation.")
@n_samples_option
@random_state_option
def cli_gauss(mean, stddev, n_samples, random_state):
    """Draw Gaussian random numbers."""
    try:
        mean = check_finite(mean, "mean")
    except InvalidParameterError as exc:
        raise click.BadParameter(str(exc), param_hint="'--mean'") from exc

    try:
        gauss = GaussianGenerator(mean=mean, stddev=stddev, random_state=random_state)
    except InvalidParameterError as exc:
        raise click.BadParameter(str(exc), param_hint="'--stddev'") from exc

    echo_samples(gauss.sample, n_samples, param_hint="'--stddev'")


@click.command(name="gue")
@click.option("--average", default=4.0, show_default=True, help="Average spacing.")
@n_samples_option
@random_state_option
def cli_gue(average, n_samples, random_state):
    """Draw GUE level spacing random integers."""
    try:
        gue = EnsembleSpacingGenerator(average=average, random_state=random_state)
    except InvalidParameterError as exc:
        raise click.BadParameter(str(exc), param_hint="'--average'") from exc

    log.info(f"Sampling integers 1 .. {gue.n_max}")
    echo_samples(gue.sample, n_samples, param_hint="'--average'")


@click.command(name="rayleigh")
@click.option("--sigma", default=1.0, show_default=True, help="Scale parameter.")
@n_samples_option
@random_state_option
def cli_rayleigh(sigma, n_samples, random_state):
    """Draw Rayleigh random numbers."""
    echo_samples(
        lambda: rayleigh_sample(sigma, random_state=random_state),
        n_samples,
        param_hint="'--sigma'",
    )


@click.command(name="choice")
@click.argument("items", nargs=-1)
@n_samples_option
@random_state_option
def cli_choice(items, n_samples, random_state):  # noqa: D301
    """Choose uniformly among ITEMS.

    Each item is split on whitespace, so a single quoted argument can hold
    several words.

    \b
    Examples
    --------

    \b
    $ randomdist choice cold cool warm hot
    $ randomdist choice "cold cool warm hot" -n 5
    """
    words = [word for item in items for word in split_words(item)]
    if len(words) == 1:
        log.warning(f"Only one item to choose from: {words[0]!r}")

    echo_samples(
        lambda: uniform_choice(words, random_state=random_state),
        n_samples,
        param_hint="ITEMS",
    )
