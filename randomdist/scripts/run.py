# Licensed under a 3-clause BSD style license - see LICENSE.rst
import logging
import click
from pydantic import ValidationError
from randomdist.config import SamplingConfig
from randomdist.distributions import (
    EnsembleSpacingGenerator,
    GaussianGenerator,
    rayleigh_sample,
    uniform_choice,
)
from randomdist.utils.random import get_random_state

__all__ = ["cli_make_config", "cli_run", "run_sampling"]

log = logging.getLogger(__name__)


def run_sampling(config):
    """Draw samples from every distribution of a configuration.

    All generators share one random state, seeded from
    ``config.general.random_state``, and are sampled in the order
    gauss, gue, rayleigh, choice.

    Parameters
    ----------
    config : `~randomdist.config.SamplingConfig`
        Sampling configuration.

    Returns
    -------
    samples : dict
        Lists of samples, keyed by distribution name.
    """
    random_state = get_random_state(config.general.random_state)
    n_samples = config.general.n_samples

    gauss = GaussianGenerator(
        mean=config.gauss.mean,
        stddev=config.gauss.stddev,
        random_state=random_state,
    )
    gue = EnsembleSpacingGenerator(
        average=config.gue.average, random_state=random_state
    )

    samples = {}
    samples["gauss"] = [gauss.sample() for _ in range(n_samples)]
    samples["gue"] = [gue.sample() for _ in range(n_samples)]
    samples["rayleigh"] = [
        rayleigh_sample(config.rayleigh.sigma, random_state=random_state)
        for _ in range(n_samples)
    ]
    samples["choice"] = [
        uniform_choice(config.choice.items, random_state=random_state)
        for _ in range(n_samples)
    ]
    return samples


@click.command(name="config")
@click.option(
    "--filename",
    default="config.yaml",
    help="Filename to store the default configuration values.",
    show_default=True,
)
@click.option(
    "--overwrite", default=False, is_flag=True, help="Overwrite existing file."
)
def cli_make_config(filename, overwrite):
    """Writes default configuration file."""
    config = SamplingConfig()
    try:
        config.write(filename, overwrite=overwrite)
    except IOError as exc:
        raise click.ClickException(str(exc)) from exc
    log.info(f"Configuration file produced: {filename}")


@click.command(name="run")
@click.option(
    "--filename",
    default="config.yaml",
    help="Filename with configuration values.",
    show_default=True,
    type=click.Path(exists=True, dir_okay=False),
)
def cli_run(filename):
    """Draws the samples described by a configuration file.

    Prints one line per distribution, with the samples separated by spaces.
    """
    try:
        config = SamplingConfig.read(filename)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration {filename}:\n{exc}") from exc

    config.set_logging()

    for name, values in run_sampling(config).items():
        click.echo(f"{name}: " + " ".join(str(value) for value in values))
