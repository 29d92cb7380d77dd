# Licensed under a 3-clause BSD style license - see LICENSE.rst
import logging
import warnings
import click
from randomdist import __version__


# We implement the --version following the example from here:
# http://click.pocoo.org/5/options/#callbacks-and-eager-options
def print_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    print(f"randomdist version {__version__}")
    ctx.exit()


# http://click.pocoo.org/5/documentation/#help-parameter-customization
CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group("randomdist", context_settings=CONTEXT_SETTINGS)
@click.option(
    "--log-level",
    default="warning",
    help="Logging verbosity level.",
    type=click.Choice(["debug", "info", "warning", "error"]),
)
@click.option("--ignore-warnings", is_flag=True, help="Ignore warnings?")
@click.option(
    "--version",
    is_flag=True,
    callback=print_version,
    expose_value=False,
    is_eager=True,
    help="Print version and exit.",
)
def cli(log_level, ignore_warnings):  # noqa: D301
    """randomdist command line interface (CLI).

    Draw random numbers from Gaussian, GUE level spacing and Rayleigh
    distributions, or choose uniformly among words. Every sub-command
    prints one value per line.

    Use ``--help`` to see available sub-commands, as well as the available
    arguments and options for each sub-command.

    \b
    Examples
    --------

    \b
    $ randomdist --help
    $ randomdist --version
    $ randomdist gauss --mean 10 --stddev 3 -n 20
    $ randomdist gue --average 4 -n 20
    $ randomdist rayleigh --sigma 3 -n 20
    $ randomdist choice "cold cool warm hot" -n 20
    $ randomdist config --filename myconfig.yaml
    $ randomdist run --filename myconfig.yaml
    """
    logging.basicConfig(level=log_level.upper())

    if ignore_warnings:
        warnings.simplefilter("ignore")


def add_subcommands():
    from .sample import cli_choice, cli_gauss, cli_gue, cli_rayleigh

    cli.add_command(cli_gauss)
    cli.add_command(cli_gue)
    cli.add_command(cli_rayleigh)
    cli.add_command(cli_choice)

    from .run import cli_make_config, cli_run

    cli.add_command(cli_make_config)
    cli.add_command(cli_run)


add_subcommands()
