# Licensed under a 3-clause BSD style license - see LICENSE.rst
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, List, Literal, Optional, Union
import yaml
from pydantic import BaseModel, ConfigDict, Field
from randomdist.utils.scripts import read_yaml, to_yaml, write_yaml

__all__ = ["SamplingConfig"]

log = logging.getLogger(__name__)

# numpy.random.RandomState only accepts seeds in [0, 2**32)
SeedType = Annotated[int, Field(ge=0, lt=2**32)]


def deep_update(d, u):
    """Recursively update a nested dictionary.

    Taken from: https://stackoverflow.com/a/3233356/19802442
    """
    for k, v in u.items():
        if isinstance(v, Mapping):
            d[k] = deep_update(d.get(k, {}), v)
        else:
            d[k] = v
    return d


class RandomDistBaseConfig(BaseModel):
    """Base configuration class.

    Provides Pydantic model settings.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        validate_default=True,
    )


class LogConfig(RandomDistBaseConfig):
    """Configuration for logging.

    Attributes
    ----------
    level : str
        Logging level (e.g., 'info', 'debug').
    filename : str
        Log file path.
    filemode : str
        File mode ('w' for overwrite, 'a' for append).
    format : str
        Logging format string.
    datefmt : str
        Format for timestamps.
    """

    level: str = "info"
    filename: Optional[Path] = None
    filemode: Optional[str] = None
    format: Optional[str] = None
    datefmt: Optional[str] = None


class GeneralConfig(RandomDistBaseConfig):
    """Top-level general configuration.

    Attributes
    ----------
    log : `LogConfig`
        Logging configuration.
    random_state : int or "random-seed"
        Seed of the random state in [0, 2**32), or "random-seed".
    n_samples : int
        Number of samples drawn from each distribution by ``randomdist run``.
    """

    log: LogConfig = LogConfig()
    random_state: Union[SeedType, Literal["random-seed"]] = "random-seed"
    n_samples: int = Field(default=20, ge=1)


class GaussConfig(RandomDistBaseConfig):
    mean: float = 0.0
    stddev: float = Field(default=1.0, gt=0)


class EnsembleSpacingConfig(RandomDistBaseConfig):
    average: float = Field(default=4.0, ge=0.125)


class RayleighConfig(RandomDistBaseConfig):
    sigma: float = Field(default=1.0, gt=0)


class ChoiceConfig(RandomDistBaseConfig):
    items: List[str] = Field(default=["cold", "cool", "warm", "hot"], min_length=1)


class SamplingConfig(RandomDistBaseConfig):
    """Sampling run configuration.

    It can be read from or written to a YAML file using `.read()` and `.write()`,
    respectively.

    Attributes
    ----------
    general : `GeneralConfig`
        General settings for logging, seeding and number of samples.
    gauss : `GaussConfig`
        Parameters of the `~randomdist.distributions.GaussianGenerator`.
    gue : `EnsembleSpacingConfig`
        Parameters of the `~randomdist.distributions.EnsembleSpacingGenerator`.
    rayleigh : `RayleighConfig`
        Parameters of `~randomdist.distributions.rayleigh_sample`.
    choice : `ChoiceConfig`
        Items passed to `~randomdist.distributions.uniform_choice`.

    Examples
    --------
    >>> from randomdist.config import SamplingConfig
    >>> config = SamplingConfig()
    >>> config.gauss = {"mean": 10, "stddev": 3}
    >>> print(config.gauss.stddev)
    3.0
    """

    general: GeneralConfig = GeneralConfig()
    gauss: GaussConfig = GaussConfig()
    gue: EnsembleSpacingConfig = EnsembleSpacingConfig()
    rayleigh: RayleighConfig = RayleighConfig()
    choice: ChoiceConfig = ChoiceConfig()

    def __str__(self):
        """Display settings in pretty YAML format."""
        info = self.__class__.__name__ + "\n\n\t"
        data = self.to_yaml()
        data = data.replace("\n", "\n\t")
        info += data
        return info.expandtabs(tabsize=4)

    @classmethod
    def read(cls, path):
        """Read from YAML file.

        Parameters
        ----------
        path : str
            input filepath
        """
        config = read_yaml(path, logger=log)
        return SamplingConfig(**config)

    @classmethod
    def from_yaml(cls, config_str):
        """Create from YAML string.

        Parameters
        ----------
        config_str : str
            yaml str
        """
        settings = yaml.safe_load(config_str) or {}
        return SamplingConfig(**settings)

    def write(self, path, overwrite=False):
        """Write to YAML file.

        Parameters
        ----------
        path : `pathlib.Path` or str
            Path to write files.
        overwrite : bool, optional
            Overwrite existing file. Default is False.
        """
        yaml_str = self.to_yaml()
        write_yaml(yaml_str, path, logger=log, overwrite=overwrite)

    def to_yaml(self):
        """Convert to YAML string."""
        data = json.loads(self.model_dump_json())
        return to_yaml(data)

    def set_logging(self):
        """Set logging config.

        Calls ``logging.basicConfig``, i.e. adjusts global logging state.
        """
        self.general.log.level = self.general.log.level.upper()
        logging.basicConfig(**self.general.log.model_dump())
        log.info("Setting logging config: {!r}".format(self.general.log.model_dump()))

    def update(self, config=None):
        """Update config with provided settings.

        Parameters
        ----------
        config : str or `SamplingConfig` object, optional
            Configuration settings provided in dict() syntax. Default is None.
        """
        if isinstance(config, str):
            other = SamplingConfig.from_yaml(config)
        elif isinstance(config, SamplingConfig):
            other = config
        else:
            raise TypeError(f"Invalid type: {config}")

        config_new = deep_update(
            self.model_dump(exclude_defaults=True),
            other.model_dump(exclude_defaults=True),
        )
        return SamplingConfig(**config_new)
