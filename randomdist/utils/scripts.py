# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Utilities to create scripts and command-line tools."""
import os.path
from pathlib import Path
import yaml

__all__ = [
    "from_yaml",
    "make_path",
    "read_yaml",
    "split_words",
    "to_yaml",
    "write_yaml",
]

YAML_FORMAT = dict(sort_keys=False, indent=4, width=80, default_flow_style=False)


def split_words(text):
    """Split a string into a list of words.

    Any run of whitespace separates two words, leading and trailing
    whitespace is ignored.

    Parameters
    ----------
    text : str
        Text to split.

    Returns
    -------
    words : list of str
        Words, in order of appearance.

    Examples
    --------
    >>> from randomdist.utils.scripts import split_words
    >>> split_words(" cold  cool\twarm hot ")
    ['cold', 'cool', 'warm', 'hot']
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, got {type(text)}")

    return text.split()


def from_yaml(text):
    """Read YAML string.

    Parameters
    ----------
    text : str
        yaml str

    Returns
    -------
    data : dict
        YAML content as a dictionary.
    """
    data = yaml.safe_load(text)
    return {} if data is None else data


def read_yaml(filename, logger=None):
    """Read YAML file.

    Parameters
    ----------
    filename : `~pathlib.Path`
        Filename.
    logger : `~logging.Logger`
        Logger.

    Returns
    -------
    data : dict
        YAML file content as a dictionary.
    """
    path = make_path(filename)
    if logger is not None:
        logger.info(f"Reading {path}")

    text = path.read_text()
    return from_yaml(text)


def to_yaml(dictionary, sort_keys=False):
    """Dictionary to yaml string.

    Parameters
    ----------
    dictionary : dict
        Python dictionary.
    sort_keys : bool, optional
        Whether to sort keys. Default is False.
    """
    yaml_format = YAML_FORMAT.copy()
    yaml_format["sort_keys"] = sort_keys
    return yaml.safe_dump(dictionary, **yaml_format)


def write_yaml(text, filename, logger=None, overwrite=False):
    """Write YAML file.

    Parameters
    ----------
    text : str
        yaml str
    filename : `~pathlib.Path`
        Filename.
    logger : `~logging.Logger`, optional
        Logger. Default is None.
    overwrite : bool, optional
        Overwrite existing file. Default is False.
    """
    path = make_path(filename)
    path.parent.mkdir(exist_ok=True)
    if path.exists() and not overwrite:
        raise IOError(f"File exists already: {path}")
    if logger is not None:
        logger.info(f"Writing {path}")
    path.write_text(text)


def make_path(path):
    """Expand environment variables on `~pathlib.Path` construction.

    Parameters
    ----------
    path : str, `pathlib.Path`
        Path to expand.
    """
    if path is None:
        return None
    else:
        return Path(os.path.expandvars(path))
