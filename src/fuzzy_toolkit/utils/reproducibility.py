"""
Provides functions that help guarantee reproducibility, such as loading the configuration
settings that control how membership degrees are evaluated and named.
"""

import os
import random
import logging
import pathlib
from functools import lru_cache
from typing import Union

import torch
import numpy as np
from yacs.config import CfgNode as Config


logger = logging.getLogger(__name__)


def set_rng(seed: int) -> None:
    """
    Set the random number generator.

    Args:
        seed: The seed to use for the random number generator.

    Returns:
        None
    """
    os.environ["PYTHONHASHSEED"] = str(seed)
    torch.manual_seed(seed)
    random.seed(seed)
    np.random.seed(seed)


def path_to_package_root() -> pathlib.Path:
    """
    Return the path to the root of the package (i.e., the 'fuzzy_toolkit' directory).

    Returns:
        The path to the root of the package.
    """
    return pathlib.Path(__file__).parent.parent


def read_configuration(file_path: Union[str, pathlib.Path]) -> Config:
    """
    Read a *.yaml configuration file without merging it into anything.

    Args:
        file_path: The location of the configuration file.

    Returns:
        The configuration settings found in the file.
    """
    with open(file_path, "r", encoding="utf-8") as file:
        return Config.load_cfg(file)


@lru_cache(maxsize=None)
def load_configuration(
    file_name: Union[str, pathlib.Path] = "default_configuration.yaml"
) -> Config:
    """
    Load and return the default configuration that should be used, if another overriding
    configuration is not used in its place. The returned configuration is frozen.

    Args:
        file_name: Union[str, pathlib.Path] Either a file name (str) where the function will look up
        the *.yaml configuration file in the package's 'configurations' directory, or a
        pathlib.Path where the object redirects the function to a specific location.

    Returns:
        The configuration settings.
    """
    if isinstance(file_name, pathlib.Path):
        file_path = file_name
    else:
        file_path = path_to_package_root() / "configurations" / file_name
    logger.debug("Loading the configuration from %s", file_path)
    config = read_configuration(file_path)
    config.freeze()
    return config


def load_and_override_default_configuration(path: pathlib.Path) -> Config:
    """
    Load the default configuration file and override it with the configuration file given by
    'path'. Only settings that already exist in the default configuration may be overridden.

    Args:
        path: A file path to the configuration file that should be merged
        with the default configuration.

    Returns:
        The custom configuration settings (frozen).
    """
    # the default configuration is cached and frozen, so work on a copy of it
    configuration = load_configuration().clone()
    configuration.defrost()
    configuration.merge_from_other_cfg(read_configuration(path))
    configuration.freeze()
    return configuration


def tensor_dtype(config: Config = None) -> torch.dtype:
    """
    Map the configured name of the floating point type to its torch.dtype.

    Args:
        config: The configuration settings; defaults to the default configuration.

    Returns:
        The torch.dtype that membership degrees are evaluated with.
    """
    if config is None:
        config = load_configuration()
    dtype = getattr(torch, config.tensor.dtype, None)
    if not isinstance(dtype, torch.dtype) or not dtype.is_floating_point:
        raise ValueError(
            f"The configured tensor dtype must name a floating point torch.dtype, "
            f"but got {config.tensor.dtype}"
        )
    return dtype
