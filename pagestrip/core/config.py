"""YAML configuration profiles for pagestrip.

Profiles are loaded via the Hydra Compose API from
``pagestrip/core/configs/`` and validated into a ``PaginationConfig``.

The profile is selected by the ``config_name`` argument, else by
``PAGESTRIP_CONFIG_NAME`` (default: ``"default"``). Hydra overrides
(``key=value``) customize individual options.

Usage::

    from pagestrip.core.config import load_pagination_config

    config = load_pagination_config("bootstrap", overrides=["selectable_window=7"])
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from hydra import compose, initialize_config_dir
from hydra.errors import HydraException, MissingConfigException
from omegaconf import OmegaConf
from pydantic import ValidationError

from pagestrip.core.errors import ConfigurationError
from pagestrip.core.types import PaginationConfig

logger = logging.getLogger(__name__)

_CONFIG_DIR = str(Path(__file__).parent / "configs")

DEFAULT_CONFIG_NAME = "default"


def _load_yaml_config(config_name: str, overrides: list[str] | None = None) -> dict[str, object]:
    """Compose a YAML profile into a plain dict.

    Returns an empty dict if the profile does not exist.

    Raises:
        ConfigurationError: an override could not be applied.
    """
    abs_dir = os.path.abspath(_CONFIG_DIR)
    try:
        with initialize_config_dir(version_base=None, config_dir=abs_dir):
            cfg = compose(config_name=config_name, overrides=overrides or [])
    except MissingConfigException:
        logger.debug("Config profile %r not found, falling back to defaults", config_name)
        return {}
    except HydraException as exc:
        raise ConfigurationError(f"Invalid config overrides {overrides!r}: {exc}") from exc

    container = OmegaConf.to_container(cfg, resolve=True)
    if isinstance(container, dict):
        return {str(key): value for key, value in container.items()}
    return {}


def load_pagination_config(
    config_name: str | None = None,
    overrides: list[str] | None = None,
) -> PaginationConfig:
    """Load a profile and return a validated ``PaginationConfig``."""
    name = config_name or os.environ.get("PAGESTRIP_CONFIG_NAME", DEFAULT_CONFIG_NAME)
    name = name.strip().lower()
    yaml = _load_yaml_config(name, overrides)
    logger.debug("Loaded pagination profile %r with %d option(s)", name, len(yaml))
    try:
        return PaginationConfig.model_validate(yaml)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid pagination profile {name!r}: {exc}") from exc
