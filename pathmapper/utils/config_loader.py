"""
Utility functions for loading path mapper configuration.
"""
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging
import yaml

from ..mappers.code_path_mapper import CommonCodePathMapper
from ..models.config import PathMapperConfig

logger = logging.getLogger(__name__)


def default_config() -> Dict[str, Any]:
    return {
        'path_mapper': {
            'prefix': '',
            'append_package': False,
            'formatter': None
        }
    }


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration, merging a YAML file over the defaults.

    An empty section (e.g. "path_mapper:" with nothing below it) keeps its
    defaults.

    Args:
        config_path: Path to a YAML configuration file; ignored if missing

    Returns:
        Configuration dictionary

    Raises:
        ValueError: If the file or one of its known sections is not a mapping
    """
    config = default_config()

    if config_path and Path(config_path).exists():
        with open(config_path, 'r') as f:
            user_config = yaml.safe_load(f) or {}
        if not isinstance(user_config, dict):
            raise ValueError(f"Configuration file {config_path} must contain a mapping")
        for key, value in user_config.items():
            if isinstance(config.get(key), dict):
                if value is None:
                    continue
                if not isinstance(value, dict):
                    raise ValueError(f"Section '{key}' in {config_path} must be a mapping, got {type(value).__name__}")
                config[key].update(value)
            else:
                config[key] = value
        logger.info(f"Loaded configuration from {config_path}")
    elif config_path:
        logger.warning(f"Configuration file {config_path} not found, using defaults")

    return config


def build_path_mapper(config: Dict[str, Any]) -> CommonCodePathMapper:
    """
    Create a path mapper from the 'path_mapper' section of a configuration.

    Raises:
        pydantic.ValidationError: If the section has invalid values
        ValueError: If the section is not a mapping or the formatter
            language is not supported
    """
    section = config.get('path_mapper') or {}
    if not isinstance(section, dict):
        raise ValueError(f"Section 'path_mapper' must be a mapping, got {type(section).__name__}")
    mapper_config = PathMapperConfig(**section)
    return CommonCodePathMapper.from_config(mapper_config)
