# file: src/module5_dna_pipeline/config.py

"""
Configuration loading.

Defaults come from default_config.yaml next to this file; a user file is
merged over them key by key.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml

from .errors import DNAConfigurationError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def _get_default_config() -> Dict[str, Any]:
    """Hardcoded defaults, used when the packaged YAML file is missing."""
    return {
        "system": {
            "log_level": "INFO",
        },
        "framing": {
            "data_chunk_size": 100,
        },
        "analytics": {
            "cost_per_base": 0.10,
        },
    }


def _read_yaml(config_path: str) -> Dict[str, Any]:
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise DNAConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise DNAConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
    
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise DNAConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(config).__name__}"
        )
    return config


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file merged over the defaults.
    
    Args:
        config_path: Path to a YAML file, or None for defaults only
    
    Returns:
        Configuration dictionary
    
    Raises:
        DNAConfigurationError: If config_path is missing, unreadable or not a mapping
    """
    if os.path.exists(DEFAULT_CONFIG_PATH):
        defaults = _merge(_get_default_config(), _read_yaml(DEFAULT_CONFIG_PATH))
    else:
        defaults = _get_default_config()
    
    if config_path is None:
        return defaults
    
    if not os.path.exists(config_path):
        raise DNAConfigurationError(f"Config file not found: {config_path}")
    
    config = _merge(defaults, _read_yaml(config_path))
    logger.info("Loaded configuration from %s", config_path)
    
    return config


def resolve_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge a caller-supplied configuration dictionary over the defaults.
    
    Args:
        config: Partial configuration, or None for defaults only
    
    Returns:
        Complete configuration dictionary
    
    Raises:
        DNAConfigurationError: If config is not a mapping
    """
    if config is None:
        return load_config()
    if not isinstance(config, dict):
        raise DNAConfigurationError(
            f"Configuration must be a mapping, got {type(config).__name__}"
        )
    return _merge(load_config(), config)


def get_data_chunk_size(config: Optional[Dict[str, Any]]) -> int:
    """
    Read and validate framing.data_chunk_size.
    
    Missing keys fall back to the defaults.
    
    Raises:
        DNAConfigurationError: If the value is not a positive integer
    """
    config = resolve_config(config)
    
    try:
        value = config['framing']['data_chunk_size']
    except (KeyError, TypeError) as e:
        raise DNAConfigurationError(f"Missing required config key: {e}") from e
    
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise DNAConfigurationError(
            f"framing.data_chunk_size must be a positive integer, got {value!r}"
        )
    return value


def get_cost_per_base(config: Optional[Dict[str, Any]]) -> float:
    """
    Read and validate analytics.cost_per_base.
    
    Raises:
        DNAConfigurationError: If the value is not a non-negative number
    """
    config = resolve_config(config)
    
    try:
        value = config['analytics']['cost_per_base']
    except (KeyError, TypeError) as e:
        raise DNAConfigurationError(f"Missing required config key: {e}") from e
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise DNAConfigurationError(
            f"analytics.cost_per_base must be a non-negative number, got {value!r}"
        )
    return float(value)
