"""
Configuration Loader Infrastructure

This module provides a unified interface for loading and validating the
configuration files that back the Digital Presence engine.

Taxonomy:
- registry/: static catalogs consulted by the engine (governance roles,
  governance levels, onboarding steps)

All human-edited configs are YAML with strict pydantic validation.
"""

import hashlib
import os
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_ROOT_ENV = "DIGITAL_PRESENCE_CONFIG_ROOT"

# Configuration load instrumentation
_loaded_configs: Dict[str, Dict[str, Any]] = defaultdict(lambda: {"count": 0, "sha256": None})
_config_recording_enabled = True


class ConfigError(Exception):
    """Base exception for configuration errors."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""
    pass


class ConfigNotFoundError(ConfigError):
    """Raised when configuration file is not found."""
    pass


def get_config_root() -> Path:
    """
    Get the root directory for configuration files.

    The DIGITAL_PRESENCE_CONFIG_ROOT environment variable overrides the
    configs/ directory shipped with the package.

    Returns:
        Path to configs/ directory
    """
    override = os.environ.get(CONFIG_ROOT_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "configs"


def get_registry_path(filename: str) -> Path:
    """
    Get path to registry configuration file.

    Args:
        filename: Registry filename (e.g., "governance.yaml")

    Returns:
        Full path to registry file
    """
    return get_config_root() / "registry" / filename


def record_config_load(path: Path, sha256: Optional[str] = None) -> None:
    """Record a config file load for reachability reporting."""
    if not _config_recording_enabled:
        return
    root = get_config_root()
    rel_path = str(path.relative_to(root)) if path.is_relative_to(root) else str(path)
    if sha256 is None:
        sha256 = compute_yaml_sha256(path)
    entry = _loaded_configs[rel_path]
    entry["count"] += 1
    entry["sha256"] = sha256


def reset_config_load_records() -> None:
    """Clear all recorded config loads."""
    _loaded_configs.clear()


def get_config_load_records() -> Dict[str, Dict[str, Any]]:
    """Get a copy of recorded config loads."""
    return {key: dict(value) for key, value in _loaded_configs.items()}


def enable_config_recording(enabled: bool = True) -> None:
    """Enable or disable config load recording."""
    global _config_recording_enabled
    _config_recording_enabled = enabled


def clear_config_caches() -> None:
    """Clear all LRU caches in config loaders to force fresh loads."""
    from .registry.governance import load_governance_catalog

    cached_functions = [
        load_governance_catalog,
    ]

    for func in cached_functions:
        cache_clear = getattr(func, "cache_clear", None)
        if cache_clear is not None and callable(cache_clear):
            cache_clear()


def compute_yaml_sha256(path: Path) -> str:
    """
    Compute SHA256 hash of YAML file bytes for deterministic hashing.

    Args:
        path: Path to YAML file

    Returns:
        SHA256 hex digest
    """
    raw_bytes = path.read_bytes()
    return hashlib.sha256(raw_bytes).hexdigest()


def load_yaml(path: Path) -> dict:
    """
    Load YAML file with proper error handling.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dict

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigValidationError: If YAML is malformed or not a mapping
    """
    if not path.exists():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        raw_bytes = path.read_bytes()
        sha256 = hashlib.sha256(raw_bytes).hexdigest()
        record_config_load(path, sha256)
        data = yaml.safe_load(raw_bytes)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to load config from {path}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Config root must be a mapping in {path}, got {type(data).__name__}")
    return data


# Note: registry loaders are imported lazily to avoid circular imports
__all__ = [
    # Registry (imported lazily)
    'load_governance_catalog', 'GovernanceCatalogRegistry',

    # Errors
    'ConfigError', 'ConfigValidationError', 'ConfigNotFoundError',

    # Utilities
    'load_yaml', 'compute_yaml_sha256', 'get_config_root', 'get_registry_path',

    # Instrumentation
    'record_config_load', 'reset_config_load_records', 'get_config_load_records',
    'enable_config_recording', 'clear_config_caches',
]


def __getattr__(name):
    if name == 'load_governance_catalog':
        from .registry.governance import load_governance_catalog
        return load_governance_catalog
    elif name == 'GovernanceCatalogRegistry':
        from .registry.governance import GovernanceCatalogRegistry
        return GovernanceCatalogRegistry
    else:
        raise AttributeError(f"module 'digital_presence.config' has no attribute '{name}'")
