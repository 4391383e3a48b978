"""Corpus file schema, loading and validation.

Public API:
    - CorpusConfiguration: Root configuration model
    - PanelConfig: Single panel model
    - load_config: Load a corpus file
    - load_config_from_dict: Load a configuration from a dictionary
    - save_config: Write a corpus file
    - ConfigError: Exception for corpus file errors
    - config_to_registry: Build a reconciled registry from a configuration
    - registry_to_config: Snapshot a registry as a configuration
    - validate_config: Advisory checks (clamping, shelf bounds, overlap)

Example:
    >>> from pathlib import Path
    >>> from corpus.application.config import config_to_registry, load_config
    >>>
    >>> registry = config_to_registry(load_config(Path("kitchen-base.json")))
"""

from corpus.application.config.adapter import (
    CURRENT_SCHEMA_VERSION,
    config_to_registry,
    registry_to_config,
)
from corpus.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    save_config,
)
from corpus.application.config.schema import (
    SUPPORTED_VERSIONS,
    CorpusConfiguration,
    PanelConfig,
)
from corpus.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "ConfigError",
    "CorpusConfiguration",
    "PanelConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_registry",
    "load_config",
    "load_config_from_dict",
    "registry_to_config",
    "save_config",
    "validate_config",
]
