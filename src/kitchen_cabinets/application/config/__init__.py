"""Project file schema, loading and validation.

Public API:
    - ProjectConfiguration: Root configuration model
    - CabinetSpecConfig: One cabinet in the project
    - SheetConfig: Sheet stock for cutting layouts
    - OutputConfig: Output format configuration
    - load_config / load_config_from_dict: Parse and validate a project
    - ConfigError: Exception for configuration errors
    - validate_config: Catalog checks and cabinetmaking advisories
    - config_to_requests: Convert a project into CabinetRequest DTOs

Example:
    >>> from pathlib import Path
    >>> from kitchen_cabinets.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"{len(config.cabinets)} cabinets")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from kitchen_cabinets.application.config.adapter import (
    cabinet_config_to_request,
    config_to_formats,
    config_to_pricing,
    config_to_requests,
    config_to_sheet,
)
from kitchen_cabinets.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from kitchen_cabinets.application.config.schema import (
    EXPORT_FORMATS,
    SUPPORTED_VERSIONS,
    CabinetSpecConfig,
    OutputConfig,
    PriceListConfig,
    ProjectConfiguration,
    SheetConfig,
)
from kitchen_cabinets.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_cabinetmaking_advisories,
    check_catalog_references,
    validate_config,
)

__all__ = [
    "EXPORT_FORMATS",
    "SUPPORTED_VERSIONS",
    "CabinetSpecConfig",
    "ConfigError",
    "OutputConfig",
    "PriceListConfig",
    "ProjectConfiguration",
    "SheetConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "cabinet_config_to_request",
    "check_cabinetmaking_advisories",
    "check_catalog_references",
    "config_to_formats",
    "config_to_pricing",
    "config_to_requests",
    "config_to_sheet",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
