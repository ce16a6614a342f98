"""
Default configuration for the rail-request library.

The goal of this module is to expose a single source of truth for every
setting that the library actually consumes. Each section mirrors one of the
dataclasses defined in ``rail_request.core.settings``.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "rail-request"


# --------------------------------------------------------------------------- #
# Library-wide defaults (grouped by feature area)
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    "request_input_settings": {
        "use_request_id_as_execution_id": True,
        "allow_execution_id_reassignment": True,
        "log_contributions": False,
        "repr_max_variables_length": None,
    },
}

# Environment specific overrides. Only the keys that differ from the
# library defaults are listed here.
ENVIRONMENT_DEFAULTS: dict[str, dict[str, Any]] = {
    "development": {
        "request_input_settings": {
            "log_contributions": True,
        }
    },
    "testing": {
        "request_input_settings": {
            "log_contributions": False,
        }
    },
    "production": {
        "request_input_settings": {
            "repr_max_variables_length": 1000,
        }
    },
}


# --------------------------------------------------------------------------- #
# Helper functions
# --------------------------------------------------------------------------- #
def get_environment_defaults(environment: str) -> dict[str, Any]:
    """Return environment-specific overrides."""
    return ENVIRONMENT_DEFAULTS.get(environment, {}).copy()


def merge_settings(*settings_dicts: dict[str, Any]) -> dict[str, Any]:
    """
    Merge multiple settings dictionaries with deep merging for nested dicts.
    Later dictionaries override earlier ones.
    """
    result: dict[str, Any] = {}
    for settings_dict in settings_dicts:
        for key, value in settings_dict.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = merge_settings(result[key], value)
            else:
                result[key] = value
    return result


def validate_request_input_settings(section: Any) -> list[str]:
    """
    Validate a resolved request_input_settings section.
    """
    if not isinstance(section, dict):
        return ["request_input_settings must be a dictionary"]

    errors: list[str] = []
    for flag in (
        "use_request_id_as_execution_id",
        "allow_execution_id_reassignment",
        "log_contributions",
    ):
        value = section.get(flag)
        if value is not None and not isinstance(value, bool):
            errors.append(f"request_input_settings.{flag} must be a boolean")

    max_length = section.get("repr_max_variables_length")
    if max_length is not None and (
        isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0
    ):
        errors.append(
            "request_input_settings.repr_max_variables_length must be a positive integer"
        )

    return errors


SECTION_VALIDATORS = {
    "request_input_settings": validate_request_input_settings,
}


def validate_settings(settings: dict[str, Any]) -> list[str]:
    """
    Validate a settings dictionary and return a list of validation errors.
    """
    if "request_input_settings" not in settings:
        return ["Required setting 'request_input_settings' is missing"]

    errors: list[str] = []
    for section, validator in SECTION_VALIDATORS.items():
        if section in settings:
            errors.extend(validator(settings[section]))
    return errors
