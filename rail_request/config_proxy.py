"""
Configuration management for Rail Request.

This module provides a settings proxy that handles hierarchical configuration
resolution from runtime overrides, Django settings, and library defaults.
"""

import os
from typing import Any, Optional

from django.conf import ENVIRONMENT_VARIABLE, settings
from django.core.exceptions import ImproperlyConfigured

from .defaults import (
    LIBRARY_DEFAULTS,
    SECTION_VALIDATORS,
    get_environment_defaults,
    merge_settings,
)


# Runtime storage for settings overrides (avoids modifying Django settings)
_RUNTIME_SETTINGS: dict[str, Any] = {}


def django_settings_available() -> bool:
    """
    Check whether Django settings can be read without raising.

    Outside a configured Django process only runtime overrides and library
    defaults apply.
    """
    return settings.configured or bool(os.environ.get(ENVIRONMENT_VARIABLE))


class SettingsProxy:
    """
    Proxy for accessing Rail Request settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Runtime overrides (via configure_runtime_settings)
    2. Global Django settings (RAIL_REQUEST)
    3. Environment defaults (ENVIRONMENT_DEFAULTS[settings.ENVIRONMENT])
    4. Library defaults (LIBRARY_DEFAULTS)
    """

    def __init__(self):
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution and caching.

        Args:
            key: Setting key to retrieve (dot notation for nested access)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        if key in self._cache:
            return self._cache[key]

        runtime_value = self._get_nested_value(_RUNTIME_SETTINGS, key)
        if runtime_value is not None:
            self._cache[key] = runtime_value
            return runtime_value

        django_value = self._get_django_setting(key)
        if django_value is not None:
            self._cache[key] = django_value
            return django_value

        library_value = self._get_library_default(key)
        if library_value is not None:
            self._cache[key] = library_value
            return library_value

        self._cache[key] = default
        return default

    def get_section(self, section: str) -> dict[str, Any]:
        """
        Get a whole settings section, merged across every source.

        Args:
            section: Top level section name (e.g. "request_input_settings")

        Returns:
            Dictionary with library defaults overridden by Django and runtime values

        Raises:
            ImproperlyConfigured: If the resolved section fails validation
        """
        sources = (
            self._get_library_default(section),
            self._get_django_setting(section),
            self._get_nested_value(_RUNTIME_SETTINGS, section),
        )
        for source in sources:
            if source is not None and not isinstance(source, dict):
                raise ImproperlyConfigured(f"RAIL_REQUEST['{section}'] must be a dictionary")

        merged = merge_settings(*(source or {} for source in sources))
        validator = SECTION_VALIDATORS.get(section)
        if validator is not None:
            errors = validator(merged)
            if errors:
                raise ImproperlyConfigured(
                    f"Invalid RAIL_REQUEST settings: {'; '.join(errors)}"
                )
        return merged

    def _get_django_setting(self, key: str) -> Any:
        """
        Get setting from global Django RAIL_REQUEST settings.

        Args:
            key: Setting key to retrieve

        Returns:
            The setting value or None if not found
        """
        if not django_settings_available():
            return None
        return self._get_nested_value(getattr(settings, "RAIL_REQUEST", {}), key)

    def _get_library_default(self, key: str) -> Any:
        """
        Get setting from library defaults, with environment overrides applied.

        Args:
            key: Setting key to retrieve

        Returns:
            The setting value or None if not found
        """
        environment = None
        debug = False
        if django_settings_available():
            environment = getattr(settings, "ENVIRONMENT", None)
            debug = getattr(settings, "DEBUG", False)
        if not environment:
            environment = "development" if debug else "production"
        defaults = merge_settings(LIBRARY_DEFAULTS, get_environment_defaults(environment))
        return self._get_nested_value(defaults, key)

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current

    def clear_cache(self) -> None:
        """
        Clear the settings cache.
        """
        self._cache.clear()


def get_settings_proxy() -> SettingsProxy:
    """
    Get a fresh settings proxy instance.

    Returns:
        SettingsProxy instance
    """
    return SettingsProxy()


def configure_runtime_settings(clear_existing: bool = False, **overrides: Any) -> None:
    """
    Configure runtime settings overrides.

    Args:
        clear_existing: Whether to clear existing runtime settings first
        **overrides: Section name to settings dictionary pairs

    Example:
        configure_runtime_settings(
            request_input_settings={"allow_execution_id_reassignment": False}
        )
    """
    if clear_existing:
        _RUNTIME_SETTINGS.clear()

    for section, values in overrides.items():
        if isinstance(values, dict) and isinstance(_RUNTIME_SETTINGS.get(section), dict):
            _RUNTIME_SETTINGS[section] = merge_settings(_RUNTIME_SETTINGS[section], values)
        else:
            _RUNTIME_SETTINGS[section] = values


def clear_runtime_settings(section: Optional[str] = None) -> None:
    """
    Clear runtime settings overrides.

    Args:
        section: If provided, only clear this section.
                 If None, clear all runtime settings.
    """
    if section:
        _RUNTIME_SETTINGS.pop(section, None)
    else:
        _RUNTIME_SETTINGS.clear()
