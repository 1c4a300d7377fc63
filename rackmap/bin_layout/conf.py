"""
Settings for the bin layout engine.

Values are resolved in this order:
- per-call overrides (e.g. a user's saved preferences)
- the ``BIN_LAYOUT`` dict in Django settings
- the registered default

Every resolved value passes through the registered validator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from django.conf import settings
from django.core.exceptions import ValidationError

SettingValidator = Callable[[Any], Any]

SETTINGS_NAMESPACE = "BIN_LAYOUT"

TABLE_PAGE_SIZE = "TABLE_PAGE_SIZE"
RACK_DISPLAY_LIMIT = "RACK_DISPLAY_LIMIT"

_registry: Dict[str, "SettingDefinition"] = {}


@dataclass(slots=True)
class SettingDefinition:
    key: str
    default: Any = None
    description: str = ""
    validator: Optional[SettingValidator] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def validate(self, value: Any) -> Any:
        if self.validator:
            return self.validator(value)
        return value


def positive_int(value: Any) -> int:
    # bool is an int subclass; True is not a page size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Expected an integer, got {value!r}.")
    if value < 1:
        raise ValidationError(f"Expected an integer >= 1, got {value}.")
    return value


def register_setting(
    key: str,
    *,
    default: Any = None,
    description: str = "",
    validator: Optional[SettingValidator] = None,
    metadata: Optional[Mapping[str, Any]] = None,
) -> None:
    """Register a definition (default + validator) for a setting key."""

    _registry[key] = SettingDefinition(
        key=key,
        default=default,
        description=description,
        validator=validator,
        metadata=metadata or {},
    )


def get_registered_setting(key: str) -> Optional[SettingDefinition]:
    return _registry.get(key)


def list_registered_settings() -> Dict[str, SettingDefinition]:
    return dict(_registry)


def assert_setting_registered(key: str) -> None:
    if key not in _registry:
        raise ValidationError(f"Setting '{key}' is not registered in {SETTINGS_NAMESPACE}.")


def _project_settings() -> Mapping[str, Any]:
    return getattr(settings, SETTINGS_NAMESPACE, None) or {}


def get_effective_setting(key: str, *, overrides: Optional[Mapping[str, Any]] = None) -> Any:
    """
    Return the effective value for `key`, preferring the caller's override.
    """

    assert_setting_registered(key)
    definition = _registry[key]

    if overrides and overrides.get(key) is not None:
        value = overrides[key]
    else:
        value = _project_settings().get(key, definition.default)

    try:
        return definition.validate(value)
    except ValidationError as exc:
        raise ValidationError(f"{SETTINGS_NAMESPACE}['{key}']: {exc.messages[0]}") from exc


def get_effective_settings(overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return dict of every registered key -> resolved value."""

    return {key: get_effective_setting(key, overrides=overrides) for key in _registry}


def table_page_size(overrides: Optional[Mapping[str, Any]] = None) -> int:
    return get_effective_setting(TABLE_PAGE_SIZE, overrides=overrides)


def rack_display_limit(overrides: Optional[Mapping[str, Any]] = None) -> int:
    return get_effective_setting(RACK_DISPLAY_LIMIT, overrides=overrides)


def register_defaults() -> None:
    register_setting(
        TABLE_PAGE_SIZE,
        default=25,
        description="Rows per page in the flat bin table.",
        validator=positive_int,
    )
    register_setting(
        RACK_DISPLAY_LIMIT,
        default=5,
        description="Racks shown per aisle before 'show more'.",
        validator=positive_int,
    )


register_defaults()
