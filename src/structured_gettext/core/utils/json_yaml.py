"""Helpers for loading messages from JSON and YAML payloads."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal

import yaml

from ..errors import PayloadFormatError
from ..shapes import from_data
from ..values import Value

__all__ = [
    "JsonValidationError",
    "YamlValidationError",
    "ValidationResult",
    "AutoDetectResult",
    "parse_json",
    "parse_yaml",
    "detect_payload_format",
    "load_message",
    "validate_message",
]

PayloadFormat = Literal["auto", "json", "yaml"]


class JsonValidationError(ValueError):
    """Raised when JSON parsing fails."""


class YamlValidationError(ValueError):
    """Raised when YAML parsing fails."""


@dataclass(slots=True)
class ValidationResult:
    """Represents the outcome of validating a message payload."""

    is_valid: bool
    error: str | None = None
    message: Value | None = None


@dataclass(slots=True)
class AutoDetectResult:
    """Result of attempting to auto-detect JSON vs YAML content."""

    format: Literal["json", "yaml", "unknown"]
    data: Any | None
    error: str | None = None

    @property
    def is_detected(self) -> bool:
        """Whether a supported format was successfully detected."""

        return self.format in {"json", "yaml"}


def parse_json(value: str) -> Any:
    """Parse ``value`` as JSON and raise :class:`JsonValidationError` on failure."""

    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise JsonValidationError(str(exc)) from exc


def parse_yaml(value: str) -> Any:
    """Parse ``value`` as YAML using :func:`yaml.safe_load`."""

    try:
        return yaml.safe_load(value)
    except yaml.YAMLError as exc:
        raise YamlValidationError(str(exc)) from exc


def detect_payload_format(value: str) -> AutoDetectResult:
    """Best-effort detection between JSON and YAML strings."""

    json_error: str | None = None
    try:
        data = parse_json(value)
    except JsonValidationError as exc:
        json_error = str(exc)
    else:
        return AutoDetectResult(format="json", data=data, error=None)

    try:
        data = parse_yaml(value)
    except YamlValidationError as exc:
        return AutoDetectResult(format="unknown", data=None, error=str(exc))

    if _looks_like_plain_text_yaml(value, data):
        return AutoDetectResult(format="unknown", data=None, error=json_error)

    return AutoDetectResult(format="yaml", data=data, error=None)


def load_message(value: str, fmt: PayloadFormat = "auto") -> Value:
    """Parse *value* and build the message tree it describes.

    Args:
        value: JSON or YAML text.
        fmt: ``"json"``, ``"yaml"`` or ``"auto"`` to detect the format.

    Raises:
        JsonValidationError: If ``fmt="json"`` and the text is not JSON.
        YamlValidationError: If the text is not YAML.
        PayloadFormatError: If *fmt* is unknown or detection fails.
        ValueShapeError: If the parsed data does not describe a message.
    """

    if fmt == "json":
        data = parse_json(value)
    elif fmt == "yaml":
        data = parse_yaml(value)
    elif fmt == "auto":
        detected = detect_payload_format(value)
        if not detected.is_detected:
            raise PayloadFormatError(f"Could not detect payload format: {detected.error}")
        data = detected.data
    else:
        raise PayloadFormatError(f"Unsupported payload format: {fmt}")
    return from_data(data)


def validate_message(value: str, fmt: PayloadFormat = "auto") -> ValidationResult:
    """Validate message text returning the message tree when successful."""

    try:
        message = load_message(value, fmt)
    except ValueError as exc:
        return ValidationResult(is_valid=False, error=str(exc), message=None)
    return ValidationResult(is_valid=True, error=None, message=message)


def _looks_like_plain_text_yaml(source: str, parsed: Any) -> bool:
    """Heuristic to avoid treating arbitrary text as YAML."""

    stripped = source.strip()
    if not stripped:
        return True
    if isinstance(parsed, str):
        if stripped == parsed and not stripped.startswith(("'", '"')):
            if ":" in stripped or "\n" in stripped:
                return False
            return True
    if parsed is None and stripped.lower() not in {"null", "~"}:
        return True
    return False
