"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from flask import Request

from auth.errors import ValidationError


def parse_json_request(req: Request, *, allow_empty: bool = False) -> dict:
    """Return the parsed JSON body or raise a 400 error.

    Field presence is checked by the caller.
    """

    if not req.is_json:
        raise ValidationError("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise ValidationError("Request JSON body is required.")

    if not isinstance(data, dict):
        raise ValidationError("Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise ValidationError("Request JSON body must not be empty.")

    return data


def string_field(data: dict, key: str) -> str | None:
    """Return ``data[key]`` if it is a string, rejecting other JSON types."""

    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(f"Field '{key}' must be a string.")
