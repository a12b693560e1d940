"""Shared helpers for reading host records into schemas."""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def coerce_record(model: type[ModelT], value: object) -> ModelT | None:
    """Read a mapping or attribute object as ``model``.

    Host records arrive either as plain mappings (theme config, tests) or as
    objects exposing attributes (site pages). Anything that does not validate
    is reported at debug level and returned as ``None`` so callers can fall
    back to their empty value.
    """
    if value is None:
        return None
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        logger.debug("Skipping unreadable %s record: %s", model.__name__, exc)
        return None


def lenient_str(value: object) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def lenient_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None
