"""Shared helpers for pydantic request forms."""

from __future__ import annotations

import re
from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

FormT = TypeVar("FormT", bound=BaseModel)

_TAG_RE = re.compile(r"<[^>]*>")


def sanitize_text(value: str, max_length: int) -> str:
    """Trim, truncate and strip markup from free text."""

    return _TAG_RE.sub("", value.strip()[:max_length]).replace("<", "").replace(">", "")


def structured_errors(exc: PydanticValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field name."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = ".".join(str(part) for part in loc) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


def parse_form(form_cls: Type[FormT], payload: Any) -> FormT:
    """Validate ``payload`` into ``form_cls`` or raise an application ValidationError."""

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")
    try:
        return form_cls.model_validate(payload)
    except PydanticValidationError as exc:
        errors = structured_errors(exc)
        raise ValidationError(
            "Invalid request data",
            field=next(iter(errors), None),
            details=errors,
        ) from exc


__all__ = ["parse_form", "sanitize_text", "structured_errors"]
