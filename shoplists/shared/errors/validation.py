# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import MalformedBodyError


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors(include_url=False, include_input=False):
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        error_entry: dict[str, Any] = {
            "field": field_path or "body",
            "type": error.get("type", "value_error"),
        }

        # ctx may carry exception instances which jsonify cannot encode
        if "ctx" in error:
            error_entry["ctx"] = {k: str(v) for k, v in error["ctx"].items()}

        errors_list.append(error_entry)

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def raise_decode_error(
    exc: PydanticValidationError, *, status: HTTPStatus = HTTPStatus.BAD_REQUEST
) -> NoReturn:
    context = format_pydantic_errors(exc)
    raise MalformedBodyError(status=status, context=context) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_decode_error",
]
