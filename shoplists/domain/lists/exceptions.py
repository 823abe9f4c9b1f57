# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from shoplists.shared.errors.base import AppError


class ListNotFoundError(AppError):
    def __init__(self, list_id: int | str) -> None:
        super().__init__(
            code="list_not_found",
            status=HTTPStatus.NOT_FOUND,
            context={"list_id": list_id},
        )
