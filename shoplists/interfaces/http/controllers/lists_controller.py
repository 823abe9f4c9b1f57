# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from time import perf_counter
from typing import TypeVar

from flask import Blueprint, Response, jsonify, request
from pydantic import BaseModel, ValidationError

from shoplists.application import (
    CreateListUseCase,
    DeleteListUseCase,
    GetListUseCase,
    ListListsUseCase,
    PatchListUseCase,
    PushItemUseCase,
    ReplaceListUseCase,
)
from shoplists.domain.lists import ListNotFoundError, ShoppingList
from shoplists.domain.users import User
from shoplists.infrastructure.audit import AuditAction, audit_log
from shoplists.infrastructure.auth import AccessGuard
from shoplists.interfaces.http.dto.lists import (
    ListPushDTO,
    ShoppingListDTO,
    ShoppingListPatchDTO,
)
from shoplists.shared.errors import raise_decode_error
from shoplists.shared.logging import logger

_DTO = TypeVar("_DTO", bound=BaseModel)


def parse_list_id(raw: str) -> int:
    """Map a path segment to a list id.

    Only the canonical decimal rendering of an id addresses it, so ``"01"``
    or ``"+1"`` find nothing.
    """
    try:
        list_id = int(raw)
    except ValueError:
        raise ListNotFoundError(raw) from None
    if str(list_id) != raw:
        raise ListNotFoundError(raw)
    return list_id


def _decode(model: type[_DTO], status: HTTPStatus) -> _DTO:
    try:
        return model.model_validate_json(request.get_data())
    except ValidationError as exc:
        raise_decode_error(exc, status=status)


def _dump(shopping_list: ShoppingList) -> dict:
    return ShoppingListDTO.from_entity(shopping_list).model_dump()


class ListsController:
    def __init__(
        self,
        *,
        guard: AccessGuard,
        create_list: CreateListUseCase,
        list_lists: ListListsUseCase,
        get_list: GetListUseCase,
        replace_list: ReplaceListUseCase,
        patch_list: PatchListUseCase,
        push_item: PushItemUseCase,
        delete_list: DeleteListUseCase,
    ) -> None:
        self._guard = guard
        self._create_list = create_list
        self._list_lists = list_lists
        self._get_list = get_list
        self._replace_list = replace_list
        self._patch_list = patch_list
        self._push_item = push_item
        self._delete_list = delete_list

    def as_blueprint(self) -> Blueprint:
        auth_required = self._guard.auth_required
        admin_required = self._guard.admin_required

        bp = Blueprint("lists", __name__, url_prefix="/v1")
        bp.add_url_rule("/lists", view_func=admin_required(self.create), methods=["POST"])
        bp.add_url_rule("/lists", view_func=auth_required(self.list_lists), methods=["GET"])
        bp.add_url_rule("/lists/<list_id>", view_func=auth_required(self.get), methods=["GET"])
        bp.add_url_rule("/lists/<list_id>", view_func=admin_required(self.replace), methods=["PUT"])
        bp.add_url_rule("/lists/<list_id>", view_func=admin_required(self.patch), methods=["PATCH"])
        bp.add_url_rule(
            "/lists/<list_id>", view_func=admin_required(self.delete), methods=["DELETE"]
        )
        bp.add_url_rule(
            "/lists/<list_id>/push", view_func=admin_required(self.push), methods=["POST"]
        )
        return bp

    def _ensure_exists(self, list_id: int) -> None:
        if not self._get_list.exists(list_id):
            logger.info(f"lists: not_found (list_id={list_id})")
            raise ListNotFoundError(list_id)

    def create(self, current_user: User) -> tuple[Response, int]:
        t0 = perf_counter()
        dto = _decode(ShoppingListDTO, HTTPStatus.BAD_REQUEST)
        created = self._create_list.execute(dto.to_entity())

        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"lists.create: ok (user={current_user.username}, list_id={created.id}, dt_ms={dt:.0f})"
        )
        audit_log(
            AuditAction.LIST_CREATED,
            username=current_user.username,
            ip_address=request.remote_addr,
            details={"list_id": created.id, "name": created.name},
        )
        return jsonify(_dump(created)), HTTPStatus.CREATED

    def list_lists(self, current_user: User) -> Response:
        items = self._list_lists.execute()
        logger.info(f"lists.list: ok (user={current_user.username}, n={len(items)})")
        return jsonify([_dump(item) for item in items])

    def get(self, list_id: str, current_user: User) -> Response:
        found = self._get_list.execute(parse_list_id(list_id))
        return jsonify(_dump(found))

    def replace(self, list_id: str, current_user: User) -> Response:
        target_id = parse_list_id(list_id)
        self._ensure_exists(target_id)
        dto = _decode(ShoppingListDTO, HTTPStatus.BAD_REQUEST)

        updated = self._replace_list.execute(target_id, dto.to_entity())
        if updated.id != target_id:
            logger.warning(f"lists.replace: id changed {target_id} -> {updated.id}")
        audit_log(
            AuditAction.LIST_REPLACED,
            username=current_user.username,
            ip_address=request.remote_addr,
            details={"list_id": target_id, "new_id": updated.id},
        )
        return jsonify(_dump(updated))

    def patch(self, list_id: str, current_user: User) -> Response:
        target_id = parse_list_id(list_id)
        self._ensure_exists(target_id)
        dto = _decode(ShoppingListPatchDTO, HTTPStatus.INTERNAL_SERVER_ERROR)

        updated = self._patch_list.execute(target_id, dto.to_entity())
        audit_log(
            AuditAction.LIST_PATCHED,
            username=current_user.username,
            ip_address=request.remote_addr,
            details={"list_id": target_id, "fields": sorted(dto.model_fields_set)},
        )
        return jsonify(_dump(updated))

    def push(self, list_id: str, current_user: User) -> Response:
        target_id = parse_list_id(list_id)
        self._ensure_exists(target_id)
        dto = _decode(ListPushDTO, HTTPStatus.INTERNAL_SERVER_ERROR)

        updated = self._push_item.execute(target_id, dto.value)
        audit_log(
            AuditAction.LIST_ITEM_PUSHED,
            username=current_user.username,
            ip_address=request.remote_addr,
            details={"list_id": target_id, "item": dto.value},
        )
        return jsonify(_dump(updated))

    def delete(self, list_id: str, current_user: User) -> tuple[str, int]:
        target_id = parse_list_id(list_id)
        self._delete_list.execute(target_id)
        audit_log(
            AuditAction.LIST_DELETED,
            username=current_user.username,
            ip_address=request.remote_addr,
            details={"list_id": target_id},
        )
        return "", HTTPStatus.NO_CONTENT
