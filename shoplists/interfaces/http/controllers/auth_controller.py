# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from shoplists.application.use_cases.users.login_user import LoginUserUseCase
from shoplists.domain.users import InvalidCredentialsError
from shoplists.infrastructure.audit import AuditAction, audit_log
from shoplists.interfaces.http.dto.auth import LoginRequestDTO, LoginSuccessDTO
from shoplists.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(self, *, login_use_case: LoginUserUseCase) -> None:
        self._login_use_case = login_use_case

    def login(self) -> tuple[Response, int]:
        ip_address = _get_client_ip()

        try:
            dto = LoginRequestDTO.model_validate_json(request.get_data())
        except ValidationError as exc:
            logger.info(f"auth.login: undecodable body ({exc.error_count()} errors)")
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"error": "invalid_body"},
                success=False,
            )
            raise InvalidCredentialsError() from exc

        try:
            session = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                username=dto.username,
                ip_address=ip_address,
                details={"error": "invalid_credentials"},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            username=dto.username,
            ip_address=ip_address,
            details={"expires_at": session.expires_at.isoformat()},
            success=True,
        )
        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(LoginSuccessDTO(token=session.token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
