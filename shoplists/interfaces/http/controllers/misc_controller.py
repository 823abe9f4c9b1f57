# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from shoplists.domain.lists import ListRepository
from shoplists.domain.users import SessionRegistry


class MiscController:
    def __init__(self, *, lists: ListRepository, sessions: SessionRegistry) -> None:
        self._lists = lists
        self._sessions = sessions

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {
            "ok": True,
            "lists": self._lists.count(),
            "sessions": self._sessions.count(),
        }
        return jsonify(status)
