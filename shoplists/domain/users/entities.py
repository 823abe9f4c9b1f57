# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


@dataclass(slots=True, frozen=True)
class User:
    username: str
    role: Role
    password: str

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(slots=True, frozen=True)
class Session:
    token: str
    username: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        # valid only while expiry is strictly in the future
        return self.expires_at <= now
