from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoginRequestDTO(BaseModel):
    # no length or charset rules: credentials are compared verbatim
    username: str = ""
    password: str = ""

    model_config = ConfigDict(strict=True)


class LoginSuccessDTO(BaseModel):
    token: str
