from __future__ import annotations

from pydantic import BaseModel


class LoginFormDTO(BaseModel):
    username: str = ""
    password: str = ""
