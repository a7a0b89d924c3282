from __future__ import annotations

from pydantic import BaseModel


class Hello(BaseModel):
    message: str = "Hello, World!"
    status: str = "success"


class Health(BaseModel):
    status: str = "ok"
    version: str = "1.0.0"
