from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

ERROR_CODE = "errcode"
ERROR_MESSAGE = "errmsg"


class ErrorPayload(BaseModel):
    """The `errcode` / `errmsg` envelope WeChat returns inside an error body."""

    code: Optional[str] = Field(None, alias=ERROR_CODE)
    message: Optional[str] = Field(None, alias=ERROR_MESSAGE)

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("code", "message", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Optional[str]:
        # WeChat sends errcode as a JSON number; treat 40029 and "40029" alike.
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def describe(self) -> str:
        return f"{ERROR_CODE}={self.code},{ERROR_MESSAGE}={self.message}"
