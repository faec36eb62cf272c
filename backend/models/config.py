"""Configuration section models"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator


class DiffSettings(BaseModel):
    """The "diff" configuration section"""

    model_config = ConfigDict(strict=True, extra="forbid")

    ignoreCase: bool = False
    ignoreWhitespace: bool = False
    maxLines: NonNegativeInt = 10000  # 0 disables the limit
    rejectEmptyInput: bool = True


class ExportSettings(BaseModel):
    """The "export" configuration section"""

    model_config = ConfigDict(strict=True, extra="forbid")

    filename: str = "text-diff.txt"

    @field_validator("filename")
    @classmethod
    def check_filename(cls, value: str) -> str:
        """Keep the name safe to quote in a Content-Disposition header"""
        if not value.strip():
            raise ValueError("Export filename must not be empty")
        if any(ch in value for ch in '"\\/') or any(ord(ch) < 32 or ord(ch) == 127 for ch in value):
            raise ValueError("Export filename must not contain quotes, slashes or control characters")
        return value


SECTION_MODELS: dict[str, type[BaseModel]] = {
    "diff": DiffSettings,
    "export": ExportSettings,
}
