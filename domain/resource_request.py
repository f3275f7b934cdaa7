# domain/resource_request.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from domain.context_path import normalize_context_base, with_leading_slash
from domain.exceptions import ValidationError


@dataclass(frozen=True)
class ResourceRequest:
    resource_path: str
    override_context_param: Optional[str] = None

    @property
    def normalized_path(self) -> str:
        return with_leading_slash(self.resource_path)

    @property
    def normalized_override(self) -> Optional[str]:
        if not self.override_context_param or not self.override_context_param.strip():
            return None
        return normalize_context_base(self.override_context_param)


class AttributeScope(str, Enum):
    PAGE = "page"
    REQUEST = "request"
    SESSION = "session"
    APPLICATION = "application"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "AttributeScope":
        if raw is None:
            return cls.PAGE
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown scope: {raw}") from None


@dataclass(frozen=True)
class VariableName:
    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("Variable name must not be empty")
