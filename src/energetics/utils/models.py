from enum import StrEnum
from typing import Any

from pydantic import BaseModel, model_validator


class CIStrEnum(StrEnum):
    """Case-insensitive string enumeration."""

    def __str__(self):
        """Normalize on output."""
        return self.value.lower()

    @classmethod
    def _missing_(cls, value):
        """Normalize on input."""
        if isinstance(value, str):
            value = value.strip().lower()
            for member in cls:
                if member.value.lower() == value:
                    return member
        return None


class CIBaseModel(BaseModel):
    """Pydantic base model that maps input keys onto model field names
    case-insensitively.

    Nested models derived from this class normalize their own keys when
    Pydantic validates them, so only the top level of the input is touched
    here. Keys that do not match any field are passed through unchanged and
    left for Pydantic to deal with."""

    @classmethod
    def _normalize_keys(cls, values: dict) -> dict:
        field_map = {f.lower(): f for f in cls.model_fields}
        return {
            field_map.get(k.lower(), k) if isinstance(k, str) else k: v
            for k, v in values.items()
        }

    @model_validator(mode='before')
    @classmethod
    def normalize_keys(cls, values: Any) -> Any:
        if isinstance(values, dict):
            return cls._normalize_keys(values)
        return values
