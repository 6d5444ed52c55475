from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _require_mapping(data: Any, name: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object for {name}, got {type(data).__name__}")
    return data


def _optional_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class AccountDetails:
    id: int
    email: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @classmethod
    def from_payload(cls, data: Any) -> "AccountDetails":
        """``id`` is required; missing string fields decode as ``""``."""
        payload = _require_mapping(data, cls.__name__)
        account_id = payload["id"]
        # bool is an int subclass; reject it explicitly
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise TypeError(f"field 'id' must be an integer, got {type(account_id).__name__}")
        return cls(
            id=account_id,
            email=_optional_str(payload, "email"),
            first_name=_optional_str(payload, "first_name"),
            last_name=_optional_str(payload, "last_name"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }


@dataclass(frozen=True)
class AuthResponse:
    account_key: str

    @classmethod
    def from_payload(cls, data: Any) -> "AuthResponse":
        payload = _require_mapping(data, cls.__name__)
        key = _optional_str(payload, "account_key")
        if not key:
            raise ValueError("field 'account_key' is missing or empty")
        return cls(account_key=key)
