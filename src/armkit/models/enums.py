"""String-backed enums that tolerate values added server-side."""

from __future__ import annotations

from enum import Enum
from typing import Any

UNKNOWN_MEMBER_NAME = "UNKNOWN_VALUE"


class OpenEnum(str, Enum):
    """A server vocabulary that may grow without a client release.

    Looking up a value that matches no member returns an unknown
    pseudo-member carrying the exact string, so decoding never fails and
    re-encoding writes the value back unchanged::

        >>> ConnectorType("FutureType").is_unknown
        True
        >>> ConnectorType("FutureType").value
        'FutureType'

    Matching is case-sensitive.
    """

    @classmethod
    def _missing_(cls, value: Any) -> OpenEnum | None:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = UNKNOWN_MEMBER_NAME
        member._value_ = value
        return member

    @property
    def is_unknown(self) -> bool:
        return self._name_ == UNKNOWN_MEMBER_NAME

    @classmethod
    def known_values(cls) -> list[str]:
        return [member.value for member in cls]

    def __str__(self) -> str:
        return str(self.value)
