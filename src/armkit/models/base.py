"""Base model shared by every ARM schema type."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    model_validator,
)
from pydantic.alias_generators import to_camel

from armkit.client.errors import DecodeError

# Additive server fields are dropped on decode.
UNKNOWN_FIELDS = "ignore"

# Validation context marking a payload that came off the wire.
WIRE_CONTEXT: dict[str, Any] = {"wire": True}

M = TypeVar("M", bound="ArmModel")
T = TypeVar("T")


def _is_wire(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("wire"))


class ArmModel(BaseModel):
    """Pydantic model with camelCase wire names and snake_case attributes.

    Fields listed in ``_required`` must be supplied when a model is built in
    code. Server payloads decoded with :meth:`from_wire` skip that check, so
    a response missing a required field still decodes.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra=UNKNOWN_FIELDS,
        use_enum_values=False,
    )

    _required: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _check_required(self, info: ValidationInfo) -> ArmModel:
        if self._required and not _is_wire(info):
            missing = [name for name in self._required if getattr(self, name) is None]
            if missing:
                raise ValueError(
                    f"{type(self).__name__} requires: {', '.join(missing)}"
                )
        return self

    @classmethod
    def from_wire(cls: type[M], data: bytes | str | Mapping[str, Any]) -> M:
        """Decode a server payload without enforcing required fields."""
        try:
            if isinstance(data, (bytes, str)):
                return cls.model_validate_json(data, context=WIRE_CONTEXT)
            return cls.model_validate(data, context=WIRE_CONTEXT)
        except ValidationError as exc:
            raise DecodeError(f"Cannot decode {cls.__name__}: {exc}") from exc

    def to_wire(self) -> dict[str, Any]:
        """Encode to a JSON-ready dict using wire names, omitting ``None`` fields."""
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True,
        )

    def to_json(self) -> str:
        return json.dumps(self.to_wire())


class ListResult(ArmModel, Generic[T]):
    """A page of results from a list operation."""

    value: list[T] = Field(default_factory=list)
    next_link: str | None = None

    def continuation(self) -> str | None:
        return self.next_link or None
