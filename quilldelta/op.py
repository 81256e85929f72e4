"""Single operations of a delta: insert, retain and delete."""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from quilldelta.attributes import format_attributes

UNTIL_END = sys.maxsize
"""Length of a retain that reaches past the end of any document."""


class InsertError(ValueError):
    """Raised when attributes are combined with a non-text insert."""


class OpType(Enum):
    """Kinds of operation a delta supports."""

    INSERT = "insert"
    RETAIN = "retain"
    DELETE = "delete"


@dataclass(frozen=True)
class Op:
    """An operation in a delta.

    ``payload`` is the inserted value for inserts and the length for
    retains and deletes. ``attributes`` is ``None`` when there are none.
    """

    kind: OpType
    payload: Any
    attributes: dict[str, Any] | None = field(default=None)

    def __post_init__(self) -> None:
        attributes = dict(self.attributes) if self.attributes else None
        if self.kind is OpType.DELETE:
            attributes = None
        if self.kind is OpType.INSERT:
            if attributes and not isinstance(self.payload, str):
                raise InsertError(
                    "Insert error: Cannot combine attributes with an inserted "
                    "value other than a string."
                )
        else:
            length = self.payload
            if isinstance(length, bool) or not isinstance(length, int):
                raise TypeError(f"{self.kind.value} length must be an integer")
            if length <= 0:
                raise ValueError(
                    f"{self.kind.value} length must be greater than zero"
                )
        object.__setattr__(self, "attributes", attributes)

    @classmethod
    def insert(cls, value: Any, attributes: Mapping[str, Any] | None = None) -> Op:
        """An insert of text or of an embedded JSON value."""
        return cls(OpType.INSERT, value, dict(attributes) if attributes else None)

    @classmethod
    def retain(cls, length: int, attributes: Mapping[str, Any] | None = None) -> Op:
        """A retain of ``length`` items, optionally applying attributes."""
        return cls(OpType.RETAIN, length, dict(attributes) if attributes else None)

    @classmethod
    def delete(cls, length: int) -> Op:
        """A delete of ``length`` items."""
        return cls(OpType.DELETE, length)

    @classmethod
    def retain_until_end(cls) -> Op:
        """A plain retain covering everything that remains."""
        return cls.retain(UNTIL_END)

    def is_insert(self) -> bool:
        return self.kind is OpType.INSERT

    def is_text_insert(self) -> bool:
        return self.kind is OpType.INSERT and isinstance(self.payload, str)

    def is_retain(self) -> bool:
        return self.kind is OpType.RETAIN

    def is_delete(self) -> bool:
        return self.kind is OpType.DELETE

    def length(self) -> int:
        """Number of items the operation covers; embeds count as one."""
        if self.kind is OpType.INSERT:
            return len(self.payload) if isinstance(self.payload, str) else 1
        return self.payload

    def is_empty(self) -> bool:
        return self.length() == 0

    @property
    def value(self) -> Any:
        """The inserted value; only inserts have one."""
        if self.kind is not OpType.INSERT:
            raise TypeError(
                "Retrieving the value of an operation is possible only on "
                f"INSERT operations; Try to get value of {self!r}"
            )
        return self.payload

    def text(self) -> str:
        """The inserted text; only text inserts have one."""
        if not self.is_text_insert():
            raise TypeError(
                "Retrieving the text value of an operation is possible only on "
                f"string INSERT operations; Try to get string value of {self!r}"
            )
        return self.payload

    def to_dict(self) -> dict[str, Any]:
        """The JSON object form of the operation."""
        data: dict[str, Any] = {self.kind.value: self.payload}
        if self.attributes:
            data["attributes"] = dict(self.attributes)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Op:
        """Build an operation from its JSON object form."""
        kinds = [kind for kind in OpType if kind.value in data]
        if len(kinds) != 1:
            raise ValueError(
                "an operation needs exactly one of 'insert', 'retain' or 'delete'"
            )
        kind = kinds[0]
        attributes = data.get("attributes")
        if attributes is not None and not isinstance(attributes, Mapping):
            raise ValueError("attributes must be an object")
        return cls(kind, data[kind.value], attributes)

    def __str__(self) -> str:
        if self.kind is OpType.INSERT:
            if isinstance(self.payload, str):
                shown = self.payload
            else:
                shown = json.dumps(self.payload, separators=(",", ":"), ensure_ascii=False)
            text = f"ins({shown.replace(chr(10), '⏎')})"
        elif self.kind is OpType.RETAIN:
            text = f"ret({self.payload})"
        else:
            text = f"del({self.payload})"
        if self.attributes:
            text += f" + {format_attributes(self.attributes)}"
        return text