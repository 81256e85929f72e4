"""The delta document: an ordered, compressed list of operations."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from quilldelta.iterator import OpIterator
from quilldelta.op import UNTIL_END, Op


class Delta:
    """An ordered list of operations describing a document or a change.

    Operations added through :meth:`push` and its helpers are merged with
    their neighbours where possible, and inserts are kept ahead of deletes
    at the same position.
    """

    def __init__(self, ops: Iterable[Op] = ()) -> None:
        self.ops: list[Op] = list(ops)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Delta):
            return NotImplemented
        return self.ops == other.ops

    def __repr__(self) -> str:
        return f"Delta({self.ops!r})"

    def __str__(self) -> str:
        return "".join(f"{op}\n" for op in self.ops)

    def __iter__(self) -> Iterator[Op]:
        return iter(self.ops)

    def copy(self) -> Delta:
        """A new delta holding the same operations."""
        return Delta(self.ops)

    def push(self, op: Op) -> Delta:
        """Append ``op``, merging it with the previous operation if possible.

        Consecutive deletes are summed; text inserts and retains with the
        same attributes are joined. An insert pushed after a delete goes
        before that delete.
        """
        ops = self.ops
        if not ops:
            ops.append(op)
            return self

        index = len(ops)
        last = ops[-1]

        if op.is_delete() and last.is_delete():
            ops[-1] = Op.delete(last.length() + op.length())
            return self

        # Inserting before or after a delete at the same index is equivalent;
        # always put the insert first.
        if last.is_delete() and op.is_insert():
            index -= 1
            if index == 0:
                ops.insert(0, op)
                return self
            last = ops[index - 1]

        if op.attributes == last.attributes:
            if op.is_text_insert() and last.is_text_insert():
                ops[index - 1] = Op.insert(last.text() + op.text(), op.attributes)
                return self
            if op.is_retain() and last.is_retain():
                ops[index - 1] = Op.retain(
                    last.length() + op.length(), op.attributes
                )
                return self

        ops.insert(index, op)
        return self

    def insert(self, value: Any, attributes: Mapping[str, Any] | None = None) -> Delta:
        """Push an insert; ``None`` and blank strings are ignored."""
        if value is None:
            return self
        if isinstance(value, str) and not value.strip():
            return self
        return self.push(Op.insert(value, attributes))

    def delete(self, length: int) -> Delta:
        """Push a delete of ``length`` items."""
        return self.push(Op.delete(length))

    def retain(self, length: int, attributes: Mapping[str, Any] | None = None) -> Delta:
        """Push a retain of ``length`` items."""
        return self.push(Op.retain(length, attributes))

    def chop(self) -> Delta:
        """Drop a trailing retain that carries no attributes."""
        if self.ops:
            last = self.ops[-1]
            if last.is_retain() and last.attributes is None:
                self.ops.pop()
        return self

    def length(self) -> int:
        """Total length covered by all operations."""
        return sum(op.length() for op in self.ops)

    def is_empty(self) -> bool:
        """Whether the operations cover no length at all."""
        return self.length() == 0

    def change_length(self) -> int:
        """Net change in document length: inserts minus deletes."""
        total = 0
        for op in self.ops:
            if op.is_insert():
                total += op.length()
            elif op.is_delete():
                total -= op.length()
        return total

    def plain_text(self) -> str:
        """Text of the inserts; every other operation becomes a newline."""
        return "".join(op.text() if op.is_text_insert() else "\n" for op in self.ops)

    def slice(self, start: int = 0, end: int | None = None) -> Delta:
        """Operations between ``start`` (inclusive) and ``end`` (exclusive)."""
        if end is None:
            end = UNTIL_END
        ops: list[Op] = []
        cursor = OpIterator(self.ops)
        index = 0
        while index < end and cursor.has_next():
            if index < start:
                piece = cursor.next(start - index)
            else:
                piece = cursor.next(end - index)
                ops.append(piece)
            index += piece.length()
        return Delta(ops)

    def concat(self, other: Delta) -> Delta:
        """A new delta with ``other`` appended, merging at the seam."""
        result = self.copy()
        if not other.is_empty():
            first, *rest = other.ops
            result.push(first)
            result.ops.extend(rest)
        return result

    def to_dict(self) -> dict[str, Any]:
        """The JSON object form: ``{"ops": [...]}``."""
        return {"ops": [op.to_dict() for op in self.ops]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Delta:
        """Build a delta from its JSON object form."""
        if not isinstance(data, Mapping) or "ops" not in data:
            raise ValueError("a delta must be an object with an 'ops' list")
        ops = data["ops"]
        if not isinstance(ops, list):
            raise ValueError("'ops' must be a list")
        return cls(Op.from_dict(item) for item in ops)

    def to_json(self) -> str:
        """Serialize the delta to a JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Delta:
        """Parse a delta from a JSON string."""
        return cls.from_dict(json.loads(text))