"""Cursor over a sequence of operations that can split them by length."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from quilldelta.op import UNTIL_END, Op, OpType


class OpIterator:
    """Walks a list of operations, handing out pieces of a requested length.

    The cursor remembers the current operation and the offset inside it.
    Once every operation is consumed, it yields plain retains that reach
    to the end.
    """

    def __init__(self, ops: Iterable[Op] = ()) -> None:
        self._ops: tuple[Op, ...] = tuple(ops)
        self._index = 0
        self._offset = 0

    def next(self, length: int = UNTIL_END) -> Op:
        """Take up to ``length`` items from the current operation.

        If ``length`` ends inside the current operation, that part of it is
        returned. Otherwise the rest of the operation is returned. Once the
        operations are used up, a plain retain until the end is returned.
        """
        if self._index >= len(self._ops):
            return Op.retain_until_end()

        op = self._ops[self._index]
        start = self._offset
        remaining = op.length() - start

        if length >= remaining:
            length = remaining
            self._index += 1
            self._offset = 0
        else:
            self._offset += length

        if op.is_delete():
            return Op.delete(length)
        if op.is_retain():
            return Op.retain(length, op.attributes)
        if op.is_text_insert():
            return Op.insert(op.text()[start:start + length], op.attributes)
        return Op.insert(op.value, op.attributes)

    def peek(self) -> Op | None:
        """The current operation, whole, or ``None`` when none is left."""
        if self._index >= len(self._ops):
            return None
        return self._ops[self._index]

    def peek_length(self) -> int:
        """Length left in the current operation, or ``UNTIL_END`` when done."""
        if self._index >= len(self._ops):
            return UNTIL_END
        return self._ops[self._index].length() - self._offset

    def peek_type(self) -> OpType:
        """Kind of the current operation; a retain once nothing is left."""
        if self._index >= len(self._ops):
            return OpType.RETAIN
        return self._ops[self._index].kind

    def has_next(self) -> bool:
        """Whether any operation remains."""
        return self.peek_length() < UNTIL_END

    def rest(self) -> list[Op]:
        """The remaining operations, without moving the cursor."""
        if not self.has_next():
            return []
        tail = list(self._ops[self._index + 1:])
        if self._offset == 0:
            return [self._ops[self._index], *tail]
        index, offset = self._index, self._offset
        head = self.next()
        self._index, self._offset = index, offset
        return [head, *tail]

    def __iter__(self) -> Iterator[Op]:
        """Consume the remaining operations one by one."""
        while self.has_next():
            yield self.next()