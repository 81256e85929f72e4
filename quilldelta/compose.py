"""Composition and inversion of deltas."""

from __future__ import annotations

from quilldelta import attributes as attrs
from quilldelta.delta import Delta
from quilldelta.iterator import OpIterator
from quilldelta.op import Op, OpType


def compose(delta: Delta, other: Delta) -> Delta:
    """Apply ``other`` over ``delta`` and return the combined delta.

    Neither argument is modified.
    """
    this_iter = OpIterator(delta.ops)
    other_iter = OpIterator(other.ops)

    combined: list[Op] = []
    first_other = other_iter.peek()
    if (
        first_other is not None
        and first_other.is_retain()
        and first_other.attributes is None
    ):
        # A leading plain retain keeps the inserts of ``delta`` untouched.
        left = first_other.length()
        while (
            this_iter.peek_type() is OpType.INSERT
            and this_iter.peek_length() <= left
        ):
            left -= this_iter.peek_length()
            combined.append(this_iter.next())
        consumed = first_other.length() - left
        if consumed > 0:
            other_iter.next(consumed)

    result = Delta(combined)

    while this_iter.has_next() or other_iter.has_next():
        if other_iter.peek_type() is OpType.INSERT:
            result.push(other_iter.next())
        elif this_iter.peek_type() is OpType.DELETE:
            result.push(this_iter.next())
        else:
            length = min(this_iter.peek_length(), other_iter.peek_length())
            this_op = this_iter.next(length)
            other_op = other_iter.next(length)

            if other_op.is_retain():
                # Nulls survive when composing two retains, not on inserts.
                merged = attrs.compose(
                    this_op.attributes, other_op.attributes, this_op.is_retain()
                )
                if this_op.is_retain():
                    new_op = Op.retain(length, merged)
                else:
                    new_op = Op.insert(this_op.value, merged)
                result.push(new_op)
                # The rest of ``other`` is a plain retain: keep the rest as is.
                if not other_iter.has_next() and result.ops[-1] == new_op:
                    return result.concat(Delta(this_iter.rest())).chop()
            elif other_op.is_delete() and this_op.is_retain():
                result.push(other_op)

    return result.chop()


def invert(delta: Delta, base: Delta) -> Delta:
    """The delta that undoes ``delta`` once it has been applied to ``base``."""
    inverted = Delta()
    base_index = 0
    for op in delta.ops:
        if op.is_insert():
            inverted.delete(op.length())
        elif op.is_retain() and op.attributes is None:
            inverted.retain(op.length())
            base_index += op.length()
        else:
            length = op.length()
            for base_op in base.slice(base_index, base_index + length).ops:
                if op.is_delete():
                    inverted.push(base_op)
                else:
                    inverted.retain(
                        base_op.length(),
                        attrs.invert(op.attributes, base_op.attributes),
                    )
            base_index += length
    return inverted.chop()