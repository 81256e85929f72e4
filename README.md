# quilldelta

`quilldelta` works with the Quill editor *Delta* format. A delta is a list of
insert, retain and delete operations. It describes a rich-text document or a
change to one. The package uses only the standard library.

## Installing

```
pip install quilldelta
```

## Building deltas

```python
from quilldelta.delta import Delta

doc = Delta()
doc.insert("Hello", {"bold": True}).insert(" world", None)

doc.plain_text()   # "Hello world"
doc.length()       # 11
```

`insert`, `retain` and `delete` return the delta, so calls can be chained.
`insert` ignores `None` and strings that are empty or contain only
whitespace.

`push` merges an operation with the one before it when it can:

- consecutive deletes are added together;
- neighbouring text inserts with equal attributes are joined;
- neighbouring retains with equal attributes are joined;
- an insert pushed after a delete is placed in front of that delete.

Other `Delta` methods:

- `slice(start, end)` returns the operations between two positions. `end`
  defaults to the end of the delta.
- `concat(other)` returns a new delta with `other` appended, merging the
  operations where the two meet.
- `chop()` removes a trailing retain that has no attributes.
- `change_length()` returns the net change in length: inserted minus deleted.
- `is_empty()` tells whether the operations cover no length at all.
- `copy()` returns a new delta with the same operations.

`plain_text()` joins the text inserts. Every other operation becomes a
newline.

## Composing and inverting

```python
from quilldelta.delta import Delta
from quilldelta.compose import compose, invert

base = Delta().insert("123456", None)
change = Delta().retain(2, None).delete(3)

result = compose(base, change)   # insert "126"
undo = invert(change, base)      # retain 2, insert "345"
assert compose(result, undo) == base
```

`compose(delta, other)` applies `other` over `delta`. `invert(delta, base)`
returns the delta that undoes `delta` after it has been applied to `base`.
Neither function changes its arguments.

## Operations

A `quilldelta.op.Op` is a single frozen operation. Create one with
`Op.insert(value, attributes)`, `Op.retain(length, attributes)` or
`Op.delete(length)`.

- Only a text insert may carry attributes. Giving attributes to an embed (a
  non-string value) raises `InsertError`, which is a `ValueError`.
- Retain and delete lengths must be positive integers. A length of zero or
  less raises `ValueError`; a length that is not an integer raises
  `TypeError`.
- `length()` counts the characters of a text insert. An embed counts as 1.
- `value` is the inserted value and `text()` is the inserted string. Asking
  for either on an operation that does not have one raises `TypeError`.
- `str(op)` renders an operation briefly, for example `ins(Hi)`, `ret(3)` or
  `del(2)`, followed by its attributes if it has any.

## Attributes

Attributes are plain dictionaries. `None` stands for JSON `null`, which marks
an attribute as removed. `quilldelta.attributes` provides these operations
on them:

- `compose(a, b, keep_null)` takes the union of `a` and `b`, with `b` winning
  where both have a key.
- `diff(a, b)` returns the keys that change going from `a` to `b`.
- `invert(attr, base)` returns the attributes that undo `attr` over `base`.
- `transform(a, b, priority)` transforms `b` against `a`.
- `format_attributes(attributes)` renders attributes for display.

`compose`, `diff` and `transform` return `None` when the result is empty.

## Iterating by length

`quilldelta.iterator.OpIterator` walks a list of operations.
`next(length)` returns up to `length` items from the current operation and
splits the operation if `length` ends partway through it. After the last
operation, `next` returns a plain retain that reaches to the end.

`peek`, `peek_length`, `peek_type`, `has_next` and `rest` inspect the
operations without consuming them. Iterating over an `OpIterator` consumes
the remaining operations.

## JSON

```python
text = doc.to_json()
assert Delta.from_json(text) == doc
```

`to_dict` and `from_dict`, on both `Delta` and `Op`, work with the
`{"ops": [...]}` structure that Quill uses. Malformed input raises
`ValueError`.

## What it does not do

The package can build, slice, concatenate, compose and invert deltas. It has
no transform of one delta against another and no diff between two documents.
It also has no command-line tool.

## Running the tests

```
pip install quilldelta[test]
pytest
```