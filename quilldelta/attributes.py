"""Operations on the attribute maps attached to delta operations.

Attributes are plain dictionaries mapping names to JSON values; ``None``
stands for JSON ``null``, which marks an attribute as removed.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

Attributes = dict[str, Any]

_MISSING = object()


def _json_equal(left: Any, right: Any) -> bool:
    """Compare two JSON values, keeping booleans distinct from numbers."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return left.keys() == right.keys() and all(
            _json_equal(value, right[key]) for key, value in left.items()
        )
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        return len(left) == len(right) and all(
            _json_equal(x, y) for x, y in zip(left, right)
        )
    if isinstance(left, (Mapping, list, tuple)) or isinstance(right, (Mapping, list, tuple)):
        return False
    return type(left) is type(right) or (
        isinstance(left, (int, float)) and isinstance(right, (int, float))
    ) and left == right if left == right else False


def _same(left: Any, right: Any) -> bool:
    if left is _MISSING or right is _MISSING:
        return left is right
    return _json_equal(left, right)


def compose(
    a: Mapping[str, Any] | None,
    b: Mapping[str, Any] | None,
    keep_null: bool = False,
) -> Attributes | None:
    """Union of ``a`` and ``b`` where ``b`` wins on conflicts.

    Nulls of ``a`` are always dropped; nulls of ``b`` are kept only when
    ``keep_null`` is true. Returns ``None`` when the result is empty.
    """
    a = a or {}
    b = b or {}
    result = {
        key: value for key, value in b.items() if keep_null or value is not None
    }
    for key, value in a.items():
        if value is not None and key not in b:
            result[key] = value
    return result or None


def diff(
    a: Mapping[str, Any] | None, b: Mapping[str, Any] | None
) -> Attributes | None:
    """Attributes that change going from ``a`` to ``b``.

    Keys present in ``a`` but absent from ``b`` map to ``None``. Returns
    ``None`` when nothing differs.
    """
    a = a or {}
    b = b or {}
    result: Attributes = {}
    for key in dict.fromkeys([*a, *b]):
        if not _same(a.get(key, _MISSING), b.get(key, _MISSING)):
            result[key] = b.get(key)
    return result or None


def invert(
    attr: Mapping[str, Any] | None, base: Mapping[str, Any] | None
) -> Attributes:
    """Attributes that undo ``attr`` when applied over ``base``.

    Keys of ``attr`` that exist in ``base`` with another value take the
    value from ``base``; keys missing from ``base`` become ``None``.
    """
    attr = attr or {}
    base = base or {}
    inverted: Attributes = {}
    for key, value in base.items():
        if key in attr and not _json_equal(value, attr[key]):
            inverted[key] = value
    for key in attr:
        if key not in base:
            inverted[key] = None
    return inverted


def transform(
    a: Mapping[str, Any] | None,
    b: Mapping[str, Any] | None,
    priority: bool = False,
) -> Attributes | None:
    """Transform ``b`` against ``a``.

    With ``priority``, only the keys of ``b`` absent from ``a`` survive;
    without it ``b`` overwrites ``a`` entirely. Returns ``None`` when empty.
    """
    a = a or {}
    b = b or {}
    if not a:
        return dict(b) or None
    if not b:
        return None
    if not priority:
        return dict(b)
    result = {key: value for key, value in b.items() if key not in a}
    return result or None


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def format_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Render attributes for display, one ``key: value}`` chunk per entry."""
    body = "".join(
        f"{key}: {_format_value(value)}}}" for key, value in (attributes or {}).items()
    )
    return "{" + body + "}"