"""Canonical, whitespace-stable encoding of prop values.

:func:`encode_canonical` produces the same layout as a two-space-indented
JSON document, but its behaviour is pinned down explicitly instead of being
inherited from a serializer's defaults:

* mapping keys must be strings and are sorted lexicographically at every
  depth;
* nested values are indented by ``indent`` spaces per level and lines are
  joined with ``\\n`` only;
* empty mappings and sequences encode as ``{}`` and ``[]``;
* lists and tuples encode as arrays;
* strings have ``\\r\\n`` normalized to ``\\n`` before escaping and keep
  non-ASCII characters verbatim;
* floats use JavaScript's number formatting: integral values drop their
  fraction (``1.0`` becomes ``1``), values from ``1e-6`` up to ``1e21``
  print positionally, others use ``1e-7`` / ``1e+21`` exponent form, and
  non-finite values encode as ``null``.

Examples
--------
>>> print(encode_canonical({"b": [1, 2.0], "a": {"z": None, "y": True}}))
{
  "a": {
    "y": true,
    "z": null
  },
  "b": [
    1,
    2
  ]
}
>>> encode_canonical({})
'{}'
"""

from __future__ import annotations

import collections.abc as cabc
import decimal
import json
import math
import typing as typ

NEWLINE = "\n"
JS_EXPONENT_UPPER = 21
JS_EXPONENT_LOWER = -6


def _encode_string(value: str) -> str:
    normalized = value.replace("\r\n", "\n")
    return json.dumps(normalized, ensure_ascii=False)


def _encode_float(value: float) -> str:
    """Format ``value`` the way JavaScript's ``Number#toString`` does.

    ``repr`` already yields the shortest round-tripping digits; only the
    placement of the decimal point and the exponent form differ.
    """
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "0"
    sign, digit_tuple, exponent = decimal.Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    prefix = "-" if sign else ""
    k = len(digits)
    # Position of the decimal point relative to the first digit.
    n = typ.cast("int", exponent) + k
    if k <= n <= JS_EXPONENT_UPPER:
        return f"{prefix}{digits}{'0' * (n - k)}"
    if 0 < n <= JS_EXPONENT_UPPER:
        return f"{prefix}{digits[:n]}.{digits[n:]}"
    if JS_EXPONENT_LOWER < n <= 0:
        return f"{prefix}0.{'0' * -n}{digits}"
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{prefix}{mantissa}e{n - 1:+d}"


def _encode_scalar(value: object) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            return _encode_float(value)
        case str():
            return _encode_string(value)
        case _:
            msg = f"Cannot encode value of type {type(value).__name__}: {value!r}"
            raise TypeError(msg)


def _encode(value: object, indent: int, depth: int) -> str:
    if isinstance(value, cabc.Mapping):
        if not value:
            return "{}"
        for key in value:
            if not isinstance(key, str):
                msg = f"Mapping keys must be strings, got {key!r}"
                raise TypeError(msg)
        inner = " " * (indent * (depth + 1))
        lines = [
            f"{inner}{_encode_string(key)}: {_encode(value[key], indent, depth + 1)}"
            for key in sorted(value)
        ]
        closing = " " * (indent * depth)
        return "{" + NEWLINE + ("," + NEWLINE).join(lines) + NEWLINE + closing + "}"
    if isinstance(value, list | tuple):
        if not value:
            return "[]"
        inner = " " * (indent * (depth + 1))
        lines = [f"{inner}{_encode(item, indent, depth + 1)}" for item in value]
        closing = " " * (indent * depth)
        return "[" + NEWLINE + ("," + NEWLINE).join(lines) + NEWLINE + closing + "]"
    return _encode_scalar(value)


def encode_canonical(value: object, indent: int = 2) -> str:
    """Encode ``value`` into canonical, key-sorted, indented text.

    Parameters
    ----------
    value : object
        Mapping, sequence, or scalar built from JSON-compatible types.
    indent : int, optional
        Spaces per nesting level; defaults to ``2``.

    Returns
    -------
    str
        Encoded text without a trailing newline.

    Raises
    ------
    TypeError
        If ``value`` contains a non-string mapping key or an unsupported type.
    """
    return _encode(value, indent, 0)


__all__ = ["encode_canonical"]
