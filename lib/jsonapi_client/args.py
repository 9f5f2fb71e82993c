from __future__ import annotations

import json
import math
import re
from typing import Any, Iterable, Sequence

# Decimal numeral with optional sign, fraction and exponent; no hex, inf or nan.
_NUMERIC_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return _NUMERIC_RE.fullmatch(value) is not None
    return False


def _as_float(value: Any) -> Any:
    try:
        result = float(value)
    except OverflowError:
        return value
    # Out-of-range numerals are left as given.
    return result if math.isfinite(result) else value


def normalize_args(args: Iterable[Any]) -> list[Any]:
    """Return a copy of ``args`` with every numeric top-level value cast to float.

    Nested lists and dicts are passed through untouched, and so are numbers
    too large for a float.
    """
    return [_as_float(v) if is_numeric(v) else v for v in args]


def normalize_args_list(args_list: Iterable[Iterable[Any]]) -> list[list[Any]]:
    return [normalize_args(args) for args in args_list]


def encode_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), allow_nan=False)


def as_list(value: Sequence[Any] | Iterable[Any]) -> list[Any]:
    if isinstance(value, (str, bytes, dict)):
        raise TypeError(f"expected a sequence of values, got {type(value).__name__}")
    return list(value)
