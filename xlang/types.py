"""Runtime value helpers for xlang.

xlang values are plain Python objects: `None` for null, `bool`, `float`
for every number, `str`, a `FunctionStmt` node for user-defined functions
and `BuiltinFunction` (or any Python callable) for host functions. This
module holds the rules that give those objects language meaning: type
names for diagnostics, display strings for `print`, truthiness and strict
equality.
"""

from __future__ import annotations

import math
from typing import Any

from .ast import FunctionStmt


def is_number(value: Any) -> bool:
    # bool is a subclass of int but is its own type in the language
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: Any) -> str:
    """Return the xlang type name of a runtime value."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if is_number(value):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, FunctionStmt) or callable(value):
        return 'function'
    return type(value).__name__


def format_number(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if float(value).is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))


def to_string(value: Any) -> str:
    """Convert a value to the text `print` and string concatenation show."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if is_number(value):
        return format_number(value)
    if isinstance(value, str):
        return value
    return repr(value)


def is_truthy(value: Any) -> bool:
    """null, false, 0, NaN and the empty string are falsy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if is_number(value):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return len(value) > 0
    return True


def strict_equals(a: Any, b: Any) -> bool:
    """Type-and-value equality without coercion."""
    if a is None or b is None:
        return a is b
    if is_number(a) and is_number(b):
        return a == b
    if type(a) is not type(b):
        return False
    if isinstance(a, (bool, str)):
        return a == b
    # functions compare by identity
    return a is b


def divide(a: float, b: float) -> float:
    """IEEE division: x/0 is a signed infinity and 0/0 is NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def remainder(a: float, b: float) -> float:
    """Remainder with the sign of the dividend; x%0 and inf%x are NaN."""
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)
