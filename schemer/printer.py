"""Render runtime values back to canonical Scheme text."""

import math

from schemer import LispValue
from schemer.types.procedure import Builtin, Closure


def format_float(x: float) -> str:
    """Finite floats always carry a decimal point, so they read back as floats."""
    if math.isnan(x):
        return "+nan.0"
    if math.isinf(x):
        return "+inf.0" if x > 0 else "-inf.0"
    text = repr(x)
    if "." not in text:
        # 1e+16 -> 1.0e+16
        mantissa, _, exponent = text.partition("e")
        text = f"{mantissa}.0e{exponent}"
    return text


def to_string(value: LispValue) -> str:
    match value:
        case list():
            return "(" + " ".join(to_string(v) for v in value) + ")"
        case True:
            return "#t"
        case False:
            return "#f"
        case Builtin() | Closure():
            # Procedures never round-trip through the reader
            return repr(value)
        case float():
            return format_float(value)
    return str(value)
