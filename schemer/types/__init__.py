from schemer.types.symbol import Symbol
from schemer.types.unspecified import Unspecified, UnspecifiedType
from schemer.types.environment import Environment
from schemer.types.procedure import Builtin, Closure, is_procedure

__all__ = [
    "Symbol",
    "Unspecified",
    "UnspecifiedType",
    "Environment",
    "Builtin",
    "Closure",
    "is_procedure",
]
