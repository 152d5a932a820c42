from __future__ import annotations


class UnspecifiedType:
    """Result of `define` and other forms evaluated only for effect.

    Truthy like every other non-boolean value; the REPL never prints it.
    """

    _instance: UnspecifiedType | None = None

    def __new__(cls) -> UnspecifiedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "#<unspecified>"

    def __eq__(self, other):
        return isinstance(other, UnspecifiedType)

    def __hash__(self):
        return hash(UnspecifiedType)


Unspecified = UnspecifiedType()
