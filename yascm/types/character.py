from __future__ import annotations


class Character:
    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Character) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("char", self.value))

    def __repr__(self):
        return f"#\\{self.value}"
