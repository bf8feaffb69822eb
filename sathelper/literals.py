from dataclasses import dataclass
from typing import Union

NEGATION_MARKER = "-"

def is_negated(lit: str) -> bool:
    return lit.startswith(NEGATION_MARKER)

def variable_name_of(lit: str) -> str:
    if is_negated(lit):
        return lit[len(NEGATION_MARKER):]
    return lit

def negate(lit: str) -> str:
    """Textual negation: strips the marker if present, otherwise prefixes it."""
    if is_negated(lit):
        return variable_name_of(lit)
    return NEGATION_MARKER + lit


@dataclass(frozen=True)
class Literal:
    """
    A (variable, polarity) pair.
    The '-name' text form only exists at the caller-facing boundary.
    """
    name: str
    negated: bool = False

    @classmethod
    def parse(cls, lit: Union[str, "Literal"]) -> "Literal":
        if isinstance(lit, Literal):
            return lit
        if not isinstance(lit, str):
            raise TypeError(f"Expected str or Literal, got {type(lit).__name__}")
        return cls(variable_name_of(lit), is_negated(lit))

    def negate(self) -> "Literal":
        return Literal(self.name, not self.negated)

    def __invert__(self) -> "Literal":
        return self.negate()

    def __str__(self) -> str:
        return NEGATION_MARKER + self.name if self.negated else self.name


LiteralLike = Union[str, Literal]
