from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pysat.formula import CNF

def render_clause(clause: List[int]) -> str:
    """One DIMACS clause line: literals followed by the 0 terminator."""
    return " ".join([str(lit) for lit in clause] + ["0"])

class CnfDocument(BaseModel):
    """Immutable snapshot of a formula as handed to a SAT engine."""
    model_config = ConfigDict(frozen=True)

    num_vars: int = Field(ge=0)
    clauses: List[List[int]]

    @field_validator('clauses')
    @classmethod
    def validate_clauses(cls, v: List[List[int]], info) -> List[List[int]]:
        num_vars = info.data.get('num_vars')
        for i, clause in enumerate(v):
            for lit in clause:
                if lit == 0:
                    raise ValueError(f"Literal 0 is invalid in clause {i}")
                if num_vars is not None and abs(lit) > num_vars:
                    raise ValueError(f"Literal {lit} exceeds num_vars {num_vars} in clause {i}")
        return v

    @property
    def num_clauses(self) -> int:
        return len(self.clauses)

    def to_dimacs(self) -> str:
        """
        Renders DIMACS CNF text: the 'p cnf' header followed by one
        0-terminated clause per line. Identical documents give identical text.
        """
        lines = [f"p cnf {self.num_vars} {self.num_clauses}"]
        lines.extend(render_clause(c) for c in self.clauses)
        return "\n".join(lines) + "\n"

    def to_pysat(self) -> CNF:
        """Converts to a PySAT CNF formula."""
        formula = CNF()
        formula.nv = self.num_vars
        formula.clauses = [list(c) for c in self.clauses]
        return formula
