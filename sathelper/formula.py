from typing import Iterable, List, Optional

from sathelper.cnf.cnf_types import CnfDocument
from sathelper.core.errors import ClauseError
from sathelper.literals import Literal, LiteralLike
from sathelper.vars import VarManager

class Formula:
    """
    Ordered clause store bound to a VarManager.
    The header variable count always comes from the registry, so variables
    that appear in no clause are still counted.
    """
    def __init__(self, var_manager: Optional[VarManager] = None):
        self.var_manager = var_manager if var_manager is not None else VarManager()
        self._clauses: List[List[int]] = []

    @property
    def clauses(self) -> List[List[int]]:
        return [list(c) for c in self._clauses]

    @property
    def num_clauses(self) -> int:
        return len(self._clauses)

    @property
    def num_vars(self) -> int:
        return self.var_manager.max_id

    def to_raw_literal(self, lit: LiteralLike) -> int:
        lit = Literal.parse(lit)
        code = self.var_manager.code_of(lit.name)
        return -code if lit.negated else code

    def add_clause(self, literals: Iterable[LiteralLike]) -> List[int]:
        """
        Lowers named literals to their codes (input order kept) and stores the clause.
        Raises UndeclaredVariableError before anything is stored.
        """
        clause = [self.to_raw_literal(lit) for lit in literals]
        self._clauses.append(clause)
        return list(clause)

    def add_raw_clause(self, literals: Iterable[int]) -> List[int]:
        clause = list(literals)
        for lit in clause:
            if lit == 0:
                raise ClauseError("Literal 0 is not allowed in DIMACS.")
            if abs(lit) > self.num_vars:
                raise ClauseError(f"Literal {lit} refers to an undeclared code (max {self.num_vars}).")
        self._clauses.append(clause)
        return list(clause)

    def document(self) -> CnfDocument:
        return CnfDocument(num_vars=self.num_vars, clauses=self.clauses)

    def render(self) -> str:
        return self.document().to_dimacs()

    def reset(self) -> None:
        self._clauses = []
