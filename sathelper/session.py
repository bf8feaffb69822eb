import time
from typing import Iterable, List, Optional, Sequence

from sathelper import encoders
from sathelper.backends.base import SatEngine
from sathelper.backends.registry import EngineRegistry
from sathelper.config import SolverConfig
from sathelper.core.errors import UndeclaredVariableError
from sathelper.core.logging import get_logger
from sathelper.formula import Formula
from sathelper.literals import Literal, LiteralLike
from sathelper.solution.types import EngineOutput, SatResult, SatStatus
from sathelper.vars import VarManager

logger = get_logger(__name__)

class SatSession:
    """
    Builds one SAT problem from named variables and solves it.

    Typical use:
        s = SatSession()
        for v in "abc":
            s.declare_var(v)
        s.add_at_most_one(["a", "b", "c"])
        s.add_clause(["a"])
        result = s.solve()

    All state (registry, clauses, last model) belongs to the session;
    reset() brings it back to an empty problem.
    """
    def __init__(self, engine: Optional[SatEngine] = None, config: Optional[SolverConfig] = None):
        if engine is None:
            engine = EngineRegistry().create(config if config is not None else SolverConfig.from_env_or_file())
        self.engine = engine
        self.var_manager = VarManager()
        self.formula = Formula(self.var_manager)
        self.last_result: Optional[SatResult] = None

    # --- Building ---

    def declare_var(self, name: str) -> int:
        """You need to declare vars before use: DIMACS only knows numbers."""
        return self.var_manager.declare(name)

    def declare_vars(self, names: Iterable[str]) -> List[int]:
        return [self.declare_var(n) for n in names]

    def add_clause(self, literals: Iterable[LiteralLike]) -> List[int]:
        return self.formula.add_clause(literals)

    def add_at_most_one(self, group: Sequence[LiteralLike]) -> int:
        return encoders.add_at_most_one(self.formula, group)

    def add_exactly_one(self, group: Sequence[LiteralLike]) -> int:
        return encoders.add_exactly_one(self.formula, group)

    def add_at_least_one(self, group: Sequence[LiteralLike]) -> int:
        return encoders.add_at_least_one(self.formula, group)

    def add_implies(self, a: LiteralLike, b: LiteralLike) -> int:
        return encoders.add_implies(self.formula, a, b)

    # --- Output ---

    def render(self) -> str:
        return self.formula.render()

    def print_formula(self) -> None:
        print(self.render())

    # --- Solving ---

    def solve(self, quiet: bool = True) -> SatResult:
        """
        Runs the engine once on the current formula.
        Engine errors (missing binary, unwritable scratch file) propagate.
        Unreadable engine output yields SatStatus.UNKNOWN, never UNSAT.
        """
        start_time = time.time()
        document = self.formula.document()
        logger.debug("Solving %d vars / %d clauses with engine '%s'",
                     document.num_vars, document.num_clauses, self.engine.name)

        output = self.engine.solve(document)
        result = self._decode(output)
        result.time_taken = (time.time() - start_time) * 1000
        self.last_result = result

        logger.debug("Verdict %s in %.1fms", result.status.value, result.time_taken)
        if result.status == SatStatus.UNKNOWN:
            logger.warning("Engine '%s' gave no usable answer: %s", self.engine.name, result.reason)

        if not quiet and result.is_sat:
            print("SATISFIABLE WITH VARS " + " ".join(result.model_strings()))
        return result

    def _decode(self, output: EngineOutput) -> SatResult:
        if output.status != SatStatus.SAT:
            return SatResult(status=output.status, reason=output.reason)

        model = []
        for code in output.assignment:
            try:
                model.append(self.var_manager.literal_of(code))
            except UndeclaredVariableError as e:
                return SatResult(
                    status=SatStatus.UNKNOWN,
                    raw_assignment=list(output.assignment),
                    reason=f"Engine assigned unknown code: {e}",
                )
        return SatResult(status=SatStatus.SAT, model=model, raw_assignment=list(output.assignment))

    # --- Model queries ---

    @property
    def model(self) -> List[Literal]:
        if self.last_result is None or not self.last_result.is_sat:
            return []
        return list(self.last_result.model)

    def value(self, name: str) -> Optional[bool]:
        """
        Truth value of `name` in the last model, None if unassigned or no model.
        Undeclared names raise UndeclaredVariableError.
        """
        self.var_manager.code_of(name)
        return self.last_result.assignment().get(name) if self.model else None

    def reset(self) -> None:
        self.var_manager.reset()
        self.formula.reset()
        self.last_result = None
