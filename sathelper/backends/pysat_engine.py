from pysat.solvers import NoSuchSolverError, Solver

from sathelper.backends.base import SatEngine
from sathelper.cnf.cnf_types import CnfDocument
from sathelper.core.errors import EngineLaunchError
from sathelper.core.logging import get_logger
from sathelper.solution.types import EngineOutput, SatStatus

logger = get_logger(__name__)

class PySATEngine(SatEngine):
    """In-process engine backed by a PySAT solver."""
    def __init__(self, solver_name: str = 'g3'):
        self.solver_name = solver_name

    @property
    def name(self) -> str:
        return "pysat"

    def solve(self, document: CnfDocument) -> EngineOutput:
        formula = document.to_pysat()
        try:
            solver = Solver(name=self.solver_name, bootstrap_with=formula.clauses)
        except (NoSuchSolverError, ValueError, NotImplementedError) as e:
            raise EngineLaunchError(f"PySAT solver '{self.solver_name}' unavailable: {e}") from e

        with solver:
            if solver.solve():
                model = solver.get_model() or []
                logger.debug("PySAT %s: SAT with %d assigned vars", self.solver_name, len(model))
                return EngineOutput(SatStatus.SAT, assignment=list(model))
            logger.debug("PySAT %s: UNSAT", self.solver_name)
            return EngineOutput(SatStatus.UNSAT)
