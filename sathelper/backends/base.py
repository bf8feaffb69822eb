import abc

from sathelper.cnf.cnf_types import CnfDocument
from sathelper.solution.types import EngineOutput

class SatEngine(abc.ABC):
    """
    Anything able to take a CNF document and return a verdict plus a raw assignment.
    """
    @property
    @abc.abstractmethod
    def name(self) -> str:
        pass

    @abc.abstractmethod
    def solve(self, document: CnfDocument) -> EngineOutput:
        """Runs the engine once and blocks until it answers."""
        pass
