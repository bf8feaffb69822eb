from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from sathelper.literals import Literal

class SatStatus(str, Enum):
    SAT = "SAT"
    UNSAT = "UNSAT"
    # Engine output carried no verdict or an unreadable model
    UNKNOWN = "UNKNOWN"

@dataclass
class EngineOutput:
    """
    Raw result from a SAT engine, still in solver-facing integers.
    """
    status: SatStatus
    assignment: List[int] = field(default_factory=list)
    reason: Optional[str] = None
    raw_output: str = ""

@dataclass
class SatResult:
    """
    Result of a session solve, decoded into caller-facing literals.
    """
    status: SatStatus
    # Literals in the order the engine reported them
    model: List[Literal] = field(default_factory=list)
    raw_assignment: List[int] = field(default_factory=list)
    reason: Optional[str] = None

    # Perf
    time_taken: float = 0.0

    @property
    def is_sat(self) -> bool:
        return self.status == SatStatus.SAT

    def assignment(self) -> Dict[str, bool]:
        return {lit.name: not lit.negated for lit in self.model}

    def model_strings(self) -> List[str]:
        return [str(lit) for lit in self.model]
