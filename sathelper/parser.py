"""
Parser for the textual output protocol of DIMACS-style SAT solvers.

Recognised lines:
- ``s SATISFIABLE`` followed by one or more ``v <ints> [0]`` lines
- ``s UNSATISFIABLE``

Output with neither verdict is reported as UNKNOWN rather than UNSAT, so a
crashed or misconfigured solver is never mistaken for a proof.
"""
from typing import List, Sequence

from sathelper.core.errors import ProtocolError
from sathelper.core.logging import get_logger
from sathelper.solution.types import EngineOutput, SatStatus

logger = get_logger(__name__)

SAT_LINE = "s SATISFIABLE"
UNSAT_LINE = "s UNSATISFIABLE"
MODEL_TAG = "v "
TAG_WIDTH = 2

def parse_model_lines(lines: Sequence[str]) -> List[int]:
    """Decodes tagged model lines into signed ints, dropping the 0 terminator."""
    if not lines:
        raise ProtocolError("Missing model line after satisfiable verdict.")
    assignment = []
    for line in lines:
        for token in line[TAG_WIDTH:].split():
            try:
                value = int(token)
            except ValueError:
                raise ProtocolError(f"Non-integer token {token!r} in model line.") from None
            if value != 0:
                assignment.append(value)
    return assignment

def parse_solver_output(output: str) -> EngineOutput:
    lines = output.splitlines()
    for idx, line in enumerate(lines):
        if line == SAT_LINE:
            model_lines = []
            for follow in lines[idx + 1:]:
                if not follow.startswith(MODEL_TAG):
                    break
                model_lines.append(follow)
            try:
                assignment = parse_model_lines(model_lines)
            except ProtocolError as e:
                logger.debug("Unreadable model in solver output: %s", e)
                return EngineOutput(SatStatus.UNKNOWN, reason=str(e), raw_output=output)
            return EngineOutput(SatStatus.SAT, assignment=assignment, raw_output=output)
        if line == UNSAT_LINE:
            return EngineOutput(SatStatus.UNSAT, raw_output=output)

    logger.debug("Solver output contained no verdict line (%d lines).", len(lines))
    return EngineOutput(SatStatus.UNKNOWN, reason="No verdict line in solver output.", raw_output=output)
