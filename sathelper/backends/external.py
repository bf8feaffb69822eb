import subprocess
from pathlib import Path
from typing import List, Optional, Union

from sathelper.backends.base import SatEngine
from sathelper.cnf.cnf_types import CnfDocument
from sathelper.core.errors import EngineLaunchError, ScratchFileError
from sathelper.core.logging import get_logger
from sathelper.core.serialization import atomic_write_text
from sathelper.parser import parse_solver_output
from sathelper.solution.types import EngineOutput

logger = get_logger(__name__)

DEFAULT_EXECUTABLE = "glucose"
DEFAULT_SCRATCH_PATH = "/tmp/formula.cnf"
DEFAULT_MODEL_FLAG = "-model"

class ExternalSolverEngine(SatEngine):
    """
    Runs a DIMACS solver binary as `<executable> -model <scratch file>` and
    parses its standard output.

    The scratch path is shared by every solve of this engine. Sessions that
    solve concurrently need engines with distinct scratch paths.
    """
    def __init__(self, executable: str = DEFAULT_EXECUTABLE,
                 scratch_path: Union[str, Path] = DEFAULT_SCRATCH_PATH,
                 model_flag: Optional[str] = DEFAULT_MODEL_FLAG):
        self.executable = executable
        self.scratch_path = Path(scratch_path)
        self.model_flag = model_flag

    @property
    def name(self) -> str:
        return "external"

    def command(self) -> List[str]:
        cmd = [self.executable]
        if self.model_flag:
            cmd.append(self.model_flag)
        cmd.append(str(self.scratch_path))
        return cmd

    def write_formula(self, document: CnfDocument) -> Path:
        try:
            atomic_write_text(self.scratch_path, document.to_dimacs())
        except OSError as e:
            raise ScratchFileError(f"Cannot write formula to {self.scratch_path}: {e}") from e
        return self.scratch_path

    def launch(self, document: CnfDocument) -> subprocess.Popen:
        """
        Writes the formula and starts the solver without waiting for it.
        The caller owns the returned handle (e.g. to kill it on a timeout).
        """
        self.write_formula(document)
        cmd = self.command()
        logger.debug("Launching solver: %s", " ".join(cmd))
        try:
            return subprocess.Popen(cmd, stdout=subprocess.PIPE, text=True)
        except OSError as e:
            raise EngineLaunchError(f"Cannot launch solver '{self.executable}': {e}") from e

    def collect(self, process: subprocess.Popen, timeout: Optional[float] = None) -> str:
        """Drains stdout until the solver closes it. Exit codes are not checked."""
        stdout, _ = process.communicate(timeout=timeout)
        logger.debug("Solver exited with code %s", process.returncode)
        return stdout or ""

    def solve(self, document: CnfDocument) -> EngineOutput:
        process = self.launch(document)
        return parse_solver_output(self.collect(process))
