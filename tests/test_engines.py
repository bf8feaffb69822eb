import subprocess

import pytest

from sathelper.backends.external import ExternalSolverEngine
from sathelper.backends.pysat_engine import PySATEngine
from sathelper.backends.registry import EngineRegistry
from sathelper.cnf import CnfDocument
from sathelper.config import SolverConfig
from sathelper.core.errors import EngineLaunchError, ScratchFileError
from sathelper.solution.types import SatStatus

SAT_DOC = CnfDocument(num_vars=2, clauses=[[1], [-1, -2]])
UNSAT_DOC = CnfDocument(num_vars=1, clauses=[[1], [-1]])

def test_command_line(tmp_path):
    engine = ExternalSolverEngine(executable="glucose", scratch_path=tmp_path / "f.cnf")
    assert engine.command() == ["glucose", "-model", str(tmp_path / "f.cnf")]
    engine.model_flag = None
    assert engine.command() == ["glucose", str(tmp_path / "f.cnf")]

def test_write_formula(tmp_path):
    engine = ExternalSolverEngine(scratch_path=tmp_path / "sub" / "f.cnf")
    path = engine.write_formula(SAT_DOC)
    assert path.read_text() == "p cnf 2 2\n1 0\n-1 -2 0\n"

def test_external_sat_and_unsat(fake_glucose, tmp_path):
    engine = ExternalSolverEngine(executable=fake_glucose, scratch_path=tmp_path / "f.cnf")
    out = engine.solve(SAT_DOC)
    assert out.status == SatStatus.SAT
    assert out.assignment == [1, -2]
    assert engine.solve(UNSAT_DOC).status == SatStatus.UNSAT

def test_external_garbage_output_is_unknown(shell_solver, tmp_path):
    solver = shell_solver("c I gave up")
    engine = ExternalSolverEngine(executable=solver, scratch_path=tmp_path / "f.cnf")
    out = engine.solve(SAT_DOC)
    assert out.status == SatStatus.UNKNOWN
    assert out.raw_output.strip() == "c I gave up"

def test_missing_executable(tmp_path):
    engine = ExternalSolverEngine(executable=str(tmp_path / "no_such_solver"), scratch_path=tmp_path / "f.cnf")
    with pytest.raises(EngineLaunchError, match="no_such_solver"):
        engine.solve(SAT_DOC)

def test_non_executable_file(tmp_path):
    not_exec = tmp_path / "solver.txt"
    not_exec.write_text("just text")
    engine = ExternalSolverEngine(executable=str(not_exec), scratch_path=tmp_path / "f.cnf")
    with pytest.raises(EngineLaunchError):
        engine.solve(SAT_DOC)

def test_unwritable_scratch(tmp_path, fake_glucose):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    engine = ExternalSolverEngine(executable=fake_glucose, scratch_path=blocker / "f.cnf")
    with pytest.raises(ScratchFileError):
        engine.solve(SAT_DOC)

def test_caller_owned_handle_timeout(shell_solver, tmp_path):
    solver = shell_solver("s SATISFIABLE", name="slow_solver")
    # prepend a long sleep to the canned transcript
    path = tmp_path / "slow_solver"
    lines = path.read_text().splitlines()
    path.write_text("\n".join([lines[0], "exec sleep 30"] + lines[1:]) + "\n")

    engine = ExternalSolverEngine(executable=solver, scratch_path=tmp_path / "f.cnf")
    process = engine.launch(SAT_DOC)
    with pytest.raises(subprocess.TimeoutExpired):
        engine.collect(process, timeout=0.2)
    process.kill()
    process.wait()
    assert process.returncode != 0

def test_pysat_engine():
    engine = PySATEngine()
    out = engine.solve(SAT_DOC)
    assert out.status == SatStatus.SAT
    assert out.assignment == [1, -2]
    assert engine.solve(UNSAT_DOC).status == SatStatus.UNSAT

def test_pysat_unknown_solver():
    with pytest.raises(EngineLaunchError):
        PySATEngine(solver_name="definitely-not-a-solver").solve(SAT_DOC)

def test_registry_builds_configured_engine(tmp_path):
    registry = EngineRegistry()
    assert registry.list_engines() == ["external", "pysat"]

    ext = registry.create(SolverConfig(executable="kissat", scratch_path=str(tmp_path / "a.cnf")))
    assert isinstance(ext, ExternalSolverEngine)
    assert ext.command()[0] == "kissat"

    py = registry.create(SolverConfig(engine="pysat", pysat_solver="m22"))
    assert isinstance(py, PySATEngine)
    assert py.solver_name == "m22"

    with pytest.raises(ValueError, match="not found"):
        registry.create(SolverConfig(engine="quantum"))
