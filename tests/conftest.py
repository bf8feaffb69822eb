import os
import stat
import sys
import textwrap
import pytest

from sathelper import SatSession, PySATEngine, ExternalSolverEngine

# Mimics `glucose -model <file>`: verdict line, one `v` line, exit code 10/20.
FAKE_GLUCOSE = textwrap.dedent("""\
    import sys
    from pysat.formula import CNF
    from pysat.solvers import Solver

    cnf = CNF(from_file=sys.argv[-1])
    with Solver(name="g3", bootstrap_with=cnf.clauses) as s:
        if s.solve():
            print("c fake glucose")
            print("s SATISFIABLE")
            print("v " + " ".join(str(l) for l in s.get_model()) + " 0")
            sys.exit(10)
        print("s UNSATISFIABLE")
        sys.exit(20)
""")

def _write_script(path, body: str, interpreter: str) -> str:
    path.write_text(f"#!{interpreter}\n" + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)

@pytest.fixture
def fake_glucose(tmp_path):
    return _write_script(tmp_path / "fake_glucose", FAKE_GLUCOSE, sys.executable)

@pytest.fixture
def shell_solver(tmp_path):
    """Factory for solvers that print a fixed transcript."""
    def make(output: str, name: str = "canned_solver") -> str:
        body = "cat <<'__EOF__'\n" + output + "\n__EOF__\n"
        return _write_script(tmp_path / name, body, "/bin/sh")
    return make

@pytest.fixture
def pysat_session():
    return SatSession(engine=PySATEngine())

@pytest.fixture
def external_session(fake_glucose, tmp_path):
    engine = ExternalSolverEngine(executable=fake_glucose, scratch_path=tmp_path / "formula.cnf")
    return SatSession(engine=engine)

@pytest.fixture(params=["pysat", "external"])
def session(request):
    return request.getfixturevalue(f"{request.param}_session")
