"""
sathelper: build SAT problems with named variables, solve them with a
DIMACS solver and read the model back by name.
"""

from sathelper.session import SatSession
from sathelper.vars import VarManager
from sathelper.literals import Literal, negate, is_negated, variable_name_of
from sathelper.formula import Formula
from sathelper.encoders import add_at_most_one, add_exactly_one, add_at_least_one, add_implies
from sathelper.cnf import CnfDocument
from sathelper.parser import parse_solver_output
from sathelper.backends.base import SatEngine
from sathelper.backends.external import ExternalSolverEngine
from sathelper.backends.pysat_engine import PySATEngine
from sathelper.backends.registry import EngineRegistry
from sathelper.config import SolverConfig
from sathelper.solution.types import SatStatus, SatResult, EngineOutput
from sathelper.core.errors import (
    SatHelperError, UndeclaredVariableError, ClauseError, EngineError,
    EngineLaunchError, ScratchFileError, ProtocolError, ConfigError,
)

__all__ = [
    'SatSession',
    'VarManager',
    'Literal',
    'negate',
    'is_negated',
    'variable_name_of',
    'Formula',
    'add_at_most_one',
    'add_exactly_one',
    'add_at_least_one',
    'add_implies',
    'CnfDocument',
    'parse_solver_output',
    'SatEngine',
    'ExternalSolverEngine',
    'PySATEngine',
    'EngineRegistry',
    'SolverConfig',
    'SatStatus',
    'SatResult',
    'EngineOutput',
    'SatHelperError',
    'UndeclaredVariableError',
    'ClauseError',
    'EngineError',
    'EngineLaunchError',
    'ScratchFileError',
    'ProtocolError',
    'ConfigError',
]
