from typing import Callable, Dict, List

from sathelper.backends.base import SatEngine
from sathelper.backends.external import ExternalSolverEngine
from sathelper.backends.pysat_engine import PySATEngine
from sathelper.config import SolverConfig

EngineFactory = Callable[[SolverConfig], SatEngine]

class EngineRegistry:
    def __init__(self):
        self._factories: Dict[str, EngineFactory] = {}
        self.register("external", lambda cfg: ExternalSolverEngine(
            executable=cfg.executable,
            scratch_path=cfg.scratch_path,
            model_flag=cfg.model_flag,
        ))
        self.register("pysat", lambda cfg: PySATEngine(solver_name=cfg.pysat_solver))

    def register(self, name: str, factory: EngineFactory):
        self._factories[name] = factory

    def create(self, config: SolverConfig) -> SatEngine:
        if config.engine not in self._factories:
            raise ValueError(f"Engine '{config.engine}' not found.")
        return self._factories[config.engine](config)

    def list_engines(self) -> List[str]:
        return list(self._factories.keys())
