import dataclasses
import os
import json
from typing import Optional

from sathelper.core.errors import ConfigError

@dataclasses.dataclass
class SolverConfig:
    engine: str = "external"
    executable: str = "glucose"
    scratch_path: str = "/tmp/formula.cnf"
    model_flag: Optional[str] = "-model"
    pysat_solver: str = "g3"

    @staticmethod
    def from_env_or_file() -> 'SolverConfig':
        # 1. Try Config Path
        config = SolverConfig()
        config_path = os.environ.get("SATHELPER_CONFIG_PATH")
        if config_path:
            config = SolverConfig.from_file(config_path)

        # 2. Env Vars override single fields
        env_engine = os.environ.get("SATHELPER_ENGINE")
        if env_engine:
            config.engine = env_engine
        env_solver = os.environ.get("SATHELPER_SOLVER")
        if env_solver:
            config.executable = env_solver
        env_scratch = os.environ.get("SATHELPER_SCRATCH_PATH")
        if env_scratch:
            config.scratch_path = env_scratch

        return config

    @staticmethod
    def from_file(path: str) -> 'SolverConfig':
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot load config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a JSON object.")

        known = {f.name for f in dataclasses.fields(SolverConfig)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")
        return SolverConfig(**data)
