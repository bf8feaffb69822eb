class SatHelperError(Exception):
    """Base exception for all sathelper related errors."""
    pass

class UndeclaredVariableError(SatHelperError, KeyError):
    """Raised when a literal references a variable that was never declared."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Variable '{name}' not declared.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]

class ClauseError(SatHelperError, ValueError):
    """Raised when a raw clause is not valid DIMACS."""
    pass

class EngineError(SatHelperError):
    """Raised when the SAT engine cannot be run."""
    pass

class EngineLaunchError(EngineError):
    """Raised when the external solver is missing or not executable."""
    pass

class ScratchFileError(EngineError):
    """Raised when the formula cannot be written to the scratch file."""
    pass

class ProtocolError(SatHelperError):
    """Raised when solver output does not follow the expected line protocol."""
    pass

class ConfigError(SatHelperError):
    """Raised when the configuration file cannot be loaded."""
    pass
