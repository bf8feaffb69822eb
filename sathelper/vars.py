from typing import Dict

from sathelper.core.errors import UndeclaredVariableError
from sathelper.core.logging import get_logger
from sathelper.literals import Literal

logger = get_logger(__name__)

class VarManager:
    """
    Bidirectional registry between variable names and DIMACS codes.
    Codes are dense, start at 1 and follow first-declaration order.
    A code is never reassigned while the registry lives; reset() starts over.
    """
    def __init__(self):
        self._var_map: Dict[str, int] = {}
        self._id_to_name: Dict[int, str] = {}
        self._next_id: int = 1

    @property
    def next_var_id(self) -> int:
        return self._next_id

    @property
    def max_id(self) -> int:
        return self._next_id - 1

    def __len__(self) -> int:
        return len(self._var_map)

    def __contains__(self, name: object) -> bool:
        return name in self._var_map

    def declare(self, name: str) -> int:
        """
        Declare a variable. Returns the existing code if already declared.
        """
        if name in self._var_map:
            return self._var_map[name]

        vid = self._next_id
        self._var_map[name] = vid
        self._id_to_name[vid] = name
        self._next_id += 1
        logger.debug("Declared variable %r as %d", name, vid)
        return vid

    def code_of(self, name: str) -> int:
        try:
            return self._var_map[name]
        except KeyError:
            raise UndeclaredVariableError(name) from None

    def name_of(self, code: int) -> str:
        """
        Inverse lookup. 0 maps to the clause terminator "0" and negative
        codes map to the marker-prefixed name.
        """
        if code == 0:
            return "0"
        return str(self.literal_of(code))

    def literal_of(self, code: int) -> Literal:
        if code == 0:
            raise ValueError("Code 0 is the clause terminator, not a literal.")
        name = self._id_to_name.get(abs(code))
        if name is None:
            raise UndeclaredVariableError(f"#{code}")
        return Literal(name, code < 0)

    def reset(self) -> None:
        self._var_map = {}
        self._id_to_name = {}
        self._next_id = 1

    def get_var_map(self) -> Dict[str, int]:
        return self._var_map.copy()

    def get_id_to_name(self) -> Dict[int, str]:
        return self._id_to_name.copy()
