import os
import tempfile
from pathlib import Path
from typing import Union

def atomic_write_text(path: Union[str, Path], text: str) -> None:
    """Writes text to a file atomically using a temporary file."""
    path = Path(path)
    safe_mkdir(path.parent)

    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f"{path.name}.tmp")
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)
        os.replace(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise

def safe_mkdir(path: Union[str, Path]) -> None:
    """Ensures a directory exists."""
    Path(path).mkdir(parents=True, exist_ok=True)
