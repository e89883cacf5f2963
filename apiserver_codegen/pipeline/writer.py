"""
Atomic file writer for files produced in process.

Ensures that an interrupted run never leaves a half written file behind.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any


class AtomicWriter:
    """Writes files through a temporary sibling and an atomic replace.

    1. Write to a temporary file in the same directory
    2. Atomically replace the target file
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OSError: If file operations fail
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def write_json(self, path: Path, data: Any) -> None:
        self.write(path, json.dumps(data, indent=2) + "\n")
