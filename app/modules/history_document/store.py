"""
JSON document kept in a local file, served whole at /api/history.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from app.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> Any:
        """The stored document, or an empty list before the first write."""
        if not self.path.exists():
            return []
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Error reading %s: %s", self.path, e)
            raise PersistenceError("Failed to fetch history data")

    def write(self, data: Any) -> None:
        """Replace the document; last writer wins."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(json.dumps(data, indent=2, ensure_ascii=False))
        except OSError as e:
            logger.error("Error writing %s: %s", self.path, e)
            raise PersistenceError("Failed to update history data")
