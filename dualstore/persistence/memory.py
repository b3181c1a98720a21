import json
from typing import Any, Dict, Optional
from loguru import logger
from ..core.errors import ReadError, WriteError
from .base import parse_document

class MemoryDocumentStorage:
    """
    In-Memory Document Storage

    Keeps the serialized document in a string instead of a file.
    Useful for testing, or when the persistent backend should not touch disk.
    """
    def __init__(self, content: Optional[str] = None):
        self._content = content

    @property
    def location(self) -> Optional[str]:
        return None

    @property
    def content(self) -> Optional[str]:
        return self._content

    async def read(self) -> Dict[str, Any]:
        if self._content is None:
            logger.error("Error loading data from memory: no document has been written yet")
            raise ReadError(None, "no document has been written yet")
        try:
            return parse_document(self._content, None)
        except ReadError as e:
            logger.error(f"Error loading data from memory: {e}")
            raise

    async def write(self, data: Dict[str, Any]) -> None:
        try:
            self._content = json.dumps(data, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Error saving data to memory: {e}")
            raise WriteError(None, str(e)) from e
