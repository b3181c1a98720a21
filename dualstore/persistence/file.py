import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union
from loguru import logger
from ..core.errors import ReadError, WriteError
from .base import parse_document

DEFAULT_FILE_NAME = 'data.json'

class JsonFileStorage:
    """
    File-Based Document Storage

    Persists the whole value map as one indented JSON document on disk.
    Blocking file I/O runs in a worker thread so callers can await it.
    """
    def __init__(self, file_path: Union[str, Path, None] = None, encoding: str = 'utf-8', indent: Optional[int] = 2):
        self.file_path = Path(file_path or DEFAULT_FILE_NAME)
        self.encoding = encoding
        self.indent = indent

    @property
    def location(self) -> Optional[str]:
        return str(self.file_path)

    async def read(self) -> Dict[str, Any]:
        try:
            content = await asyncio.to_thread(self.file_path.read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading data from JSON: {e}")
            raise ReadError(self.location, str(e)) from e
        try:
            return parse_document(content, self.location)
        except ReadError as e:
            logger.error(f"Error loading data from JSON: {e}")
            raise

    async def write(self, data: Dict[str, Any]) -> None:
        try:
            content = json.dumps(data, indent=self.indent, ensure_ascii=False)
            await asyncio.to_thread(self._write_text, content)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving data to JSON: {e}")
            raise WriteError(self.location, str(e)) from e

    def _write_text(self, content: str):
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self.file_path.write_text(content, encoding=self.encoding)
