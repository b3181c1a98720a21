import json
from typing import Any, Dict, Optional, Protocol, runtime_checkable
from ..core.errors import ReadError

@runtime_checkable
class DocumentStorage(Protocol):
    @property
    def location(self) -> Optional[str]:
        ...

    async def read(self) -> Dict[str, Any]:
        ...

    async def write(self, data: Dict[str, Any]) -> None:
        ...

def parse_document(content: str, location: Optional[str]) -> Dict[str, Any]:
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        raise ReadError(location, f"invalid JSON ({e})") from e
    if not isinstance(parsed, dict):
        raise ReadError(location, f"expected a JSON object at top level, got {type(parsed).__name__}")
    return parsed
