from typing import Any, Callable, Dict, Optional, Union
from loguru import logger
from .types import Event, EventHandler, Operation, StoreResult
from .volatile import VolatileMap, route
from ..persistence.base import DocumentStorage

class PersistentMap:
    """
    JSON-backed key-value map.

    Behaves like VolatileMap for reads and writes, and writes the whole
    value map through its DocumentStorage after every set/clear.
    Expirations are kept in memory only.
    """
    def __init__(self, storage: DocumentStorage, initial_data: Optional[Dict[str, Any]] = None, clock: Optional[Callable[[], int]] = None):
        self.storage = storage
        self._map = VolatileMap(initial_data, clock=clock)

    def __contains__(self, key: str) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)

    def snapshot(self) -> Dict[str, Any]:
        return self._map.snapshot()

    def expiration(self, key: str) -> Optional[int]:
        return self._map.expiration(key)

    async def flush(self) -> None:
        await self.storage.write(self._map.snapshot())
        logger.info(f"Saved {len(self._map)} entries to {self.storage.location or 'document'}")

    async def load(self) -> None:
        values = await self.storage.read()
        self._map.replace(values)
        logger.info(f"Loaded {len(values)} entries from {self.storage.location or 'document'}")

    async def dispatch(self, key: str, operation: Union[Operation, str], value: Any = None, ttl: Optional[int] = None) -> Any:
        return await route(self, key, operation, value, ttl)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> StoreResult:
        await self._map.set(key, value, ttl)
        await self.flush()
        return StoreResult(success=True, message='Data memorized in JSON')

    async def get(self, key: str) -> Any:
        return await self._map.get(key)

    async def clear(self, key: str) -> StoreResult:
        await self._map.clear(key)
        await self.flush()
        return StoreResult(success=True, message='Data deleted from JSON')

    def on(self, event: Union[Event, str], handler: EventHandler):
        self._map.on(event, handler)
