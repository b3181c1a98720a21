from typing import Any, Callable, Optional, Union
from .errors import InvalidBackendError
from .persistent import PersistentMap
from .types import BACKEND_ALIASES, Backend, Event, EventHandler, Operation
from .volatile import VolatileMap, resolve_operation
from ..config import StoreOptions
from ..persistence.base import DocumentStorage
from ..persistence.file import JsonFileStorage

def resolve_backend(backend: Union[Backend, str]) -> Backend:
    if isinstance(backend, Backend):
        return backend
    if isinstance(backend, str):
        resolved = BACKEND_ALIASES.get(backend.strip().lower())
        if resolved is not None:
            return resolved
    raise InvalidBackendError(backend)


class Store:
    """
    Single request surface over a RAM map and a JSON-backed map.

    Each call picks its backend; the two never share entries. Event
    handlers registered here are registered on both backends.
    """
    def __init__(self, options: Optional[StoreOptions] = None, storage: Optional[DocumentStorage] = None, clock: Optional[Callable[[], int]] = None):
        self.options = options or StoreOptions()
        if storage is None:
            storage = JsonFileStorage(self.options.file_path, encoding=self.options.encoding, indent=self.options.indent)
        self._ram = VolatileMap(clock=clock)
        self._json = PersistentMap(storage, clock=clock)

    @property
    def ram(self) -> VolatileMap:
        return self._ram

    @property
    def json(self) -> PersistentMap:
        return self._json

    def backend(self, selector: Union[Backend, str]) -> Union[VolatileMap, PersistentMap]:
        if resolve_backend(selector) == Backend.PERSISTENT:
            return self._json
        return self._ram

    async def dispatch(
            self,
            key: str,
            operation: Union[Operation, str],
            value: Any = None,
            backend: Union[Backend, str] = Backend.VOLATILE,
            ttl: Optional[int] = None
    ) -> Any:
        target = self.backend(backend)
        if resolve_operation(operation) == Operation.GET:
            return await target.get(key)
        return await target.dispatch(key, operation, value, ttl)

    def on(self, event: Union[Event, str], handler: EventHandler):
        self._ram.on(event, handler)
        self._json.on(event, handler)

    async def load_all(self):
        await self._json.load()

    async def save_all(self):
        await self._json.flush()
