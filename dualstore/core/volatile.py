import time
from typing import Any, Callable, Dict, List, Optional, Union
from loguru import logger
from .errors import InvalidEventError, InvalidOperationError
from .types import Event, EventHandler, Operation, StoreResult

def now_ms() -> int:
    return int(time.time() * 1000)

def _normalize(name: Any) -> Any:
    if isinstance(name, str):
        return name.strip().lower()
    return name

def resolve_operation(operation: Union[Operation, str]) -> Operation:
    try:
        return Operation(_normalize(operation))
    except ValueError:
        raise InvalidOperationError(operation) from None

def resolve_event(event: Union[Event, str]) -> Event:
    try:
        return Event(_normalize(event))
    except ValueError:
        raise InvalidEventError(event) from None

async def route(target: Any, key: str, operation: Union[Operation, str], value: Any = None, ttl: Optional[int] = None) -> Any:
    """Send one request to ``target``'s clear, set or get."""
    op = resolve_operation(operation)
    if op == Operation.NEW:
        return await target.clear(key)
    if op == Operation.SET:
        return await target.set(key, value, ttl)
    return await target.get(key)


class VolatileMap:
    """
    RAM-only key-value map.

    Entries live for the process lifetime. A ttl (milliseconds) makes an
    entry expire; expired entries are evicted lazily on the next read.
    """
    def __init__(self, initial_data: Optional[Dict[str, Any]] = None, clock: Optional[Callable[[], int]] = None):
        self._data: Dict[str, Any] = dict(initial_data or {})
        self._expirations: Dict[str, int] = {}
        self._handlers: Dict[Event, List[EventHandler]] = {event: [] for event in Event}
        self._clock = clock or now_ms

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._data)

    def expiration(self, key: str) -> Optional[int]:
        return self._expirations.get(key)

    def replace(self, values: Dict[str, Any]):
        self._data = dict(values)
        self._expirations = {}

    async def dispatch(self, key: str, operation: Union[Operation, str], value: Any = None, ttl: Optional[int] = None) -> Any:
        return await route(self, key, operation, value, ttl)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> StoreResult:
        if ttl is not None and ttl < 0:
            raise ValueError(f"ttl must be a positive number of milliseconds, got {ttl}")

        self._data[key] = value
        if ttl:
            self._expirations[key] = self._clock() + ttl
        else:
            # a plain overwrite makes the entry permanent again
            self._expirations.pop(key, None)

        self._emit(Event.SET, key)
        return StoreResult(success=True, message='Data memorized in RAM')

    async def get(self, key: str) -> Any:
        expires_at = self._expirations.get(key)
        if expires_at is not None and self._clock() > expires_at:
            logger.debug(f"[Expired] {key} evicted on read")
            self._remove(key)
            self._emit(Event.CLEAR, key, contain=True)
            return None
        return self._data.get(key)

    async def clear(self, key: str) -> StoreResult:
        self._remove(key)
        self._emit(Event.CLEAR, key)
        return StoreResult(success=True, message='Data deleted from RAM')

    def _remove(self, key: str):
        self._data.pop(key, None)
        self._expirations.pop(key, None)

    def on(self, event: Union[Event, str], handler: EventHandler):
        self._handlers[resolve_event(event)].append(handler)

    def _emit(self, event: Event, key: str, contain: bool = False):
        for handler in self._handlers[event]:
            if not contain:
                handler(key)
                continue
            # eviction on read never raises
            try:
                handler(key)
            except Exception as e:
                logger.error(f"Error in event listener for {event.value} on {key}: {e}")
