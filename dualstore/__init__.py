from .core.store import Store
from .core.volatile import VolatileMap
from .core.persistent import PersistentMap
from .core.types import Backend, Operation, Event, StoreResult
from .core.errors import StoreError, InvalidOperationError, InvalidBackendError, InvalidEventError, ReadError, WriteError
from .config import StoreOptions
from .persistence import DocumentStorage, JsonFileStorage, MemoryDocumentStorage

__all__ = [
    'Store',
    'VolatileMap',
    'PersistentMap',
    'Backend',
    'Operation',
    'Event',
    'StoreResult',
    'StoreError',
    'InvalidOperationError',
    'InvalidBackendError',
    'InvalidEventError',
    'ReadError',
    'WriteError',
    'StoreOptions',
    'DocumentStorage',
    'JsonFileStorage',
    'MemoryDocumentStorage'
]
