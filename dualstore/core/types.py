from enum import Enum
from typing import Any, Callable, Dict
from pydantic import BaseModel, ConfigDict

class Backend(str, Enum):
    VOLATILE = 'ram'
    PERSISTENT = 'json'

class Operation(str, Enum):
    NEW = 'new'
    SET = 'set'
    GET = 'get'

class Event(str, Enum):
    SET = 'set'
    CLEAR = 'clear'

BACKEND_ALIASES: Dict[str, Backend] = {
    'ram': Backend.VOLATILE,
    'memory': Backend.VOLATILE,
    'volatile': Backend.VOLATILE,
    'json': Backend.PERSISTENT,
    'file': Backend.PERSISTENT,
    'persistent': Backend.PERSISTENT,
}

EventHandler = Callable[[str], Any]

class StoreResult(BaseModel):
    success: bool
    message: str

    model_config = ConfigDict(frozen=True)
