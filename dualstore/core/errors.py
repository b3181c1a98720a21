from typing import Any, Optional

class StoreError(Exception):
    """Base class for every error raised by dualstore."""

class InvalidOperationError(StoreError, ValueError):
    def __init__(self, operation: Any):
        self.operation = operation
        super().__init__(f"Invalid operation: {operation!r} (expected one of 'new', 'set', 'get')")

class InvalidBackendError(StoreError, ValueError):
    def __init__(self, backend: Any):
        self.backend = backend
        super().__init__(f"Invalid storage type specified: {backend!r}")

class InvalidEventError(StoreError, ValueError):
    def __init__(self, event: Any):
        self.event = event
        super().__init__(f"Unknown event: {event!r} (expected 'set' or 'clear')")

class ReadError(StoreError):
    def __init__(self, path: Optional[str], reason: str):
        self.path = path
        super().__init__(f"Error loading data from {path or 'document'}: {reason}")

class WriteError(StoreError):
    def __init__(self, path: Optional[str], reason: str):
        self.path = path
        super().__init__(f"Error saving data to {path or 'document'}: {reason}")
