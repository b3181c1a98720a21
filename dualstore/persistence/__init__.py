from .base import DocumentStorage
from .memory import MemoryDocumentStorage
from .file import JsonFileStorage

__all__ = ['DocumentStorage', 'MemoryDocumentStorage', 'JsonFileStorage']
