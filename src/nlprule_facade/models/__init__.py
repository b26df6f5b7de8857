from .base_model import BaseEngineBackend, WordData, Token, Suggestion
from .pickle_backend import PickleBackend
from .backend_factory import BackendFactory

__all__ = [
    "BaseEngineBackend",
    "WordData",
    "Token",
    "Suggestion",
    "PickleBackend",
    "BackendFactory",
]
