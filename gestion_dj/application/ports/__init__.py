"""Application ports package."""

from .data_store import DataStorePort
from .database import DatabaseEnginePort
from .password_hasher import PasswordHasherPort

__all__ = [
    "DataStorePort",
    "DatabaseEnginePort",
    "PasswordHasherPort",
]
