from __future__ import annotations

from .core import (
    NULL_IDENTITY,
    AlreadyInactive,
    ContractInfo,
    Document,
    DuplicateIdentifier,
    EmptyLocator,
    EventLog,
    InvalidAddress,
    InvalidHashLength,
    InvalidIdentifier,
    ManualClock,
    NotAuthorized,
    NotRecordOwner,
    RecordCount,
    RecordNotFound,
    RecordStatus,
    RegistryError,
    RegistryService,
    SystemClock,
    SystemPaused,
)
from .runtime import RegistryServer, run
from .sdk import RegistryClient

__all__ = [
    "run",
    "RegistryServer",
    "RegistryClient",
    "RegistryService",
    "Document",
    "RecordStatus",
    "RecordCount",
    "ContractInfo",
    "EventLog",
    "SystemClock",
    "ManualClock",
    "NULL_IDENTITY",
    "RegistryError",
    "InvalidIdentifier",
    "SystemPaused",
    "EmptyLocator",
    "InvalidHashLength",
    "DuplicateIdentifier",
    "RecordNotFound",
    "NotRecordOwner",
    "NotAuthorized",
    "InvalidAddress",
    "AlreadyInactive",
]
