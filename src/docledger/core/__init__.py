from __future__ import annotations

from .clock import Clock, ManualClock, SystemClock
from .documents import HASH_LENGTH, MAX_RECORD_ID, ContractInfo, Document, RecordCount, RecordStatus
from .errors import (
    ERROR_TYPES,
    AlreadyInactive,
    DuplicateIdentifier,
    EmptyLocator,
    InvalidAddress,
    InvalidHashLength,
    InvalidIdentifier,
    NotAuthorized,
    NotRecordOwner,
    RecordNotFound,
    RegistryError,
    SystemPaused,
    error_from_code,
)
from .events import (
    ContractPaused,
    ContractUnpaused,
    DocumentDeactivated,
    DocumentStored,
    DocumentUpdated,
    Event,
    EventLog,
    EventSink,
    OwnershipTransferred,
    RecordedEvent,
)
from .identity import NULL_IDENTITY, is_null_identity, normalize_identity
from .registry import RegistryService

__all__ = [
    "Clock",
    "SystemClock",
    "ManualClock",
    "HASH_LENGTH",
    "MAX_RECORD_ID",
    "Document",
    "RecordStatus",
    "RecordCount",
    "ContractInfo",
    "ERROR_TYPES",
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
    "error_from_code",
    "Event",
    "DocumentStored",
    "DocumentUpdated",
    "DocumentDeactivated",
    "ContractPaused",
    "ContractUnpaused",
    "OwnershipTransferred",
    "EventSink",
    "EventLog",
    "RecordedEvent",
    "NULL_IDENTITY",
    "is_null_identity",
    "normalize_identity",
    "RegistryService",
]
