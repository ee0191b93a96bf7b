from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Any

from ..clock import Clock, SystemClock
from ..documents import HASH_LENGTH, MAX_RECORD_ID, ContractInfo, Document, RecordCount, RecordStatus
from ..errors import (
    AlreadyInactive,
    DuplicateIdentifier,
    EmptyLocator,
    InvalidAddress,
    InvalidHashLength,
    InvalidIdentifier,
    NotAuthorized,
    NotRecordOwner,
    RecordNotFound,
    SystemPaused,
)
from ..events import (
    ContractPaused,
    ContractUnpaused,
    DocumentDeactivated,
    DocumentStored,
    DocumentUpdated,
    EventLog,
    EventSink,
    OwnershipTransferred,
)
from ..identity import is_null_identity, normalize_identity

logger = logging.getLogger(__name__)


class RegistryService:
    """Document registry: record store, per-owner index, administrator and pause switch.

    Every public method holds `self._lock` for its whole duration, so mutations are
    serialized and readers only ever see committed state. Mutating methods run all of
    their checks and hand the event to the sink before touching any field, so an exception
    from either means nothing changed.
    """

    def __init__(
        self,
        administrator: str,
        *,
        clock: Clock | None = None,
        events: EventSink | None = None,
    ) -> None:
        admin = self._validate_identity(administrator, "Administrator cannot be the null identity")
        self._lock = threading.RLock()
        self._documents: dict[int, Document] = {}
        self._owner_index: dict[str, list[int]] = {}
        self._administrator = admin
        self._paused = False
        self._total_records = 0
        self._global_revision = 0
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._events: EventSink = events if events is not None else EventLog()

    @property
    def events(self) -> EventSink:
        return self._events

    @property
    def administrator(self) -> str:
        with self._lock:
            return self._administrator

    @property
    def paused(self) -> bool:
        with self._lock:
            return self._paused

    @property
    def total_records(self) -> int:
        with self._lock:
            return self._total_records

    def global_revision(self) -> int:
        with self._lock:
            return self._global_revision

    # -- validation -----------------------------------------------------------------

    @staticmethod
    def _validate_record_id(record_id: Any) -> int:
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise InvalidIdentifier("Record ID must be a positive integer")
        if record_id <= 0:
            raise InvalidIdentifier()
        if record_id > MAX_RECORD_ID:
            raise InvalidIdentifier("Record ID exceeds the 256-bit range")
        return record_id

    @staticmethod
    def _validate_hash(integrity_hash: Any) -> str:
        if not isinstance(integrity_hash, str) or len(integrity_hash) != HASH_LENGTH:
            raise InvalidHashLength()
        return integrity_hash

    @staticmethod
    def _validate_identity(value: Any, reason: str | None = None) -> str:
        # Stored the way `normalize_identity` presents callers, so the holder can always match.
        if not isinstance(value, str) or is_null_identity(value):
            raise InvalidAddress(reason)
        return normalize_identity(value)

    def _require_not_paused_locked(self) -> None:
        if self._paused:
            raise SystemPaused()

    def _require_admin_locked(self, caller: str) -> None:
        if caller != self._administrator:
            logger.debug("Rejected admin call from %s", caller)
            raise NotAuthorized()

    def _require_document_locked(self, record_id: Any) -> Document:
        doc = self._documents.get(record_id) if self._is_key(record_id) else None
        if doc is None:
            raise RecordNotFound()
        return doc

    @staticmethod
    def _require_owner(doc: Document, caller: str) -> None:
        if caller != doc.owner:
            logger.debug("Rejected write to record %s from non-owner %s", doc.id, caller)
            raise NotRecordOwner()

    @staticmethod
    def _is_key(record_id: Any) -> bool:
        return isinstance(record_id, int) and not isinstance(record_id, bool)

    def _commit_locked(self) -> int:
        self._global_revision += 1
        return self._global_revision

    # -- documents ------------------------------------------------------------------

    def store_document(self, record_id: int, locator: str, integrity_hash: str, *, caller: str) -> Document:
        with self._lock:
            rid = self._validate_record_id(record_id)
            self._require_not_paused_locked()
            if not isinstance(locator, str) or locator == "":
                raise EmptyLocator()
            digest = self._validate_hash(integrity_hash)
            if rid in self._documents:
                raise DuplicateIdentifier()

            now = self._clock.now()
            doc = Document(
                id=rid,
                locator=locator,
                integrity_hash=digest,
                owner=caller,
                created_at=now,
                last_updated_at=now,
                active=True,
            )
            # The sink may refuse the event; nothing below it can fail.
            self._events.emit(DocumentStored(rid, caller, locator, digest, now))
            self._documents[rid] = doc
            self._owner_index.setdefault(caller, []).append(rid)
            self._total_records += 1
            self._commit_locked()
            logger.info("Stored record %s for %s", rid, caller)
            return doc

    def get_document(self, record_id: int) -> Document:
        with self._lock:
            return self._require_document_locked(record_id)

    def update_document_metadata(self, record_id: int, new_integrity_hash: str, *, caller: str) -> Document:
        with self._lock:
            doc = self._require_document_locked(record_id)
            self._require_not_paused_locked()
            self._require_owner(doc, caller)
            digest = self._validate_hash(new_integrity_hash)

            now = self._clock.now()
            updated = replace(doc, integrity_hash=digest, last_updated_at=now)
            self._events.emit(DocumentUpdated(doc.id, caller, digest, now))
            self._documents[doc.id] = updated
            self._commit_locked()
            logger.info("Updated metadata hash of record %s", doc.id)
            return updated

    def deactivate_document(self, record_id: int, *, caller: str) -> Document:
        with self._lock:
            doc = self._require_document_locked(record_id)
            self._require_not_paused_locked()
            self._require_owner(doc, caller)
            if not doc.active:
                raise AlreadyInactive()

            now = self._clock.now()
            updated = replace(doc, active=False)
            self._events.emit(DocumentDeactivated(doc.id, caller, now))
            self._documents[doc.id] = updated
            self._commit_locked()
            logger.info("Deactivated record %s", doc.id)
            return updated

    def verify_document(self, record_id: Any, candidate_hash: Any) -> bool:
        with self._lock:
            if not self._is_key(record_id):
                return False
            doc = self._documents.get(record_id)
            if doc is None:
                return False
            return doc.integrity_hash == candidate_hash

    def record_status(self, record_id: Any) -> RecordStatus:
        with self._lock:
            doc = self._documents.get(record_id) if self._is_key(record_id) else None
            if doc is None:
                return RecordStatus(exists=False, active=False)
            return RecordStatus(exists=True, active=doc.active)

    # -- owner index ----------------------------------------------------------------

    def get_user_records(self, owner: str) -> list[int]:
        with self._lock:
            return list(self._owner_index.get(owner, ()))

    def get_user_active_records(self, owner: str) -> list[int]:
        with self._lock:
            return [rid for rid in self._owner_index.get(owner, ()) if self._documents[rid].active]

    def get_user_record_count(self, owner: str) -> RecordCount:
        with self._lock:
            ids = self._owner_index.get(owner, ())
            active = sum(1 for rid in ids if self._documents[rid].active)
            return RecordCount(total=len(ids), active=active)

    # -- administration -------------------------------------------------------------

    def pause_contract(self, *, caller: str) -> None:
        with self._lock:
            self._require_admin_locked(caller)
            self._events.emit(ContractPaused(caller, self._clock.now()))
            self._paused = True
            self._commit_locked()
            logger.info("Registry paused by %s", caller)

    def unpause_contract(self, *, caller: str) -> None:
        with self._lock:
            self._require_admin_locked(caller)
            self._events.emit(ContractUnpaused(caller, self._clock.now()))
            self._paused = False
            self._commit_locked()
            logger.info("Registry unpaused by %s", caller)

    def transfer_ownership(self, new_admin: str, *, caller: str) -> None:
        with self._lock:
            self._require_admin_locked(caller)
            admin = self._validate_identity(new_admin)

            previous = self._administrator
            self._events.emit(OwnershipTransferred(previous, admin, self._clock.now()))
            self._administrator = admin
            self._commit_locked()
            logger.info("Administrator changed from %s to %s", previous, admin)

    def get_contract_info(self) -> ContractInfo:
        with self._lock:
            return ContractInfo(
                total_records=self._total_records,
                administrator=self._administrator,
                paused=self._paused,
            )
