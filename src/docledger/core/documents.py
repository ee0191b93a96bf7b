from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

HASH_LENGTH = 64
MAX_RECORD_ID = 2**256 - 1


@dataclass(frozen=True, kw_only=True)
class Document:
    """One registry record.

    Notes:
    - Records are never mutated in place; the registry swaps in a `dataclasses.replace` copy.
    - `owner` and `locator` never change after creation.
    - `active` only ever goes from True to False.
    """

    id: int
    locator: str
    integrity_hash: str
    owner: str
    created_at: int
    last_updated_at: int
    active: bool = True

    def as_tuple(self) -> tuple[str, str, str, int, bool]:
        """Return `(locator, integrity_hash, owner, last_updated_at, active)`."""
        return (self.locator, self.integrity_hash, self.owner, self.last_updated_at, self.active)


class RecordStatus(NamedTuple):
    exists: bool
    active: bool


class RecordCount(NamedTuple):
    total: int
    active: int


class ContractInfo(NamedTuple):
    total_records: int
    administrator: str
    paused: bool
