from __future__ import annotations

from typing import Any

from ...core.documents import ContractInfo, Document, RecordCount, RecordStatus
from ...core.events import RecordedEvent

_EVENT_KEYS = {
    "integrity_hash": "integrityHash",
    "new_integrity_hash": "newIntegrityHash",
    "previous_owner": "previousOwner",
    "new_owner": "newOwner",
}


def document_to_dict(d: Document) -> dict[str, Any]:
    return {
        "id": int(d.id),
        "locator": d.locator,
        "integrityHash": d.integrity_hash,
        "owner": d.owner,
        "createdAt": int(d.created_at),
        "lastUpdatedAt": int(d.last_updated_at),
        "active": bool(d.active),
    }


def status_to_dict(s: RecordStatus) -> dict[str, bool]:
    return {"exists": bool(s.exists), "active": bool(s.active)}


def count_to_dict(c: RecordCount) -> dict[str, int]:
    return {"total": int(c.total), "active": int(c.active)}


def contract_info_to_dict(info: ContractInfo) -> dict[str, Any]:
    return {
        "totalRecords": int(info.total_records),
        "administrator": info.administrator,
        "paused": bool(info.paused),
    }


def recorded_event_to_dict(entry: RecordedEvent) -> dict[str, Any]:
    args = {_EVENT_KEYS.get(k, k): v for k, v in entry.event.to_dict().items()}
    return {"seq": int(entry.seq), "name": entry.event.name, "args": args}
