from __future__ import annotations

import contextlib
from typing import Any, Iterator
from urllib.parse import quote

import httpx

from ..core.documents import ContractInfo, Document, RecordCount, RecordStatus
from ..core.errors import ERROR_TYPES, error_from_code
from ..api.parsing import CALLER_HEADER


def _document_from_dict(data: dict[str, Any]) -> Document:
    return Document(
        id=int(data["id"]),
        locator=str(data["locator"]),
        integrity_hash=str(data["integrityHash"]),
        owner=str(data["owner"]),
        created_at=int(data["createdAt"]),
        last_updated_at=int(data["lastUpdatedAt"]),
        active=bool(data["active"]),
    )


def _contract_info_from_dict(data: dict[str, Any]) -> ContractInfo:
    return ContractInfo(
        total_records=int(data["totalRecords"]),
        administrator=str(data["administrator"]),
        paused=bool(data["paused"]),
    )


def _raise_for_status(res: httpx.Response, what: str) -> None:
    if res.status_code < 400:
        return
    try:
        payload = res.json()
    except ValueError:
        payload = None
    detail = payload.get("detail") if isinstance(payload, dict) else None
    if isinstance(detail, dict) and detail.get("error") in ERROR_TYPES:
        raise error_from_code(detail["error"], detail.get("reason"))
    raise RuntimeError(f"{what} failed: {res.status_code} {res.text}")


class RegistryClient:
    """HTTP client for a running docledger node.

    Every mutating call is sent as `caller`. Registry rejections come back as the same
    exception classes the in-process `RegistryService` raises; transport or unexpected
    HTTP failures raise `RuntimeError`.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        caller: str | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.caller = caller
        self._http = http

    def with_caller(self, caller: str) -> "RegistryClient":
        return RegistryClient(self.base_url, caller=caller, http=self._http)

    @contextlib.contextmanager
    def _client(self, timeout_s: float) -> Iterator[httpx.Client]:
        # An injected client (e.g. fastapi.testclient.TestClient) is borrowed, not closed.
        if self._http is not None:
            yield self._http
            return
        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            yield client

    def _headers(self) -> dict[str, str]:
        if not self.caller:
            raise ValueError("caller is required for mutating calls")
        return {CALLER_HEADER: self.caller}

    # -- documents ------------------------------------------------------------------

    def store_document(self, record_id: int, locator: str, integrity_hash: str, *, timeout_s: float = 10.0) -> Document:
        with self._client(timeout_s) as client:
            res = client.post(
                "/api/documents",
                json={"id": record_id, "locator": locator, "integrityHash": integrity_hash},
                headers=self._headers(),
            )
            _raise_for_status(res, "Store document")
            return _document_from_dict(res.json())

    def get_document(self, record_id: int, *, timeout_s: float = 10.0) -> Document:
        with self._client(timeout_s) as client:
            res = client.get(f"/api/documents/{int(record_id)}")
            _raise_for_status(res, "Get document")
            return _document_from_dict(res.json())

    def update_document_metadata(self, record_id: int, new_integrity_hash: str, *, timeout_s: float = 10.0) -> Document:
        with self._client(timeout_s) as client:
            res = client.patch(
                f"/api/documents/{int(record_id)}/metadata",
                json={"integrityHash": new_integrity_hash},
                headers=self._headers(),
            )
            _raise_for_status(res, "Update document metadata")
            return _document_from_dict(res.json())

    def deactivate_document(self, record_id: int, *, timeout_s: float = 10.0) -> Document:
        with self._client(timeout_s) as client:
            res = client.post(f"/api/documents/{int(record_id)}/deactivate", headers=self._headers())
            _raise_for_status(res, "Deactivate document")
            return _document_from_dict(res.json())

    def verify_document(self, record_id: int, candidate_hash: str, *, timeout_s: float = 10.0) -> bool:
        with self._client(timeout_s) as client:
            res = client.get(f"/api/documents/{int(record_id)}/verify", params={"hash": candidate_hash})
            _raise_for_status(res, "Verify document")
            return bool(res.json().get("valid"))

    def record_status(self, record_id: int, *, timeout_s: float = 10.0) -> RecordStatus:
        with self._client(timeout_s) as client:
            res = client.get(f"/api/documents/{int(record_id)}/status")
            _raise_for_status(res, "Record status")
            data = res.json()
            return RecordStatus(exists=bool(data["exists"]), active=bool(data["active"]))

    # -- owner index ----------------------------------------------------------------

    def get_user_records(self, owner: str, *, active_only: bool = False, timeout_s: float = 10.0) -> list[int]:
        params = {"active": "1"} if active_only else None
        with self._client(timeout_s) as client:
            res = client.get(f"/api/owners/{quote(owner, safe='')}/records", params=params)
            _raise_for_status(res, "Get user records")
            return [int(i) for i in res.json().get("records", [])]

    def get_user_active_records(self, owner: str, *, timeout_s: float = 10.0) -> list[int]:
        return self.get_user_records(owner, active_only=True, timeout_s=timeout_s)

    def get_user_record_count(self, owner: str, *, timeout_s: float = 10.0) -> RecordCount:
        with self._client(timeout_s) as client:
            res = client.get(f"/api/owners/{quote(owner, safe='')}/count")
            _raise_for_status(res, "Get user record count")
            data = res.json()
            return RecordCount(total=int(data["total"]), active=int(data["active"]))

    # -- administration -------------------------------------------------------------

    def pause_contract(self, *, timeout_s: float = 10.0) -> ContractInfo:
        with self._client(timeout_s) as client:
            res = client.post("/api/admin/pause", headers=self._headers())
            _raise_for_status(res, "Pause")
            return _contract_info_from_dict(res.json())

    def unpause_contract(self, *, timeout_s: float = 10.0) -> ContractInfo:
        with self._client(timeout_s) as client:
            res = client.post("/api/admin/unpause", headers=self._headers())
            _raise_for_status(res, "Unpause")
            return _contract_info_from_dict(res.json())

    def transfer_ownership(self, new_admin: str, *, timeout_s: float = 10.0) -> ContractInfo:
        with self._client(timeout_s) as client:
            res = client.post("/api/admin/transfer-ownership", json={"newAdmin": new_admin}, headers=self._headers())
            _raise_for_status(res, "Transfer ownership")
            return _contract_info_from_dict(res.json())

    def get_contract_info(self, *, timeout_s: float = 10.0) -> ContractInfo:
        with self._client(timeout_s) as client:
            res = client.get("/api/info")
            _raise_for_status(res, "Get contract info")
            return _contract_info_from_dict(res.json())

    def get_events(self, *, after: int = 0, name: str | None = None, timeout_s: float = 10.0) -> dict[str, Any]:
        params: dict[str, str] = {"after": str(int(after))}
        if name:
            params["name"] = name
        with self._client(timeout_s) as client:
            res = client.get("/api/events", params=params)
            _raise_for_status(res, "Get events")
            return dict(res.json())
