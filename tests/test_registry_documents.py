from __future__ import annotations

import pytest

from docledger.core import (
    AlreadyInactive,
    DuplicateIdentifier,
    EmptyLocator,
    InvalidHashLength,
    InvalidIdentifier,
    ManualClock,
    NotRecordOwner,
    RecordNotFound,
    RecordStatus,
    RegistryService,
    SystemPaused,
)

ADMIN = "0xadmin"
ALICE = "0xalice"
BOB = "0xbob"
CID = "QmTestCID123456789"
HASH = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
OTHER_HASH = "fedcba9876543210fedcba9876543210fedcba9876543210fedcba9876543210"


def _registry(start: int = 1_000) -> tuple[RegistryService, ManualClock]:
    clock = ManualClock(start)
    return RegistryService(ADMIN, clock=clock), clock


def test_store_and_get_document_round_trip() -> None:
    reg, _ = _registry()

    stored = reg.store_document(1, CID, HASH, caller=ALICE)
    assert stored.owner == ALICE
    assert stored.active is True
    assert stored.created_at == stored.last_updated_at == 1_000

    doc = reg.get_document(1)
    assert doc.as_tuple() == (CID, HASH, ALICE, 1_000, True)
    assert reg.get_user_records(ALICE) == [1]
    assert reg.verify_document(1, HASH) is True
    assert reg.verify_document(1, OTHER_HASH) is False
    assert reg.total_records == 1


@pytest.mark.parametrize("bad_id", [0, -5, True, 1.5, "1", None, 2**256])
def test_store_rejects_invalid_identifiers(bad_id: object) -> None:
    reg, _ = _registry()
    with pytest.raises(InvalidIdentifier):
        reg.store_document(bad_id, CID, HASH, caller=ALICE)  # type: ignore[arg-type]
    assert reg.total_records == 0


def test_store_accepts_largest_identifier() -> None:
    reg, _ = _registry()
    reg.store_document(2**256 - 1, CID, HASH, caller=ALICE)
    assert reg.record_status(2**256 - 1) == RecordStatus(exists=True, active=True)


def test_store_rejects_empty_locator_and_bad_hash_length() -> None:
    reg, _ = _registry()

    with pytest.raises(EmptyLocator) as ex:
        reg.store_document(1, "", HASH, caller=ALICE)
    assert ex.value.reason == "CID cannot be empty"

    with pytest.raises(InvalidHashLength):
        reg.store_document(1, CID, "123", caller=ALICE)
    with pytest.raises(InvalidHashLength):
        reg.store_document(1, CID, HASH + "0", caller=ALICE)

    assert reg.record_status(1) == RecordStatus(exists=False, active=False)
    assert reg.get_user_records(ALICE) == []


def test_store_checks_preconditions_in_order() -> None:
    reg, _ = _registry()
    reg.pause_contract(caller=ADMIN)

    # Identifier is checked before the pause switch, pause before the payload.
    with pytest.raises(InvalidIdentifier):
        reg.store_document(0, "", "x", caller=ALICE)
    with pytest.raises(SystemPaused):
        reg.store_document(1, "", "x", caller=ALICE)

    reg.unpause_contract(caller=ADMIN)
    with pytest.raises(EmptyLocator):
        reg.store_document(1, "", "x", caller=ALICE)


def test_duplicate_identifier_fails_without_side_effects() -> None:
    reg, _ = _registry()
    reg.store_document(1, CID, HASH, caller=ALICE)

    for caller in (ALICE, BOB):
        with pytest.raises(DuplicateIdentifier) as ex:
            reg.store_document(1, "QmAnotherCID", OTHER_HASH, caller=caller)
        assert ex.value.reason == "Record ID already exists"

    assert reg.total_records == 1
    assert reg.get_user_records(BOB) == []
    assert reg.get_document(1).locator == CID


def test_get_unknown_document_fails() -> None:
    reg, _ = _registry()
    with pytest.raises(RecordNotFound) as ex:
        reg.get_document(999)
    assert ex.value.reason == "Record does not exist"
    with pytest.raises(RecordNotFound):
        reg.get_document(0)


def test_update_metadata_by_owner_advances_timestamp() -> None:
    reg, clock = _registry()
    reg.store_document(1, CID, HASH, caller=ALICE)

    with pytest.raises(NotRecordOwner):
        reg.update_document_metadata(1, OTHER_HASH, caller=BOB)
    assert reg.get_document(1).integrity_hash == HASH

    clock.advance(30)
    updated = reg.update_document_metadata(1, OTHER_HASH, caller=ALICE)
    assert updated.integrity_hash == OTHER_HASH
    assert updated.last_updated_at == 1_030
    assert updated.created_at == 1_000
    assert updated.locator == CID
    assert reg.verify_document(1, OTHER_HASH) is True
    assert reg.verify_document(1, HASH) is False


def test_update_metadata_precondition_order() -> None:
    reg, _ = _registry()
    with pytest.raises(RecordNotFound):
        reg.update_document_metadata(7, "bad", caller=ALICE)

    reg.store_document(7, CID, HASH, caller=ALICE)
    with pytest.raises(NotRecordOwner):
        reg.update_document_metadata(7, "bad", caller=BOB)
    with pytest.raises(InvalidHashLength):
        reg.update_document_metadata(7, "bad", caller=ALICE)

    reg.pause_contract(caller=ADMIN)
    with pytest.raises(SystemPaused):
        reg.update_document_metadata(7, "bad", caller=BOB)


def test_deactivate_is_owner_only_and_irreversible() -> None:
    reg, clock = _registry()
    reg.store_document(1, CID, HASH, caller=ALICE)

    with pytest.raises(NotRecordOwner):
        reg.deactivate_document(1, caller=BOB)
    assert reg.record_status(1).active is True

    clock.advance(5)
    doc = reg.deactivate_document(1, caller=ALICE)
    assert doc.active is False
    # Deactivation is not a metadata change.
    assert doc.last_updated_at == 1_000

    with pytest.raises(AlreadyInactive):
        reg.deactivate_document(1, caller=ALICE)

    # Updating an inactive record is allowed and does not reactivate it.
    reg.update_document_metadata(1, OTHER_HASH, caller=ALICE)
    assert reg.get_document(1).active is False
    assert reg.record_status(1) == RecordStatus(exists=True, active=False)


def test_inactive_records_remain_retrievable_and_verifiable() -> None:
    reg, _ = _registry()
    reg.store_document(3, CID, HASH, caller=ALICE)
    reg.deactivate_document(3, caller=ALICE)

    assert reg.get_document(3).as_tuple()[4] is False
    assert reg.verify_document(3, HASH) is True


def test_verify_and_status_never_fail() -> None:
    reg, _ = _registry()
    reg.store_document(1, CID, HASH, caller=ALICE)

    for rid in (999, 0, -1, "1", None, 1.0, True, [1]):
        assert reg.verify_document(rid, HASH) is False
        assert reg.record_status(rid) == RecordStatus(exists=False, active=False)

    assert reg.verify_document(1, None) is False
    assert reg.verify_document(1, HASH.upper()) is False


def test_owner_is_immutable_across_updates() -> None:
    reg, clock = _registry()
    reg.store_document(10, CID, HASH, caller=ALICE)

    for i in range(3):
        clock.advance(1)
        reg.update_document_metadata(10, f"{i}" * 64, caller=ALICE)
        assert reg.get_document(10).owner == ALICE
    reg.deactivate_document(10, caller=ALICE)
    assert reg.get_document(10).owner == ALICE
    assert reg.get_document(10).locator == CID
