from __future__ import annotations


class RegistryError(Exception):
    """Base class for every rejection raised by the registry.

    Notes:
    - `code` is the wire name of the failure and equals the class name.
    - `reason` is a human-readable string; each subclass has a default.
    - A raised `RegistryError` always means the call had no effect.
    """

    code = "RegistryError"
    default_reason = "Registry call rejected"

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason or self.default_reason
        super().__init__(self.reason)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.code, "reason": self.reason}


class InvalidIdentifier(RegistryError):
    code = "InvalidIdentifier"
    default_reason = "Record ID must be greater than 0"


class SystemPaused(RegistryError):
    code = "SystemPaused"
    default_reason = "Contract is paused"


class EmptyLocator(RegistryError):
    code = "EmptyLocator"
    default_reason = "CID cannot be empty"


class InvalidHashLength(RegistryError):
    code = "InvalidHashLength"
    default_reason = "Invalid metadata hash length"


class DuplicateIdentifier(RegistryError):
    code = "DuplicateIdentifier"
    default_reason = "Record ID already exists"


class RecordNotFound(RegistryError):
    code = "RecordNotFound"
    default_reason = "Record does not exist"


class NotRecordOwner(RegistryError):
    code = "NotRecordOwner"
    default_reason = "Not record owner"


class NotAuthorized(RegistryError):
    code = "NotAuthorized"
    default_reason = "Only contract owner can call this"


class InvalidAddress(RegistryError):
    code = "InvalidAddress"
    default_reason = "New owner cannot be zero address"


class AlreadyInactive(RegistryError):
    code = "AlreadyInactive"
    default_reason = "Document already inactive"


ERROR_TYPES: dict[str, type[RegistryError]] = {
    cls.code: cls
    for cls in (
        InvalidIdentifier,
        SystemPaused,
        EmptyLocator,
        InvalidHashLength,
        DuplicateIdentifier,
        RecordNotFound,
        NotRecordOwner,
        NotAuthorized,
        InvalidAddress,
        AlreadyInactive,
    )
}


def error_from_code(code: str, reason: str | None = None) -> RegistryError:
    """Rebuild a registry exception from its wire name.

    Unknown codes fall back to the `RegistryError` base class so the reason is not lost.
    """

    cls = ERROR_TYPES.get(str(code), RegistryError)
    return cls(reason)
