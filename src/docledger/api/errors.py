from __future__ import annotations

from fastapi import HTTPException

from ..core.errors import (
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
)

HTTP_STATUS: dict[type[RegistryError], int] = {
    InvalidIdentifier: 400,
    EmptyLocator: 400,
    InvalidHashLength: 400,
    InvalidAddress: 400,
    NotRecordOwner: 403,
    NotAuthorized: 403,
    RecordNotFound: 404,
    DuplicateIdentifier: 409,
    AlreadyInactive: 409,
    SystemPaused: 503,
}


def to_http_error(e: RegistryError) -> HTTPException:
    return HTTPException(status_code=HTTP_STATUS.get(type(e), 400), detail=e.to_dict())
