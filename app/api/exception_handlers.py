"""Exception handlers mapping file store errors to plain-text HTTP responses.

Usage:
    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from app.core.exceptions import (
    FileAlreadyExistsError,
    FileNotFoundInStoreError,
    FileStoreError,
    InvalidFileNameError,
    ReadError,
    WriteError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidFileNameError: status.HTTP_400_BAD_REQUEST,
    FileNotFoundInStoreError: status.HTTP_404_NOT_FOUND,
    FileAlreadyExistsError: status.HTTP_409_CONFLICT,
    ReadError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    WriteError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_status_for_exception(exc: FileStoreError) -> int:
    for exc_type, status_code in ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def file_store_exception_handler(request: Request, exc: FileStoreError) -> PlainTextResponse:
    status_code = get_status_for_exception(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=status_code)


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FileStoreError, file_store_exception_handler)
