"""
User endpoints.

Expose the stored record (``/profile``), credential validation
(``/login``) and the logout message (``/logout``).  Domain errors
raised by ``CredentialService`` are turned into responses here:
``MissingInput`` becomes a 400 and ``StorageUnavailable`` a 500.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from credential_api.app.core.config import Settings
from credential_api.app.core.exceptions import MissingInput, StorageUnavailable
from credential_api.app.core.storage import JsonFileUserStore, resolve_user_data_path
from credential_api.app.schemas.user import ErrorResponse, LoginRequest, LoginResult
from credential_api.app.services.credential_service import (
    MISSING_CREDENTIALS_MESSAGE,
    CredentialService,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_login_request(request: Request) -> LoginRequest:
    """Parse the login body without rejecting odd payloads.

    An empty or unparseable body, or JSON that is not an object, has no
    fields and yields an empty ``LoginRequest``.
    """
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        return LoginRequest()
    return LoginRequest(username=body.get("username"), password=body.get("password"))


def get_credential_service(request: Request) -> CredentialService:
    """Build a ``CredentialService`` backed by the configured JSON file.

    Tests replace this dependency through ``app.dependency_overrides``
    to inject an in‑memory store.
    """
    config: Settings = request.app.state.settings
    store = JsonFileUserStore(resolve_user_data_path(config.user_data_path))
    return CredentialService(store, password_hashing=config.password_hashing)


@router.get(
    "/profile",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def get_profile(service: CredentialService = Depends(get_credential_service)):
    """Return the stored user record as JSON, exactly as stored."""
    try:
        record = service.fetch_record()
    except StorageUnavailable as e:
        logger.error("Profile request failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to read user data"},
        )
    return record.model_dump()


@router.post(
    "/login",
    response_model=LoginResult,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": LoginResult},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": LoginRequest.model_json_schema()}},
        },
    },
)
async def login_user(
    payload: LoginRequest = Depends(read_login_request),
    service: CredentialService = Depends(get_credential_service),
):
    """Validate a username and password against the stored record.

    A mismatch is still a 200 response, with ``status`` false and a
    message telling whether the username or the password was wrong.
    """
    logger.info("Login attempt for %r", payload.username)
    try:
        outcome = service.validate_credentials(payload.username, payload.password)
    except MissingInput:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"status": False, "message": MISSING_CREDENTIALS_MESSAGE},
        )
    except StorageUnavailable as e:
        logger.error("Login failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Server error during login"},
        )
    return outcome.to_result()


@router.get("/logout", response_class=HTMLResponse)
async def logout_user(username: Optional[str] = Query(None)) -> HTMLResponse:
    """Return an HTML message confirming that ``username`` logged out.

    Nothing is recorded; the endpoint only formats the message.
    """
    try:
        message = CredentialService.format_logout_message(username)
    except MissingInput:
        return HTMLResponse(
            content="<b>Username parameter is required</b>",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return HTMLResponse(content=message)
