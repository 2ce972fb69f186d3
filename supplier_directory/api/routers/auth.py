"""
Authentication routes.
Admin console login against the configured credential.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..config import APISettings, get_settings
from ..dependencies import check_admin_credentials
from ..models.auth import LoginRequest, LoginResponse
from ..models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(request: LoginRequest, settings: APISettings = Depends(get_settings)) -> LoginResponse:
    """
    Check admin credentials.

    The admin console sends the same credentials as HTTP Basic auth on
    every admin request; this endpoint only confirms they are valid.
    """
    if not check_admin_credentials(request.username, request.password, settings):
        logger.warning(f"Failed admin login for username={request.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    logger.info(f"Admin login: {request.username}")
    return LoginResponse(authenticated=True, username=request.username)
