from fastapi import HTTPException, Header
from pydantic import BaseModel
from typing import Optional
import logging

from creative_coach.config import settings

logger = logging.getLogger(__name__)


class ImsCredentials(BaseModel):
    token: str
    client_id: str


def ims_credentials(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None),
) -> ImsCredentials:
    """Read the caller's IMS bearer token and client id for Firefly calls."""

    # 1. Ensure Authorization header exists
    if not authorization:
        raise HTTPException(401, "Authorization header missing")

    # 2. Extract token from "Bearer <token>"
    if not authorization.startswith("Bearer "):
        raise HTTPException(401, "Invalid authorization header format")

    token = authorization.replace("Bearer ", "").strip()
    if not token:
        raise HTTPException(401, "Token missing")

    # 3. Firefly also needs the IMS client id
    if not x_api_key:
        raise HTTPException(401, "x-api-key header missing")

    return ImsCredentials(token=token, client_id=x_api_key)


def stock_client_id(x_api_key: Optional[str] = Header(None)) -> str:
    """Adobe Stock only needs an API key; fall back to the configured one."""
    client_id = x_api_key or settings.stock_client_id
    if not client_id:
        logger.error("Adobe Stock client id missing")
        raise HTTPException(401, "x-api-key header missing and no Stock client id configured")
    return client_id
