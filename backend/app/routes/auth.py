"""
ScholarHub Backend — Token Route
==================================

What:  POST /jwt exchanges identity claims for a one-hour access token.
Who:   The web client, right after the identity provider signs the user in.
"""

import logging

from fastapi import APIRouter, Depends

from app.dependencies import get_token_service
from app.schemas.common import TokenRequest, TokenResponse
from app.services.auth_service import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/jwt", response_model=TokenResponse, summary="Issue an access token")
async def issue_token(
    payload: TokenRequest,
    tokens: TokenService = Depends(get_token_service),
) -> TokenResponse:
    return TokenResponse(token=tokens.issue(payload.model_dump()))
