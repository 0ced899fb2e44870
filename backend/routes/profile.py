# backend/routes/profile.py
import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException

from backend.config import PROXYCURL_API_KEY
from backend.deps import get_http_client
from backend.exceptions import ProfileLookupError
from backend.schemas.profile import GitHubValidation, LinkedInValidation, ProfileUrlRequest
from backend.services.providers.github import validate_github
from backend.services.providers.linkedin import validate_linkedin

log = logging.getLogger("routes.profile")

router = APIRouter(prefix="/validate", tags=["Profile"])


@router.post("/github", response_model=GitHubValidation)
async def github(body: ProfileUrlRequest, client: httpx.AsyncClient = Depends(get_http_client)):
    try:
        return await validate_github(body.url, client=client)
    except ProfileLookupError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/linkedin", response_model=LinkedInValidation)
async def linkedin(body: ProfileUrlRequest, client: httpx.AsyncClient = Depends(get_http_client)):
    return await validate_linkedin(body.url, client=client, api_key=PROXYCURL_API_KEY)
