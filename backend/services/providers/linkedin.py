# backend/services/providers/linkedin.py
import logging
import re
from typing import Optional

import httpx

from backend.config import HTTP_TIMEOUT_SECS
from backend.schemas.profile import LinkedInValidation

log = logging.getLogger("profiles.linkedin")

PROXYCURL_URL = "https://nubela.co/proxycurl/api/v2/linkedin"

_URL_RE = re.compile(r"^https?://(?:www\.)?linkedin\.com/in/([a-z0-9_-]{3,100})/?(?:\?.*)?$", re.I)


def extract_username(url: str) -> Optional[str]:
    m = _URL_RE.match((url or "").strip())
    return m.group(1) if m else None


def _error_message(r: httpx.Response, default: str) -> str:
    try:
        data = r.json()
    except ValueError:
        return default
    return (data.get("message") if isinstance(data, dict) else None) or default


async def _validate_with_proxycurl(profile_url: str, client: httpx.AsyncClient, api_key: str) -> LinkedInValidation:
    try:
        r = await client.get(
            PROXYCURL_URL,
            params={"url": profile_url},
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=HTTP_TIMEOUT_SECS,
        )
    except httpx.HTTPError as e:
        log.warning("Proxycurl request error: %s", e)
        return LinkedInValidation(valid=False, profile_url=profile_url, error="Failed to verify LinkedIn profile")

    if r.status_code in (400, 404):
        return LinkedInValidation(
            valid=False,
            profile_url=profile_url,
            error=_error_message(r, "LinkedIn profile not found or not accessible"),
        )
    if r.status_code != 200:
        return LinkedInValidation(
            valid=False,
            profile_url=profile_url,
            error=_error_message(r, f"Proxycurl error: {r.status_code}"),
        )

    data = r.json()
    return LinkedInValidation(
        valid=True,
        profile_url=profile_url,
        full_name=data.get("full_name"),
        headline=data.get("headline"),
    )


async def validate_linkedin(
    url: str,
    *,
    client: httpx.AsyncClient,
    api_key: Optional[str] = None,
) -> LinkedInValidation:
    """Format check always; existence check only when a Proxycurl key is configured."""
    username = extract_username(url)
    if not username:
        return LinkedInValidation(
            valid=False,
            error="Invalid LinkedIn URL. Use: https://linkedin.com/in/yourprofile",
        )

    profile_url = f"https://www.linkedin.com/in/{username}"
    if api_key:
        return await _validate_with_proxycurl(profile_url, client, api_key)

    return LinkedInValidation(
        valid=True,
        profile_url=profile_url,
        message="URL format is valid. Add PROXYCURL_API_KEY to verify profile exists.",
    )
