# backend/services/providers/github.py
import logging
import re
from typing import Optional

import httpx

from backend.config import GITHUB_TOKEN, HTTP_TIMEOUT_SECS
from backend.exceptions import ProfileLookupError
from backend.schemas.profile import GitHubValidation

log = logging.getLogger("profiles.github")

API_URL = "https://api.github.com/users/{username}"

# github.com/<user>, optional www / trailing slash; usernames are 1-39 chars, no double/edge hyphens
_USERNAME = r"[a-z0-9](?:[a-z0-9]|-(?=[a-z0-9])){0,38}"
_URL_RE = re.compile(rf"^https?://(?:www\.)?github\.com/({_USERNAME})/?$")
_BARE_RE = re.compile(rf"^{_USERNAME}$")


def extract_username(url: str) -> Optional[str]:
    """Username from a profile URL or a bare handle; None when it does not look like one."""
    cleaned = (url or "").strip().lower()
    m = _URL_RE.match(cleaned)
    if m:
        return m.group(1)
    if _BARE_RE.match(cleaned):
        return cleaned
    return None


def _headers() -> dict:
    headers = {"Accept": "application/vnd.github+json"}
    if GITHUB_TOKEN:
        headers["Authorization"] = f"Bearer {GITHUB_TOKEN}"
        headers["X-GitHub-Api-Version"] = "2022-11-28"
    return headers


async def validate_github(url: str, *, client: httpx.AsyncClient) -> GitHubValidation:
    username = extract_username(url)
    if not username:
        return GitHubValidation(
            valid=False,
            error="Invalid GitHub URL format. Use: https://github.com/username",
        )

    try:
        r = await client.get(
            API_URL.format(username=username),
            headers=_headers(),
            timeout=HTTP_TIMEOUT_SECS,
            follow_redirects=True,
        )
    except httpx.HTTPError as e:
        log.warning("GitHub request error for %s: %s", username, e)
        raise ProfileLookupError("Failed to verify GitHub profile") from e

    if r.status_code == 404:
        return GitHubValidation(valid=False, username=username, error="GitHub profile not found")
    if r.status_code == 403:
        return GitHubValidation(
            valid=False, username=username, error="GitHub API rate limit exceeded. Try again later."
        )
    if r.status_code != 200:
        log.warning("GitHub API error %s for %s: %s", r.status_code, username, r.text[:200])
        raise ProfileLookupError(f"GitHub API error: {r.status_code}")

    data = r.json()
    return GitHubValidation(
        valid=True,
        username=data.get("login") or username,
        name=data.get("name"),
        avatar=data.get("avatar_url"),
        profile_url=data.get("html_url"),
    )
