# backend/schemas/profile.py
from typing import Optional

from pydantic import Field

from backend.schemas.skills import CamelModel


class ProfileUrlRequest(CamelModel):
    url: str = Field(..., min_length=1, max_length=500)


class DreamRoleRequest(CamelModel):
    role_title: str = Field(..., min_length=1, max_length=120)


class GitHubValidation(CamelModel):
    valid: bool
    username: Optional[str] = None
    name: Optional[str] = None
    avatar: Optional[str] = None
    profile_url: Optional[str] = None
    error: Optional[str] = None


class LinkedInValidation(CamelModel):
    valid: bool
    profile_url: Optional[str] = None
    full_name: Optional[str] = None
    headline: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None
