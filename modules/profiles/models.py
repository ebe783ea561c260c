"""
Profiles module data models.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")

# Plain profile attributes written by an upsert when supplied
PROFILE_FIELDS = (
    "handle",
    "company",
    "website",
    "location",
    "bio",
    "status",
    "githubusername",
)


def _require_text(value: str, label: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{label} is required")
    return value


class SocialLinks(BaseModel):
    """Social network links, keyed by platform."""

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ProfileOwner(BaseModel):
    """The user a profile belongs to, with display fields filled in on read."""

    id: str
    name: Optional[str] = None
    avatar: Optional[str] = None


class ExperienceRequest(BaseModel):
    """Request to add a job to a profile."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Job title")
    company: str = Field(..., description="Company")
    location: Optional[str] = None
    from_date: datetime = Field(..., alias="from", description="Start date")
    to_date: Optional[datetime] = Field(None, alias="to", description="End date")
    current: bool = False
    description: Optional[str] = None

    @field_validator("title", "company")
    @classmethod
    def not_blank(cls, v: str, info: ValidationInfo) -> str:
        return _require_text(v, info.field_name.capitalize())


class Experience(ExperienceRequest):
    """A job entry on a profile."""

    id: str


class EducationRequest(BaseModel):
    """Request to add a school to a profile."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(..., description="School")
    degree: str = Field(..., description="Degree")
    fieldofstudy: str = Field(..., description="Field of study")
    from_date: datetime = Field(..., alias="from", description="Start date")
    to_date: Optional[datetime] = Field(None, alias="to", description="End date")
    current: bool = False
    description: Optional[str] = None

    @field_validator("school", "degree", "fieldofstudy")
    @classmethod
    def not_blank(cls, v: str, info: ValidationInfo) -> str:
        return _require_text(v, info.field_name.capitalize())


class Education(EducationRequest):
    """A school entry on a profile."""

    id: str


class ProfileUpsertRequest(BaseModel):
    """
    Request to create or update the caller's profile.

    Social links are sent flat (youtube, twitter, ...) and stored
    under `social`. Skills may be a comma-separated string.
    """

    handle: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: str = Field(..., description="Professional status")
    githubusername: Optional[str] = None
    skills: Union[str, list[str]] = Field(..., description="Skills, comma separated or a list")

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_not_blank(cls, v: str) -> str:
        return _require_text(v, "Status")

    @field_validator("skills")
    @classmethod
    def split_skills(cls, v: Union[str, list[str]]) -> list[str]:
        items = v.split(",") if isinstance(v, str) else v
        skills = [s.strip() for s in items if s.strip()]
        if not skills:
            raise ValueError("Skills is required")
        return skills


class Profile(BaseModel):
    """A user's profile."""

    id: str
    user: ProfileOwner
    handle: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    created_at: datetime
