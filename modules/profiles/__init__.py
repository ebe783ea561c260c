"""
Profiles module.

One profile per user, with nested experience and education history.

Public API:
- IProfileService: Interface for profile operations
- Profile, Experience, Education: Profile models
- Profile exceptions
"""

from .interfaces import IProfileService
from .models import (
    Profile,
    ProfileOwner,
    ProfileUpsertRequest,
    SocialLinks,
    Experience,
    ExperienceRequest,
    Education,
    EducationRequest,
)
from .exceptions import (
    ProfileNotFoundError,
    HandleTakenError,
    ExperienceNotFoundError,
    EducationNotFoundError,
)

__all__ = [
    # Interface
    "IProfileService",
    # Models
    "Profile",
    "ProfileOwner",
    "ProfileUpsertRequest",
    "SocialLinks",
    "Experience",
    "ExperienceRequest",
    "Education",
    "EducationRequest",
    # Exceptions
    "ProfileNotFoundError",
    "HandleTakenError",
    "ExperienceNotFoundError",
    "EducationNotFoundError",
]
