"""
Profiles module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class ProfileNotFoundError(NotFoundError):
    """Raised when a user has no profile."""

    def __init__(self, user_id: str):
        super().__init__(
            "There is no profile for this user",
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class HandleTakenError(ConflictError):
    """Raised when creating a profile with a handle another profile already uses."""

    def __init__(self, handle: str):
        super().__init__(
            "That handle already exists",
            code="HANDLE_TAKEN",
            details={"handle": handle},
        )


class ExperienceNotFoundError(NotFoundError):
    """Raised when an experience entry isn't on the profile."""

    def __init__(self, exp_id: str):
        super().__init__(
            f"Experience not found: {exp_id}",
            code="EXPERIENCE_NOT_FOUND",
            details={"exp_id": exp_id},
        )


class EducationNotFoundError(NotFoundError):
    """Raised when an education entry isn't on the profile."""

    def __init__(self, edu_id: str):
        super().__init__(
            f"Education not found: {edu_id}",
            code="EDUCATION_NOT_FOUND",
            details={"edu_id": edu_id},
        )
