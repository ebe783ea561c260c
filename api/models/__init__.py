"""
API response models shared across routers.
"""

from .errors import ErrorResponse
from .responses import MessageResponse

__all__ = ["ErrorResponse", "MessageResponse"]
