"""
Generic response models.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. {"msg": "Post deleted successfully"}."""

    msg: str
