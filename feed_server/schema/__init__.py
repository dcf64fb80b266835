"""Schema adapters for converting between data formats."""

from .video_schema_adapter import (
    is_document_format,
    to_sponsor,
    to_sponsor_dict,
    to_user,
    to_user_dict,
    to_video,
    to_video_dict,
)

__all__ = [
    "is_document_format",
    "to_sponsor",
    "to_sponsor_dict",
    "to_user",
    "to_user_dict",
    "to_video",
    "to_video_dict",
]
