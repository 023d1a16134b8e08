from enum import Enum


class MediaType(str, Enum):
    """Kind of Pexels media a favorite points at."""

    PHOTO = "photo"
    VIDEO = "video"
