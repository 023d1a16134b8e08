from omi.domain.shared.exceptions import ValidationError


def normalize_video_link(video_link: str | None) -> str:
    """Return the trimmed video link, raising ValidationError when blank."""
    if video_link is None or not video_link.strip():
        msg = "Video link is required"
        raise ValidationError(msg, details={"field": "video_link"})
    return video_link.strip()
