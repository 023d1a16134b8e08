from omi.domain.favorites.value_objects.media_type import MediaType

__all__ = ["MediaType"]
