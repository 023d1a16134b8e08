from omi.domain.favorites.entities.favorite import Favorite

__all__ = ["Favorite"]
