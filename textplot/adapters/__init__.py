from .columns import points_from_xy

__all__ = ["points_from_xy"]
