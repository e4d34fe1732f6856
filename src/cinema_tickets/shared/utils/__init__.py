from .validators import ensure_int, is_strict_int

__all__ = ["ensure_int", "is_strict_int"]
