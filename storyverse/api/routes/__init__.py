from . import guidelines

__all__ = ["guidelines"]
