from .content import Content

__all__ = [
    "Content",
]
