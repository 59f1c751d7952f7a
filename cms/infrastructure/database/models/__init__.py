from .content import ContentModel

__all__ = [
    "ContentModel",
]
