from .content_repository import SQLAlchemyContentRepository

__all__ = [
    "SQLAlchemyContentRepository",
]
