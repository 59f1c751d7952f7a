from .in_memory_content_repository import InMemoryContentRepository

__all__ = [
    "InMemoryContentRepository",
]
