# Repository layer package

from .documents import DocumentRepo

__all__ = [
    "DocumentRepo"
]
