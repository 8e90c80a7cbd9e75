from typing import Iterable, List, Optional
from datetime import datetime, timezone

from document_manager.models.entities import Document, SearchRequest

"""
Search predicates. A document matches a request when every predicate passes.
"""

def matches_title_prefixes(doc: Document, prefixes: Optional[List[str]]) -> bool:
    if not prefixes:
        return True
    if doc.title is None:
        return False
    title = doc.title.lower()
    return any(title.startswith(prefix.lower()) for prefix in prefixes)


def matches_contents(doc: Document, keywords: Optional[List[str]]) -> bool:
    if not keywords:
        return True
    if doc.content is None:
        return False
    content = doc.content.lower()
    return any(keyword.lower() in content for keyword in keywords)


def matches_author_ids(doc: Document, author_ids: Optional[List[str]]) -> bool:
    if not author_ids:
        return True
    if doc.author is None or doc.author.id is None:
        return False
    return doc.author.id in set(author_ids)


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are compared as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def matches_created_range(doc: Document, created_from: Optional[datetime],
                          created_to: Optional[datetime]) -> bool:
    # a missing timestamp fails even when both bounds are None
    if doc.created is None:
        return False
    created = _as_utc(doc.created)
    if created_from is not None and created < _as_utc(created_from):
        return False
    if created_to is not None and created > _as_utc(created_to):
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    return (
        matches_title_prefixes(doc, request.title_prefixes)
        and matches_contents(doc, request.contains_contents)
        and matches_author_ids(doc, request.author_ids)
        and matches_created_range(doc, request.created_from, request.created_to)
    )


def filter_documents(docs: Iterable[Document], request: Optional[SearchRequest]) -> List[Document]:
    if request is None:
        return list(docs)
    return [doc for doc in docs if matches(doc, request)]
