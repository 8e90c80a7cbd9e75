"""
Pytest configuration and shared fixtures
"""

import pytest
import sys
import os
from datetime import datetime, timedelta, timezone

# Add src to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from document_manager.models.entities import Author, Document, SearchRequest
from document_manager.repos.documents import DocumentRepo
from document_manager.concurrency.locks import ReadWriteLock
from document_manager.services.document import DocumentService


@pytest.fixture
def now():
    """A fixed UTC reference time"""
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_author():
    """Create a sample author for testing"""
    return Author(id="1", name="Author1")


@pytest.fixture
def sample_document(sample_author, now):
    """Create a sample unsaved document for testing"""
    return Document(
        title="Test Document",
        content="A test document for unit tests",
        author=sample_author,
        created=now
    )


@pytest.fixture
def manager():
    """A document service over a fresh repo"""
    return DocumentService(DocumentRepo(), ReadWriteLock())


@pytest.fixture
def two_documents(manager, now):
    """Save two distinct documents and return them"""
    first = manager.save(Document(
        title="Title1...",
        content="Content1",
        author=Author(id="1", name="Author1"),
        created=now
    ))
    second = manager.save(Document(
        title="Title2...",
        content="Content2",
        author=Author(id="2", name="Author2"),
        created=now + timedelta(hours=1)
    ))
    return first, second


@pytest.fixture
def empty_request():
    """A search request with no criteria"""
    return SearchRequest()
