import logging
from typing import Callable, List, Optional
from uuid import uuid4

from document_manager.models.entities import Document, SearchRequest
from document_manager.repos.documents import DocumentRepo
from document_manager.concurrency.locks import ReadWriteLock
from document_manager.services.search import filter_documents

from document_manager.services.exceptions import InvalidArgumentError, IdGenerationError

logger = logging.getLogger(__name__)


def _random_id() -> str:
    return str(uuid4())


class DocumentService:
    """Upsert, point lookup and filtered search over an in-memory DocumentRepo.

    Documents handed in or out are copies; the repo stays the only owner of the
    stored values.
    """

    def __init__(self, docs: DocumentRepo, lock: ReadWriteLock,
                 id_factory: Callable[[], str] = _random_id, max_id_attempts: int = 0) -> None:
        self.docs = docs
        self.lock = lock

        self.id_factory = id_factory
        self.max_id_attempts = max_id_attempts

    def save(self, document: Optional[Document]) -> Document:
        if document is None:
            raise InvalidArgumentError("Document cannot be null")

        with self.lock.writing():
            if not document.id:
                document.id = self._new_id()
                logger.debug("Generated id %s for new document", document.id)

            replaced = self.docs.put(document)
            logger.debug("%s document %s", "Replaced" if replaced else "Inserted", document.id)

            return self.docs.get(document.id)

    def find_by_id(self, doc_id: Optional[str]) -> Optional[Document]:
        if not doc_id:
            raise InvalidArgumentError("Id cannot be null")

        with self.lock.reading():
            return self.docs.get(doc_id)

    def search(self, request: Optional[SearchRequest] = None) -> List[Document]:
        with self.lock.reading():
            total = len(self.docs)
            results = filter_documents(self.docs.list(), request)

        logger.debug("Search matched %d of %d documents", len(results), total)
        return results

    def count(self) -> int:
        with self.lock.reading():
            return len(self.docs)

    def _new_id(self) -> str:
        # caller holds the write lock
        attempts = 0
        while True:
            attempts += 1
            candidate = self.id_factory()
            if candidate and candidate not in self.docs:
                return candidate

            logger.warning("Generated id %r collides with a stored document, regenerating", candidate)
            if self.max_id_attempts and attempts >= self.max_id_attempts:
                raise IdGenerationError(f"Could not generate a unique id after {attempts} attempts.")
