from typing import Dict, List, Optional
from document_manager.models.entities import Document

class DocumentRepo:
    def __init__(self) -> None:
        self.documents: Dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self.documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self.documents

    def put(self, doc: Document) -> bool:
        # returns True when an existing entry was replaced
        replaced = doc.id in self.documents
        self.documents[doc.id] = doc.model_copy(deep=True)
        return replaced

    def get(self, doc_id: str) -> Optional[Document]:
        doc = self.documents.get(doc_id)
        return doc.model_copy(deep=True) if doc else None

    def list(self) -> List[Document]:
        return [doc.model_copy(deep=True) for doc in self.documents.values()]
