"""Document store dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends

from infrastructure.memory.document_store import InMemoryDocumentStore

# Singleton store shared by every request in the process
_document_store: InMemoryDocumentStore | None = None


def get_document_store() -> InMemoryDocumentStore:
    """Get or create the document store singleton."""
    global _document_store
    if _document_store is None:
        _document_store = InMemoryDocumentStore()
    return _document_store


DocumentStore = Annotated[InMemoryDocumentStore, Depends(get_document_store)]
