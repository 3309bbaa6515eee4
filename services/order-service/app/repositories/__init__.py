"""
Repository layer - persistence of the service document.
"""

from .document_store import DocumentStore

__all__ = ["DocumentStore"]
