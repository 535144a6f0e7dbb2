"""
Base class for AST transformers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from graphql import DocumentNode


class ASTTransformer(ABC):
    """A step deriving additional schema definitions from a document.

    Transformers do not modify the document they are given; they return a
    new document, so one input can be shared between runs.
    """

    @abstractmethod
    def transform(self, ast: DocumentNode) -> DocumentNode:
        """Return a document with the derived definitions added."""
