"""
AST transformers deriving additional GraphQL definitions.
"""

from .base import ASTTransformer
from .create_entity_input_types import AddCreateEntityInputTypesTransformer

__all__ = [
    "ASTTransformer",
    "AddCreateEntityInputTypesTransformer",
]
