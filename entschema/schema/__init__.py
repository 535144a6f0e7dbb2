"""
GraphQL schema derivation for entschema.

This module works on graphql-core document ASTs:
- Lookup helpers over document definitions
- Naming of generated types
- AST transformers that append generated input types

Invariants:
    - Transformers return new documents and never modify their input
    - Field classification is shared with the model (entschema.field_roles)
"""

from .names import get_create_input_type_name
from .transformers import AddCreateEntityInputTypesTransformer, ASTTransformer

__all__ = [
    "ASTTransformer",
    "AddCreateEntityInputTypesTransformer",
    "get_create_input_type_name",
]
