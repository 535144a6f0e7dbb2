"""
Names shared between the model and the GraphQL schema.

Directive names, reserved system fields and well-known profile names live
here so the model registry and the AST transformers agree on them.
"""

# Type kind directives
ROOT_ENTITY_DIRECTIVE = "rootEntity"
CHILD_ENTITY_DIRECTIVE = "childEntity"

# Field directives
REFERENCE_DIRECTIVE = "reference"
RELATION_DIRECTIVE = "relation"
KEY_FIELD_DIRECTIVE = "key"

# System-managed fields, never part of create inputs
ID_FIELD = "id"
ENTITY_CREATED_AT = "createdAt"
ENTITY_UPDATED_AT = "updatedAt"
SYSTEM_FIELDS = (ID_FIELD, ENTITY_CREATED_AT, ENTITY_UPDATED_AT)

# Scalar used for raw identifiers (relations, key fallback)
ID_TYPE = "ID"

DEFAULT_PERMISSION_PROFILE = "default"
