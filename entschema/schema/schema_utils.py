"""
Helpers for inspecting GraphQL document ASTs.

These work on graphql-core nodes as produced by graphql.parse() and are
shared by all AST transformers.
"""

from __future__ import annotations

from typing import Union

from graphql import (
    DocumentNode,
    FieldDefinitionNode,
    NamedTypeNode,
    ObjectTypeDefinitionNode,
    TypeDefinitionNode,
    TypeNode,
    parse,
)

from ..constants import CHILD_ENTITY_DIRECTIVE, ID_TYPE, KEY_FIELD_DIRECTIVE, ROOT_ENTITY_DIRECTIVE
from ..errors import UndefinedTypeError
from ..model.built_in_types import BUILT_IN_SCALARS

# Scalars every schema knows without declaring them
CORE_SCALARS: DocumentNode = parse("\n".join(f"scalar {name}" for name, _ in BUILT_IN_SCALARS))

DirectiveHolder = Union[FieldDefinitionNode, ObjectTypeDefinitionNode]


def has_directive_with_name(node: DirectiveHolder, name: str) -> bool:
    return any(directive.name.value == name for directive in node.directives or ())


def get_object_types_with_directive(ast: DocumentNode, directive_name: str) -> list[ObjectTypeDefinitionNode]:
    """Object type definitions carrying a directive, in document order."""
    return [
        definition
        for definition in ast.definitions
        if isinstance(definition, ObjectTypeDefinitionNode) and has_directive_with_name(definition, directive_name)
    ]


def get_root_entity_types(ast: DocumentNode) -> list[ObjectTypeDefinitionNode]:
    return get_object_types_with_directive(ast, ROOT_ENTITY_DIRECTIVE)


def get_child_entity_types(ast: DocumentNode) -> list[ObjectTypeDefinitionNode]:
    return get_object_types_with_directive(ast, CHILD_ENTITY_DIRECTIVE)


def get_named_type_definition_ast(ast: DocumentNode, name: str) -> TypeDefinitionNode:
    """Find the definition of a named type.

    Core scalars are found even if the document does not declare them.

    Raises:
        UndefinedTypeError: If neither the core scalars nor the document
            define the type
    """
    for document in (CORE_SCALARS, ast):
        for definition in document.definitions:
            if isinstance(definition, TypeDefinitionNode) and definition.name.value == name:
                return definition
    raise UndefinedTypeError(name)


def get_type_name_ignoring_non_null_and_list(type_node: TypeNode) -> str:
    while not isinstance(type_node, NamedTypeNode):
        type_node = type_node.type
    return type_node.name.value


def get_reference_key_field(object_type: ObjectTypeDefinitionNode) -> str:
    """Type name of the field marked as @key, or ID if there is none."""
    for field in object_type.fields or ():
        if has_directive_with_name(field, KEY_FIELD_DIRECTIVE):
            return get_type_name_ignoring_non_null_and_list(field.type)
    return ID_TYPE
