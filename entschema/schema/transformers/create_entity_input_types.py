"""
Generation of the input types used to create entities.

For every root entity and child entity object type of a document, an input
object type named by get_create_input_type_name() is added:

    type Post @rootEntity {            input CreatePostInput {
        id: ID                             title: String
        title: String!           ->        author: ID
        author: User @reference            tags: [String!]
        tags: [String]                 }
    }

Field mapping, after dropping the system fields id, createdAt and updatedAt:
    - scalars and enums keep their type
    - references take the type of the referenced type's @key field
    - relations take raw IDs
    - other object types take their own create input type, by name

Invariants:
    - Root entity inputs come first, then child entity inputs, each in
      document order; fields keep declaration order
    - The input document is never modified
    - A list of lists raises ListOfListsError instead of producing a message
"""

from __future__ import annotations

import logging

from graphql import (
    DocumentNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeNode,
)

from ...constants import ID_TYPE, REFERENCE_DIRECTIVE, RELATION_DIRECTIVE, SYSTEM_FIELDS
from ...errors import ListOfListsError
from ...field_roles import FieldRole, classify_field
from ..names import get_create_input_type_name
from ..schema_utils import (
    get_child_entity_types,
    get_named_type_definition_ast,
    get_reference_key_field,
    get_root_entity_types,
    has_directive_with_name,
)
from .base import ASTTransformer
from .input_type_helpers import build_input_value_list_node, build_input_value_node, build_name_node

logger = logging.getLogger(__name__)


class AddCreateEntityInputTypesTransformer(ASTTransformer):
    """Adds a Create<Type>Input for every root and child entity type."""

    def transform(self, ast: DocumentNode) -> DocumentNode:
        entity_types = [*get_root_entity_types(ast), *get_child_entity_types(ast)]
        inputs = [self.create_create_input_type_for_object_type(ast, t) for t in entity_types]
        logger.debug(f"Generated {len(inputs)} create input types")
        return DocumentNode(definitions=(*ast.definitions, *inputs), loc=ast.loc)

    def create_create_input_type_for_object_type(
        self, ast: DocumentNode, object_type: ObjectTypeDefinitionNode
    ) -> InputObjectTypeDefinitionNode:
        fields = [
            self.create_input_type_field(ast, object_type, field, field.type)
            for field in object_type.fields or ()
            if field.name.value not in SYSTEM_FIELDS
        ]
        return InputObjectTypeDefinitionNode(
            name=build_name_node(get_create_input_type_name(object_type)),
            fields=tuple(fields),
            directives=(),
            loc=object_type.loc,
        )

    def create_input_type_field(
        self,
        ast: DocumentNode,
        object_type: ObjectTypeDefinitionNode,
        field: FieldDefinitionNode,
        type_node: TypeNode,
    ) -> InputValueDefinitionNode:
        if isinstance(type_node, NonNullTypeNode):
            # nullability is not part of the input shape
            return self.create_input_type_field(ast, object_type, field, type_node.type)

        name = field.name.value
        if isinstance(type_node, ListTypeNode):
            element_type = type_node.type
            if isinstance(element_type, NonNullTypeNode):
                element_type = element_type.type
            if not isinstance(element_type, NamedTypeNode):
                raise ListOfListsError(object_type.name.value, name)
            return build_input_value_list_node(
                name, self._get_input_type_name(ast, field, element_type, is_list=True), field.loc
            )

        return build_input_value_node(name, self._get_input_type_name(ast, field, type_node, is_list=False), field.loc)

    def _get_input_type_name(
        self, ast: DocumentNode, field: FieldDefinitionNode, named_type: NamedTypeNode, is_list: bool
    ) -> str:
        definition = get_named_type_definition_ast(ast, named_type.name.value)
        role = classify_field(
            is_object_target=isinstance(definition, ObjectTypeDefinitionNode),
            is_reference=has_directive_with_name(field, REFERENCE_DIRECTIVE),
            is_relation=has_directive_with_name(field, RELATION_DIRECTIVE),
            is_list=is_list,
        )
        if role == FieldRole.SCALAR:
            return named_type.name.value
        if role == FieldRole.REFERENCE:
            return get_reference_key_field(definition)
        if role == FieldRole.RELATION:
            return ID_TYPE
        return get_create_input_type_name(definition)
