"""
Node builders shared by the input type transformers.
"""

from __future__ import annotations

from typing import Optional

from graphql import InputValueDefinitionNode, ListTypeNode, NamedTypeNode, NameNode, NonNullTypeNode
from graphql.language import Location


def build_name_node(name: str) -> NameNode:
    return NameNode(value=name)


def build_named_type_node(type_name: str) -> NamedTypeNode:
    return NamedTypeNode(name=build_name_node(type_name))


def build_input_value_node(name: str, type_name: str, loc: Optional[Location] = None) -> InputValueDefinitionNode:
    """Build `name: TypeName`."""
    return InputValueDefinitionNode(
        name=build_name_node(name),
        type=build_named_type_node(type_name),
        directives=(),
        loc=loc,
    )


def build_input_value_list_node(
    name: str, type_name: str, loc: Optional[Location] = None
) -> InputValueDefinitionNode:
    """Build `name: [TypeName!]`."""
    return InputValueDefinitionNode(
        name=build_name_node(name),
        type=ListTypeNode(type=NonNullTypeNode(type=build_named_type_node(type_name))),
        directives=(),
        loc=loc,
    )
