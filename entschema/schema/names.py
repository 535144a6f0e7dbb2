"""
Names of generated GraphQL types.

Every place that defines or refers to a generated type must go through
these functions so definitions and references always agree.
"""

from __future__ import annotations

from typing import Union

from graphql import ObjectTypeDefinitionNode


def _type_name(type_or_name: Union[str, ObjectTypeDefinitionNode]) -> str:
    if isinstance(type_or_name, str):
        return type_or_name
    return type_or_name.name.value


def get_create_input_type_name(type_or_name: Union[str, ObjectTypeDefinitionNode]) -> str:
    """Name of the input type used to create objects of a type.

    Example:
        >>> get_create_input_type_name("Post")
        'CreatePostInput'
    """
    return f"Create{_type_name(type_or_name)}Input"
