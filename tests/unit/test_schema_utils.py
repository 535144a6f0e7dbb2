"""
Unit tests for GraphQL AST helpers.
"""

import pytest
from graphql import ObjectTypeDefinitionNode, ScalarTypeDefinitionNode, parse

from entschema.errors import UndefinedTypeError
from entschema.schema.names import get_create_input_type_name
from entschema.schema.schema_utils import (
    get_child_entity_types,
    get_named_type_definition_ast,
    get_reference_key_field,
    get_root_entity_types,
    get_type_name_ignoring_non_null_and_list,
    has_directive_with_name,
)

SDL = """
    type Country @rootEntity {
        isoCode: String! @key
        name: String
    }
    type Line @childEntity { text: String }
    type Plain { value: Int }
    scalar Money
"""


@pytest.fixture
def document():
    return parse(SDL)


class TestSchemaUtils:
    """Tests for schema_utils."""

    def test_entity_types_by_directive(self, document):
        assert [t.name.value for t in get_root_entity_types(document)] == ["Country"]
        assert [t.name.value for t in get_child_entity_types(document)] == ["Line"]

    def test_has_directive_with_name(self, document):
        country = get_root_entity_types(document)[0]

        assert has_directive_with_name(country, "rootEntity")
        assert has_directive_with_name(country.fields[0], "key")
        assert not has_directive_with_name(country.fields[1], "key")

    def test_named_type_from_document(self, document):
        assert isinstance(get_named_type_definition_ast(document, "Plain"), ObjectTypeDefinitionNode)
        assert isinstance(get_named_type_definition_ast(document, "Money"), ScalarTypeDefinitionNode)

    def test_core_scalars_need_no_declaration(self, document):
        for name in ("ID", "String", "Int", "Float", "Boolean", "DateTime", "JSON"):
            assert get_named_type_definition_ast(document, name).name.value == name

    def test_undefined_named_type(self, document):
        with pytest.raises(UndefinedTypeError, match='"Nope"'):
            get_named_type_definition_ast(document, "Nope")

    def test_reference_key_field(self, document):
        assert get_reference_key_field(get_root_entity_types(document)[0]) == "String"
        assert get_reference_key_field(get_child_entity_types(document)[0]) == "ID"

    def test_type_name_ignoring_wrappers(self):
        field = parse("type T { f: [String!]! }").definitions[0].fields[0]

        assert get_type_name_ignoring_non_null_and_list(field.type) == "String"

    def test_create_input_type_name(self, document):
        assert get_create_input_type_name("Country") == "CreateCountryInput"
        assert get_create_input_type_name(get_root_entity_types(document)[0]) == "CreateCountryInput"
