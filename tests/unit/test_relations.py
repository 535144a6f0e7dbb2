"""
Unit tests for relations between root entities.

Tests cover:
- Relations derived from relation fields
- De-duplication of both sides of a relation
- Cardinalities
- Caching of Model.relations
"""

import pytest

from entschema.model import Model, ModelConfig, RelationCardinality
from entschema.model.config import field
from entschema.model.relation import RelationFieldSide

from .builders import root_entity


@pytest.fixture
def library(settings):
    return Model(
        ModelConfig(
            types=(
                root_entity(
                    "Author",
                    field("books", "Book", is_list=True, is_relation=True),
                    field("favoriteBook", "Book", is_relation=True),
                ),
                root_entity("Book", field("author", "Author", is_relation=True, inverse_of="books")),
            )
        ),
        settings,
    )


class TestRelations:
    """Tests for Model.relations."""

    def test_both_sides_give_one_relation(self, library):
        """A relation and its declared inverse are listed once."""
        identifiers = [r.identifier for r in library.relations]

        assert identifiers.count("Author.books<->Book.author") == 1

    def test_relation_list(self, library):
        assert [r.identifier for r in library.relations] == [
            "Author.books<->Book.author",
            "Author.favoriteBook",
        ]

    def test_relation_sides(self, library):
        relation = library.relations[0]
        author = library.get_root_entity_type_or_throw("Author")
        book = library.get_root_entity_type_or_throw("Book")

        assert relation.from_type is author
        assert relation.from_field is author.get_field("books")
        assert relation.to_type is book
        assert relation.to_field is book.get_field("author")
        assert relation.get_field_side(book.get_field("author")) == RelationFieldSide.TO_SIDE

    def test_inverse_side_describes_same_relation(self, library):
        author = library.get_root_entity_type_or_throw("Author")
        book = library.get_root_entity_type_or_throw("Book")

        assert book.explicit_relations[0] == author.explicit_relations[0]

    def test_cardinalities(self, library):
        books, favorite = library.relations

        # one author, many books
        assert books.from_cardinality == RelationCardinality.ONE
        assert books.to_cardinality == RelationCardinality.MANY
        # no inverse field, so any number of authors can favor the same book
        assert favorite.from_cardinality == RelationCardinality.MANY
        assert favorite.to_cardinality == RelationCardinality.ONE

    def test_relations_computed_once(self, library):
        assert library.relations is library.relations

    def test_independent_relations_are_distinct(self, settings):
        """Two relation fields without inverse declarations are two relations."""
        model = Model(
            ModelConfig(
                types=(
                    root_entity("A", field("b", "B", is_relation=True)),
                    root_entity("B", field("a", "A", is_relation=True)),
                )
            ),
            settings,
        )

        assert [r.identifier for r in model.relations] == ["A.b", "B.a"]

    def test_no_relations(self, shop_config, settings):
        assert Model(shop_config, settings).relations == ()
