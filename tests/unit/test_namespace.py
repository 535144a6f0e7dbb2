"""
Unit tests for the namespace tree.
"""

import pytest

from entschema.errors import UndefinedNamespaceError
from entschema.model import Model, ModelConfig
from entschema.model.config import field

from .builders import root_entity


@pytest.fixture
def model(settings):
    # children are declared before their parents on purpose
    return Model(
        ModelConfig(
            types=(
                root_entity("Deep", field("x", "String"), namespace_path=("a", "b")),
                root_entity("Top", field("x", "String")),
                root_entity("Middle", field("x", "String"), namespace_path=("a",)),
                root_entity("Other", field("x", "String"), namespace_path=("c",)),
            )
        ),
        settings,
    )


class TestNamespaceTree:
    """Tests for building the namespace tree."""

    def test_root_namespace(self, model):
        root = model.root_namespace

        assert root.is_root
        assert root.name is None
        assert root.path == ()
        assert [t.name for t in root.root_entity_types] == ["Top"]

    def test_children_in_order_of_appearance(self, model):
        assert [ns.name for ns in model.root_namespace.child_namespaces] == ["a", "c"]

    def test_all_namespaces(self, model):
        assert [ns.dotted_path for ns in model.namespaces] == ["", "a", "a.b", "c"]

    def test_all_root_entity_types(self, model):
        a = model.get_namespace_by_path(["a"])

        assert [t.name for t in a.root_entity_types] == ["Middle"]
        assert [t.name for t in a.all_root_entity_types] == ["Middle", "Deep"]

    def test_parent_links(self, model):
        deep = model.get_namespace_by_path(["a", "b"])

        assert deep.parent.name == "a"
        assert deep.parent.parent is model.root_namespace


class TestNamespaceLookup:
    """Tests for lookup by path."""

    def test_deepest_namespace(self, model):
        deep = model.get_namespace_by_path(["a", "b"])

        assert deep.path == ("a", "b")
        assert [t.name for t in deep.root_entity_types] == ["Deep"]
        assert deep.child_namespaces == ()

    def test_empty_path_is_root(self, model):
        assert model.get_namespace_by_path([]) is model.root_namespace

    def test_missing_segment_returns_none(self, model):
        assert model.get_namespace_by_path(["a", "x"]) is None

    def test_missing_segment_raises(self, model):
        with pytest.raises(UndefinedNamespaceError, match=r"Namespace a\.x does not exist"):
            model.get_namespace_by_path_or_throw(["a", "x"])

    def test_child_lookup_raises(self, model):
        with pytest.raises(UndefinedNamespaceError, match="Namespace nope does not exist"):
            model.root_namespace.get_child_namespace_or_throw("nope")


class TestListPaths:
    """Namespace paths given as lists are placed in the tree like tuples."""

    def test_list_paths(self, settings):
        model = Model(
            ModelConfig(
                types=(
                    root_entity("Top", field("x", "String"), namespace_path=[]),
                    root_entity("Deep", field("x", "String"), namespace_path=["a", "b"]),
                )
            ),
            settings,
        )

        assert [ns.dotted_path for ns in model.namespaces] == ["", "a", "a.b"]
        assert [t.name for t in model.root_namespace.root_entity_types] == ["Top"]
        assert [t.name for t in model.get_namespace_by_path(["a", "b"]).root_entity_types] == ["Deep"]

    def test_config_stores_tuples(self):
        config = root_entity("Deep", field("x", "String"), namespace_path=["a", "b"])

        assert config.namespace_path == ("a", "b")
        assert isinstance(config.fields, tuple)
