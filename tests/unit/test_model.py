"""
Unit tests for the model registry.

Tests cover:
- Construction from declarations (built-ins, forward references)
- Lookup by name (tolerant, fallback, strict, kind-narrowed)
- Views by kind
- Reference description enrichment
- Permission profiles
"""

import pytest

from entschema.config import ModelSettings
from entschema.errors import (
    DescriptionAlreadyExtendedError,
    UndefinedFieldError,
    UndefinedPermissionProfileError,
    UndefinedTypeError,
    WrongTypeKindError,
)
from entschema.field_roles import FieldRole
from entschema.model import (
    BUILT_IN_TYPE_NAMES,
    InvalidType,
    Model,
    ModelConfig,
    PermissionProfileConfig,
    TypeKind,
    built_in_types,
)
from entschema.model.config import AccessKind, PermissionsConfig, field

from .builders import root_entity


class TestModelConstruction:
    """Tests for building a Model."""

    def test_type_count_includes_built_ins(self, shop_config, settings):
        """All declared types follow the built-in types."""
        model = Model(shop_config, settings)

        assert len(model.types) == len(shop_config.types) + len(built_in_types)
        assert model.types[: len(built_in_types)] == built_in_types
        assert [t.name for t in model.types[len(built_in_types):]] == [t.name for t in shop_config.types]

    def test_built_in_types_resolvable(self, settings):
        """Every built-in type can be looked up in an empty model."""
        model = Model(ModelConfig(), settings)

        for name in BUILT_IN_TYPE_NAMES:
            assert model.get_type(name) is not None
            assert model.get_type(name).is_built_in

    def test_forward_references_resolve(self, shop_config, settings):
        """A field may reference a type declared after its own type."""
        model = Model(shop_config, settings)

        order = model.get_root_entity_type_or_throw("Order")
        assert order.get_field("customer").type is model.get_type("Customer")

    def test_field_roles(self, shop_config, settings):
        """Fields are classified by their target and declaration."""
        model = Model(shop_config, settings)
        order = model.get_root_entity_type_or_throw("Order")

        assert order.get_field("orderNumber").role == FieldRole.SCALAR
        assert order.get_field("status").role == FieldRole.SCALAR
        assert order.get_field("customer").role == FieldRole.REFERENCE
        assert order.get_field("items").role == FieldRole.EMBEDDED
        assert order.get_field("shippingAddress").role == FieldRole.EMBEDDED

    def test_from_dict(self, settings):
        """A model can be built from plain dictionaries."""
        config = ModelConfig.from_dict(
            {
                "types": [
                    {"kind": "rootEntity", "name": "User", "fields": [{"name": "email", "type_name": "String"}]},
                    {"kind": "enum", "name": "Role", "values": ["ADMIN", "USER"]},
                ],
                "permission_profiles": {"default": {"permissions": [{"roles": ["all"], "access": "read"}]}},
            }
        )

        model = Model(config, settings)

        assert model.get_root_entity_type("User") is not None
        assert model.get_enum_type_or_throw("Role").values == ("ADMIN", "USER")
        assert model.default_permission_profile.permissions[0].access == AccessKind.READ


class TestTypeLookup:
    """Tests for lookup by name."""

    def test_tolerant_lookup_returns_none(self, shop_config, settings):
        """Unknown names give None."""
        model = Model(shop_config, settings)

        assert model.get_type("Nope") is None
        assert model.get_root_entity_type("Nope") is None

    def test_tolerant_kind_lookup_wrong_kind_returns_none(self, shop_config, settings):
        """A name of another kind gives None."""
        model = Model(shop_config, settings)

        assert model.get_root_entity_type("Address") is None
        assert model.get_value_object_type("Address") is not None

    def test_fallback_lookup_returns_invalid_type(self, shop_config, settings):
        """Unknown names give an InvalidType of the same name."""
        model = Model(shop_config, settings)

        fallback = model.get_type_or_fallback("Nope")

        assert isinstance(fallback, InvalidType)
        assert fallback.name == "Nope"
        assert fallback.is_invalid
        assert fallback not in model.types

    def test_fallback_lookup_returns_existing_type(self, shop_config, settings):
        """Known names give the real type."""
        model = Model(shop_config, settings)

        assert model.get_type_or_fallback("Customer") is model.get_type("Customer")
        assert not model.get_type_or_fallback("Customer").is_invalid

    def test_kind_fallback_lookup(self, shop_config, settings):
        """Kind-narrowed fallback gives an InvalidType for another kind."""
        model = Model(shop_config, settings)

        assert model.get_child_entity_type_or_fallback("OrderItem").kind == TypeKind.CHILD_ENTITY
        assert model.get_child_entity_type_or_fallback("Address").is_invalid

    def test_strict_lookup_undefined_raises(self, shop_config, settings):
        """Strict lookup of an unknown name raises."""
        model = Model(shop_config, settings)

        with pytest.raises(UndefinedTypeError, match='Reference to undefined type "Nope"'):
            model.get_type_or_throw("Nope")

    def test_strict_kind_lookup_undefined_raises(self, shop_config, settings):
        """Strict kind-narrowed lookup of an unknown name raises UndefinedTypeError."""
        model = Model(shop_config, settings)

        with pytest.raises(UndefinedTypeError):
            model.get_enum_type_or_throw("Nope")

    def test_strict_kind_lookup_wrong_kind_raises(self, shop_config, settings):
        """Strict kind-narrowed lookup of another kind names both kinds."""
        model = Model(shop_config, settings)

        with pytest.raises(WrongTypeKindError) as exc_info:
            model.get_root_entity_type_or_throw("Address")

        assert exc_info.value.expected == "root entity type"
        assert exc_info.value.actual == "value object type"
        assert "root entity type" in str(exc_info.value)
        assert "value object type" in str(exc_info.value)

    def test_object_type_lookup(self, shop_config, settings):
        """Object type lookup accepts all object kinds, not scalars."""
        model = Model(shop_config, settings)

        assert model.get_object_type_or_throw("TrackingInfo").kind == TypeKind.ENTITY_EXTENSION
        with pytest.raises(WrongTypeKindError) as exc_info:
            model.get_object_type_or_throw("String")

        assert str(exc_info.value) == 'Expected type "String" to be an object type, but is a scalar type'

    def test_wrong_kind_message_articles(self, shop_config, settings):
        model = Model(shop_config, settings)

        with pytest.raises(WrongTypeKindError) as exc_info:
            model.get_enum_type_or_throw("Order")

        assert str(exc_info.value) == 'Expected type "Order" to be an enum type, but is a root entity type'

    def test_field_lookup(self, shop_config, settings):
        """Strict field lookup returns the field or raises UndefinedFieldError."""
        order = Model(shop_config, settings).get_root_entity_type_or_throw("Order")

        assert order.get_field_or_throw("customer") is order.get_field("customer")
        with pytest.raises(UndefinedFieldError, match='Type "Order" does not have a field "total"') as exc_info:
            order.get_field_or_throw("total")

        assert exc_info.value.code == "UNDEFINED_FIELD"
        assert exc_info.value.field_name == "total"

    def test_all_kind_lookups(self, shop_config, settings):
        """Each kind has strict accessors."""
        model = Model(shop_config, settings)

        assert model.get_root_entity_type_or_throw("Order").name == "Order"
        assert model.get_child_entity_type_or_throw("OrderItem").name == "OrderItem"
        assert model.get_entity_extension_type_or_throw("TrackingInfo").name == "TrackingInfo"
        assert model.get_value_object_type_or_throw("Address").name == "Address"
        assert model.get_scalar_type_or_throw("Int").name == "Int"
        assert model.get_enum_type_or_throw("OrderStatus").name == "OrderStatus"

    def test_duplicate_name_lookup_returns_last(self, settings):
        """With duplicate names, lookup finds the last declaration."""
        first = root_entity("Thing", field("a", "String"))
        second = root_entity("Thing", field("b", "String"))
        model = Model(ModelConfig(types=(first, second)), settings)

        assert model.get_type("Thing").get_field("b") is not None


class TestKindViews:
    """Tests for the views filtered by kind."""

    def test_views(self, shop_config, settings):
        model = Model(shop_config, settings)

        assert [t.name for t in model.root_entity_types] == ["Order", "Customer"]
        assert [t.name for t in model.child_entity_types] == ["OrderItem"]
        assert [t.name for t in model.entity_extension_types] == ["TrackingInfo"]
        assert [t.name for t in model.value_object_types] == ["Address"]
        assert [t.name for t in model.enum_types] == ["OrderStatus"]
        assert {t.name for t in model.scalar_types} == BUILT_IN_TYPE_NAMES

    def test_object_types_excludes_scalars_and_enums(self, shop_config, settings):
        model = Model(shop_config, settings)

        assert [t.name for t in model.object_types] == [
            "Order",
            "Customer",
            "OrderItem",
            "Address",
            "TrackingInfo",
        ]


class TestReferenceDescriptions:
    """Tests for the generated description of reference fields."""

    def test_reference_description_names_key_field(self, shop_config, settings):
        model = Model(shop_config, settings)

        customer = model.get_root_entity_type_or_throw("Order").get_field("customer")

        assert customer.description == "This field references a Customer by its email field"

    def test_reference_description_without_key_field(self, settings):
        config = ModelConfig(
            types=(
                root_entity("Post", field("author", "User", is_reference=True)),
                root_entity("User", field("name", "String")),
            )
        )
        model = Model(config, settings)

        author = model.get_root_entity_type_or_throw("Post").get_field("author")

        assert author.description == "This field references a User by its key field"

    def test_reference_description_keeps_existing_text(self, settings):
        config = ModelConfig(
            types=(
                root_entity("Post", field("author", "User", is_reference=True, description="Who wrote it.")),
                root_entity("User", field("name", "String"), key_field_name="name"),
            )
        )
        model = Model(config, settings)

        author = model.get_root_entity_type_or_throw("Post").get_field("author")

        assert author.description == "Who wrote it.\n\nThis field references a User by its name field"

    def test_non_reference_fields_unchanged(self, shop_config, settings):
        model = Model(shop_config, settings)

        assert model.get_root_entity_type_or_throw("Order").get_field("orderNumber").description == ""

    def test_description_extended_only_once(self, shop_config, settings):
        model = Model(shop_config, settings)
        customer = model.get_root_entity_type_or_throw("Order").get_field("customer")

        with pytest.raises(DescriptionAlreadyExtendedError):
            customer.extend_description("again")

        assert customer.description == "This field references a Customer by its email field"


class TestPermissionProfiles:
    """Tests for permission profile lookup."""

    def test_get_permission_profile(self, shop_config, settings):
        model = Model(shop_config, settings)

        admin = model.get_permission_profile("admin")

        assert admin.name == "admin"
        assert admin.roles == frozenset({"admin"})
        assert admin.permissions[0].allows_writes

    def test_missing_profile(self, shop_config, settings):
        model = Model(shop_config, settings)

        assert model.get_permission_profile("nope") is None
        with pytest.raises(UndefinedPermissionProfileError, match='Permission profile "nope" does not exist'):
            model.get_permission_profile_or_throw("nope")

    def test_default_profile(self, shop_config, settings):
        model = Model(shop_config, settings)

        assert model.default_permission_profile is model.get_permission_profile("default")

    def test_default_profile_name_from_settings(self, shop_config):
        model = Model(shop_config, ModelSettings(default_permission_profile="admin"))

        assert model.default_permission_profile.name == "admin"

    def test_no_default_profile(self, settings):
        model = Model(ModelConfig(permission_profiles={"other": PermissionProfileConfig()}), settings)

        assert model.default_permission_profile is None

    def test_profile_table_is_read_only(self, shop_config, settings):
        model = Model(shop_config, settings)

        with pytest.raises(TypeError):
            model.permission_profiles["new"] = model.get_permission_profile("admin")

    def test_root_entity_profile(self, settings, shop_config):
        config = ModelConfig(
            types=(
                root_entity(
                    "Secret",
                    field("value", "String"),
                    permissions=PermissionsConfig(permission_profile_name="admin"),
                ),
                root_entity("Public", field("value", "String")),
            ),
            permission_profiles=shop_config.permission_profiles,
        )
        model = Model(config, settings)

        assert model.get_root_entity_type_or_throw("Secret").permission_profile.name == "admin"
        assert model.get_root_entity_type_or_throw("Public").permission_profile.name == "default"
