"""
Shared fixtures for unit tests.
"""

import pytest

from entschema.config import ModelSettings
from entschema.model.config import (
    AccessKind,
    EnumTypeConfig,
    ModelConfig,
    PermissionConfig,
    PermissionProfileConfig,
    field,
)

from .builders import child_entity, entity_extension, root_entity, value_object


@pytest.fixture
def settings():
    """Settings independent of the environment."""
    return ModelSettings(
        log_level="INFO",
        log_format="text",
        default_permission_profile="default",
        warn_on_missing_key_field=True,
    )


@pytest.fixture
def shop_config():
    """A small, valid configuration covering every kind."""
    return ModelConfig(
        types=(
            # Order references Customer before it is declared
            root_entity(
                "Order",
                field("orderNumber", "String"),
                field("customer", "Customer", is_reference=True),
                field("items", "OrderItem", is_list=True),
                field("shippingAddress", "Address"),
                field("tracking", "TrackingInfo"),
                field("status", "OrderStatus"),
                key_field_name="orderNumber",
                namespace_path=("sales",),
            ),
            root_entity(
                "Customer",
                field("email", "String"),
                field("name", "String"),
                key_field_name="email",
                namespace_path=("crm",),
            ),
            child_entity("OrderItem", field("sku", "String"), field("quantity", "Int")),
            value_object("Address", field("street", "String"), field("city", "String")),
            entity_extension("TrackingInfo", field("carrier", "String")),
            EnumTypeConfig(name="OrderStatus", values=("OPEN", "SHIPPED")),
        ),
        permission_profiles={
            "default": PermissionProfileConfig(
                permissions=(PermissionConfig(roles=("everyone",), access=AccessKind.READ),),
            ),
            "admin": PermissionProfileConfig(
                permissions=(PermissionConfig(roles=("admin",), access=AccessKind.READ_WRITE),),
            ),
        },
    )
