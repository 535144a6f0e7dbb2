"""
Permission profiles.

A permission profile is a named, immutable bundle of access rules that
root entities refer to by name. Profiles are compiled once from the
configuration into a read-only table; evaluating them against a request
happens elsewhere.

Invariants:
    - Profiles never change after the table is built
    - The profile named DEFAULT_PERMISSION_PROFILE is the default one
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from ..constants import DEFAULT_PERMISSION_PROFILE
from .config import AccessKind, PermissionConfig, PermissionProfileConfig

__all__ = [
    "DEFAULT_PERMISSION_PROFILE",
    "Permission",
    "PermissionProfile",
    "PermissionProfileMap",
    "create_permission_map",
]


@dataclass(frozen=True)
class Permission:
    """Access granted to a set of roles.

    Attributes:
        roles: Role names this permission applies to
        access: Read or read-write
        restrict_to_access_groups: Only grant access to objects in these groups
    """

    roles: tuple[str, ...]
    access: AccessKind
    restrict_to_access_groups: Optional[tuple[str, ...]] = None

    @classmethod
    def from_config(cls, config: PermissionConfig) -> Permission:
        return cls(
            roles=config.roles,
            access=config.access,
            restrict_to_access_groups=config.restrict_to_access_groups,
        )

    @property
    def allows_writes(self) -> bool:
        return self.access == AccessKind.READ_WRITE


@dataclass(frozen=True)
class PermissionProfile:
    """A named bundle of permissions."""

    name: str
    permissions: tuple[Permission, ...] = ()

    @classmethod
    def from_config(cls, name: str, config: PermissionProfileConfig) -> PermissionProfile:
        return cls(
            name=name,
            permissions=tuple(Permission.from_config(p) for p in config.permissions),
        )

    @property
    def roles(self) -> frozenset[str]:
        """All roles mentioned by any permission of this profile."""
        return frozenset(role for p in self.permissions for role in p.roles)


PermissionProfileMap = Mapping[str, PermissionProfile]


def create_permission_map(
    configs: Optional[Mapping[str, PermissionProfileConfig]],
) -> PermissionProfileMap:
    """Compile profile declarations into a read-only name -> profile table."""
    profiles = {
        name: PermissionProfile.from_config(name, config)
        for name, config in (configs or {}).items()
    }
    return MappingProxyType(profiles)
