"""
Builders for type declarations used across unit tests.
"""

from entschema.model.config import ObjectTypeConfig, TypeKind


def root_entity(name, *fields, **kwargs):
    return ObjectTypeConfig(kind=TypeKind.ROOT_ENTITY, name=name, fields=tuple(fields), **kwargs)


def child_entity(name, *fields):
    return ObjectTypeConfig(kind=TypeKind.CHILD_ENTITY, name=name, fields=tuple(fields))


def value_object(name, *fields):
    return ObjectTypeConfig(kind=TypeKind.VALUE_OBJECT, name=name, fields=tuple(fields))


def entity_extension(name, *fields):
    return ObjectTypeConfig(kind=TypeKind.ENTITY_EXTENSION, name=name, fields=tuple(fields))
