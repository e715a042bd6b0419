"""Keyword registries and object-type vocabulary."""

from jominiscope.registry.data import (
    KNOWN_SCOPE_CHANGERS,
    load_ck3_scope_changers,
    load_ck3_scope_registry,
)
from jominiscope.registry.object_types import (
    ANY_OBJECT_TYPE,
    CK3_OBJECT_TYPES,
    DEFAULT_OBJECT_TYPE,
    INDETERMINATE,
    OBJECT_TYPE_ALIASES,
    ObjectType,
    is_object_type_supported,
    parse_object_type,
    parse_object_types,
)
from jominiscope.registry.registry import (
    KeywordDefinition,
    ScopeRegistry,
    build_scope_registry,
    scope_changers_from_pairs,
)

__all__ = [
    "ANY_OBJECT_TYPE",
    "CK3_OBJECT_TYPES",
    "DEFAULT_OBJECT_TYPE",
    "INDETERMINATE",
    "KNOWN_SCOPE_CHANGERS",
    "OBJECT_TYPE_ALIASES",
    "KeywordDefinition",
    "ObjectType",
    "ScopeRegistry",
    "build_scope_registry",
    "is_object_type_supported",
    "load_ck3_scope_changers",
    "load_ck3_scope_registry",
    "parse_object_type",
    "parse_object_types",
    "scope_changers_from_pairs",
]
