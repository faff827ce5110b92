# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Closed vocabularies of the MSON input dialect."""

from __future__ import annotations

from enum import Enum

# ###############
# Public Interface
# ###############


class PrimitiveType(Enum):
    """Value types that never refer to another entity."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ANY = "any"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def lookup(cls, type_name: str) -> PrimitiveType | None:
        """Return the primitive named by *type_name*, or None for entity references.

        Matching is case-insensitive and accepts the common aliases listed in
        ``PRIMITIVE_ALIASES`` (``int``, ``bool``, ``text``, ...).
        """
        return PRIMITIVE_ALIASES.get(type_name.strip().lower())


# Alias spellings, all lower case, mapped to their canonical primitive.
PRIMITIVE_ALIASES: dict[str, PrimitiveType] = {
    "string": PrimitiveType.STRING,
    "str": PrimitiveType.STRING,
    "text": PrimitiveType.STRING,
    "number": PrimitiveType.NUMBER,
    "int": PrimitiveType.NUMBER,
    "integer": PrimitiveType.NUMBER,
    "float": PrimitiveType.NUMBER,
    "double": PrimitiveType.NUMBER,
    "decimal": PrimitiveType.NUMBER,
    "boolean": PrimitiveType.BOOLEAN,
    "bool": PrimitiveType.BOOLEAN,
    "date": PrimitiveType.DATE,
    "datetime": PrimitiveType.DATE,
    "timestamp": PrimitiveType.DATE,
    "any": PrimitiveType.ANY,
    "object": PrimitiveType.OBJECT,
    "array": PrimitiveType.ARRAY,
}


class Multiplicity(Enum):
    """Cardinality written at one end of a relationship."""

    ONE = "1"
    ZERO_OR_ONE = "0..1"
    MANY = "*"
    ZERO_OR_MANY = "0..*"
    ONE_OR_MANY = "1..*"

    @property
    def is_many(self) -> bool:
        """Return True if this end admits more than one related entity."""
        return self in (Multiplicity.MANY, Multiplicity.ZERO_OR_MANY, Multiplicity.ONE_OR_MANY)


class Visibility(Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"


class EntityKind(Enum):
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    COMPONENT = "component"
    ACTOR = "actor"


class ModelKind(Enum):
    CLASS = "class"
    COMPONENT = "component"
    DEPLOYMENT = "deployment"
    USECASE = "usecase"


class RelationshipKind(Enum):
    """Kinds of edges between entities."""

    ASSOCIATION = "association"
    AGGREGATION = "aggregation"
    COMPOSITION = "composition"
    INHERITANCE = "inheritance"
    IMPLEMENTATION = "implementation"
    DEPENDENCY = "dependency"

    @property
    def is_structural(self) -> bool:
        """Return True for edges that produce link or collection members."""
        return self in (RelationshipKind.ASSOCIATION, RelationshipKind.AGGREGATION, RelationshipKind.COMPOSITION)

    @property
    def is_hierarchical(self) -> bool:
        """Return True for edges that contribute to an inheritance list."""
        return self in (RelationshipKind.INHERITANCE, RelationshipKind.IMPLEMENTATION)
