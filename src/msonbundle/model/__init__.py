# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input model for msonbundle (entities, members, relationships)."""

from msonbundle.model.entities import (
    Attribute,
    Entity,
    Method,
    MsonModel,
    MultiplicityPair,
    Parameter,
    Relationship,
)
from msonbundle.model.types import (
    PRIMITIVE_ALIASES,
    EntityKind,
    ModelKind,
    Multiplicity,
    PrimitiveType,
    RelationshipKind,
    Visibility,
)

__all__ = [
    # Vocabularies
    "PRIMITIVE_ALIASES",
    "PrimitiveType",
    "Multiplicity",
    "Visibility",
    "EntityKind",
    "ModelKind",
    "RelationshipKind",
    # Entities
    "Attribute",
    "Parameter",
    "Method",
    "Entity",
    "MultiplicityPair",
    "Relationship",
    "MsonModel",
]
