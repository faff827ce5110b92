# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of attributes into properties, links, and collections."""

from __future__ import annotations

from msonbundle.bundle.entries import MemberKind
from msonbundle.model.entities import Attribute, Entity, Relationship
from msonbundle.model.types import PrimitiveType

# ###############
# Public Interface
# ###############


def normalize_primitive(type_name: str) -> str | None:
    """Return the canonical primitive name for *type_name*, or None if it names an entity."""
    primitive = PrimitiveType.lookup(type_name)
    return primitive.value if primitive is not None else None


def normalize_type_name(type_name: str) -> str:
    """Return the canonical primitive name, or *type_name* unchanged for anything else."""
    return normalize_primitive(type_name) or type_name


def resolve_attribute_kind(
    attribute: Attribute,
    relationships: list[Relationship],
    owner_id: str,
    entities: list[Entity],
) -> MemberKind:
    """Classify *attribute* of the entity *owner_id*.

    Primitive types are always properties. Any other type name refers to an
    entity; the structural relationship joining the owner to that entity
    decides between link and collection by the multiplicity at the referenced
    end. A reference without such a relationship is a link.

    Args:
        attribute: The attribute to classify.
        relationships: All relationships of the model.
        owner_id: Id of the entity declaring the attribute.
        entities: All entities of the model, used to resolve the type name.
    """
    if PrimitiveType.lookup(attribute.type) is not None:
        return MemberKind.PROPERTY

    referenced = find_entity_by_name(entities, attribute.type)
    if referenced is None:
        return MemberKind.LINK

    relationship = find_structural_relationship(relationships, owner_id, referenced.id)
    if relationship is None:
        return MemberKind.LINK
    return MemberKind.COLLECTION if far_end_is_many(relationship, owner_id) else MemberKind.LINK


def find_entity_by_name(entities: list[Entity], name: str) -> Entity | None:
    stripped = name.strip()
    for entity in entities:
        if entity.name == stripped:
            return entity
    return None


def find_structural_relationship(
    relationships: list[Relationship],
    owner_id: str,
    other_id: str,
) -> Relationship | None:
    """Return the first structural relationship joining *owner_id* and *other_id*.

    Relationships declared from the owner are preferred over those pointing at
    it. A self-reference (``owner_id == other_id``) matches self-loops only.
    """
    structural = [r for r in relationships if r.kind.is_structural]
    for rel in structural:
        if rel.source == owner_id and rel.target == other_id:
            return rel
    for rel in structural:
        if rel.source == other_id and rel.target == owner_id:
            return rel
    return None


def far_end_is_many(relationship: Relationship, owner_id: str) -> bool:
    """Return True if the end opposite *owner_id* admits many entities.

    For self-loops the owner is taken as the source, so the target end is read.
    """
    if relationship.source == owner_id:
        return relationship.target_is_many
    return relationship.source_is_many
