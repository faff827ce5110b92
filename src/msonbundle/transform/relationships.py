# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Members implied by relationships, and linearized inheritance lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from msonbundle.bundle.entries import ROOT_MARKER, MemberKind
from msonbundle.model.entities import Entity, Relationship
from msonbundle.model.types import PrimitiveType, RelationshipKind
from msonbundle.transform.naming import NamingPolicy, to_identifier

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class RelationshipMember:
    """A link or collection member synthesized from a relationship.

    Attributes:
        name: Member name chosen by the naming policy.
        kind: ``MemberKind.LINK`` or ``MemberKind.COLLECTION``.
        type_name: Name of the entity at the other end.
        relationship_id: Id of the originating relationship.
    """

    name: str
    kind: MemberKind
    type_name: str
    relationship_id: str


def resolve_forward_properties(
    entity: Entity,
    relationships: list[Relationship],
    entities: list[Entity],
    policy: NamingPolicy | None = None,
) -> list[RelationshipMember]:
    """Return the members implied on *entity* by structural relationships it declares.

    The kind follows the target-side multiplicity. An unnamed relationship is
    skipped when the entity already declares an attribute referencing the
    target; any relationship is skipped when the chosen name is taken by a
    declared attribute or method.
    """
    policy = policy or NamingPolicy()
    names = _names_by_id(entities)
    declared = _declared_names(entity)
    result: list[RelationshipMember] = []
    for rel in relationships:
        if rel.source != entity.id or not rel.kind.is_structural:
            continue
        target_name = names.get(rel.target, rel.target)
        unnamed = not to_identifier(rel.name or "")
        if unnamed and rel.source != rel.target and _expressed_by_attribute(entity, target_name):
            logger.debug("Relationship '%s' already expressed by an attribute of '%s'", rel.id, entity.name)
            continue
        collection = rel.target_is_many
        name = policy.forward_name(rel.name, target_name, collection)
        if name in declared:
            logger.debug("Forward member '%s' of '%s' is declared explicitly", name, entity.name)
            continue
        result.append(RelationshipMember(name, _kind(collection), target_name, rel.id))
    return result


def resolve_reverse_properties(
    entity: Entity,
    relationships: list[Relationship],
    entities: list[Entity],
    policy: NamingPolicy | None = None,
) -> list[RelationshipMember]:
    """Return the members implied on *entity* by structural relationships targeting it.

    The kind follows the source-side multiplicity: a many source end gives a
    collection, anything else a link. A declared attribute or method with the
    reverse name wins over the synthesized member.
    """
    policy = policy or NamingPolicy()
    names = _names_by_id(entities)
    declared = _declared_names(entity)
    result: list[RelationshipMember] = []
    for rel in relationships:
        if rel.target != entity.id or not rel.kind.is_structural:
            continue
        source_name = names.get(rel.source, rel.source)
        collection = rel.source_is_many
        name = policy.reverse_name(rel.name, source_name, collection)
        if name in declared:
            logger.debug("Reverse member '%s' of '%s' is declared explicitly", name, entity.name)
            continue
        result.append(RelationshipMember(name, _kind(collection), source_name, rel.id))
    return result


def resolve_relationship_members(
    entity: Entity,
    relationships: list[Relationship],
    entities: list[Entity],
    policy: NamingPolicy | None = None,
) -> list[RelationshipMember]:
    """Return forward then reverse members of *entity*, first occurrence of a name winning."""
    seen: set[str] = set()
    result: list[RelationshipMember] = []
    forward = resolve_forward_properties(entity, relationships, entities, policy)
    reverse = resolve_reverse_properties(entity, relationships, entities, policy)
    for member in forward + reverse:
        if member.name in seen:
            logger.debug(
                "Dropping duplicate member '%s' of '%s' from '%s'", member.name, entity.name, member.relationship_id
            )
            continue
        seen.add(member.name)
        result.append(member)
    return result


def resolve_inheritance(entity: Entity, relationships: list[Relationship], entities: list[Entity]) -> list[str]:
    """Linearize the parents of *entity*.

    The result starts with the root marker, followed by distinct inheritance
    targets and then distinct implementation targets, each in declaration
    order. The entity's own name never appears.
    """
    names = _names_by_id(entities)
    parents = [ROOT_MARKER]
    for kind in (RelationshipKind.INHERITANCE, RelationshipKind.IMPLEMENTATION):
        for rel in relationships:
            if rel.source != entity.id or rel.kind is not kind:
                continue
            parent = names.get(rel.target, rel.target)
            if parent == entity.name or parent in parents:
                continue
            parents.append(parent)
    return parents


# ################
# Implementation
# ################


def _kind(collection: bool) -> MemberKind:
    return MemberKind.COLLECTION if collection else MemberKind.LINK


def _names_by_id(entities: list[Entity]) -> dict[str, str]:
    return {e.id: e.name for e in entities}


def _declared_names(entity: Entity) -> set[str]:
    return {a.name for a in entity.attributes} | {m.name for m in entity.methods}


def _expressed_by_attribute(entity: Entity, other_name: str) -> bool:
    """Return True if *entity* declares an attribute whose type is the entity *other_name*."""
    return any(
        a.type.strip() == other_name and PrimitiveType.lookup(a.type) is None for a in entity.attributes
    )
