# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Ordered member resolution shared by the schema and model transformers.

Both transformers walk the list produced here, which keeps the key sets of a
schema entry and its model entry identical.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from msonbundle.bundle.entries import RESERVED_KEYS, MemberKind
from msonbundle.model.entities import Attribute, Entity, Method, Relationship
from msonbundle.transform.attributes import resolve_attribute_kind
from msonbundle.transform.naming import NamingPolicy
from msonbundle.transform.relationships import RelationshipMember, resolve_relationship_members

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ResolvedMember:
    """One member of an entity's schema and model entries.

    Exactly one of ``attribute``, ``method`` and ``relationship`` is set.
    """

    name: str
    kind: MemberKind
    attribute: Attribute | None = None
    method: Method | None = None
    relationship: RelationshipMember | None = None


def resolve_members(
    entity: Entity,
    relationships: list[Relationship],
    entities: list[Entity],
    policy: NamingPolicy | None = None,
) -> list[ResolvedMember]:
    """Return the members of *entity* in entry order.

    Declared attributes come first, then methods, then members synthesized
    from relationships. A name is taken by its first occurrence; names that
    collide with the entry identity keys are dropped.
    """
    members: dict[str, ResolvedMember] = {}

    def _add(member: ResolvedMember) -> None:
        if member.name in RESERVED_KEYS:
            logger.warning("Member '%s' of '%s' clashes with an identity key and is skipped", member.name, entity.name)
            return
        if member.name in members:
            return
        members[member.name] = member

    for attribute in entity.attributes:
        kind = resolve_attribute_kind(attribute, relationships, entity.id, entities)
        _add(ResolvedMember(attribute.name, kind, attribute=attribute))
    for method in entity.methods:
        _add(ResolvedMember(method.name, MemberKind.METHOD, method=method))
    for rel_member in resolve_relationship_members(entity, relationships, entities, policy):
        _add(ResolvedMember(rel_member.name, rel_member.kind, relationship=rel_member))

    return list(members.values())
