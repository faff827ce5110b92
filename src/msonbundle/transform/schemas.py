# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entity to schema entry transformation."""

from __future__ import annotations

from msonbundle.bundle.entries import SchemaEntry
from msonbundle.model.entities import Entity, Relationship
from msonbundle.transform.ids import IdGenerator
from msonbundle.transform.members import resolve_members
from msonbundle.transform.naming import NamingPolicy
from msonbundle.transform.relationships import resolve_inheritance

# ###############
# Public Interface
# ###############

SCHEMA_ID_PREFIX = "s"


def entity_to_schema(
    entity: Entity,
    relationships: list[Relationship],
    entities: list[Entity],
    *,
    ids: IdGenerator | None = None,
    policy: NamingPolicy | None = None,
) -> SchemaEntry:
    """Build the schema entry of *entity*.

    Attributes map to property, link or collection; methods map to method
    (presence only, no signature); relationship members are merged in after
    the declared members.

    Args:
        entity: The entity to describe.
        relationships: All relationships of the model.
        entities: All entities of the model.
        ids: Identifier generator of the enclosing bundle; a fresh one if omitted.
        policy: Naming policy for synthesized members.
    """
    ids = ids or IdGenerator()
    return SchemaEntry(
        id=ids.next(SCHEMA_ID_PREFIX),
        name=entity.name,
        inherit=resolve_inheritance(entity, relationships, entities),
        members={m.name: m.kind for m in resolve_members(entity, relationships, entities, policy)},
    )
