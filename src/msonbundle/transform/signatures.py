# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entity to model entry transformation (type signatures)."""

from __future__ import annotations

from msonbundle.bundle.entries import RETURN_KEY, MemberKind, ModelEntry, TypeExpression
from msonbundle.model.entities import Entity, Method, Relationship
from msonbundle.transform.attributes import normalize_type_name
from msonbundle.transform.ids import IdGenerator
from msonbundle.transform.members import ResolvedMember, resolve_members
from msonbundle.transform.naming import NamingPolicy

# ###############
# Public Interface
# ###############

MODEL_ID_PREFIX = "m"


def entity_to_model(
    entity: Entity,
    relationships: list[Relationship],
    entities: list[Entity],
    *,
    ids: IdGenerator | None = None,
    policy: NamingPolicy | None = None,
) -> ModelEntry:
    """Build the model entry of *entity*, with the same member keys as its schema entry."""
    ids = ids or IdGenerator()
    return ModelEntry(
        id=ids.next(MODEL_ID_PREFIX),
        name=entity.name,
        members={m.name: type_expression(m) for m in resolve_members(entity, relationships, entities, policy)},
    )


def type_expression(member: ResolvedMember) -> TypeExpression:
    """Return the type expression of a resolved member.

    * property: the normalized primitive name
    * link: the referenced entity name
    * collection: ``[referenced entity name]``
    * method: ``{parameter: type, ..., "=>": return type}``
    """
    if member.method is not None:
        return method_signature(member.method)
    if member.attribute is not None:
        type_name = normalize_type_name(member.attribute.type.strip())
    else:
        assert member.relationship is not None
        type_name = member.relationship.type_name
    if member.kind is MemberKind.COLLECTION:
        return [type_name]
    return type_name


def method_signature(method: Method) -> dict[str, str]:
    signature = {p.name: normalize_type_name(p.type) for p in method.parameters}
    signature[RETURN_KEY] = normalize_type_name(method.return_type)
    return signature
