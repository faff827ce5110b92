# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""MSON model to runtime bundle transformation."""

from msonbundle.transform.assembler import assemble_bundle
from msonbundle.transform.attributes import normalize_primitive, resolve_attribute_kind
from msonbundle.transform.ids import IdGenerator
from msonbundle.transform.members import ResolvedMember, resolve_members
from msonbundle.transform.naming import NamingPolicy, to_identifier
from msonbundle.transform.relationships import (
    RelationshipMember,
    resolve_forward_properties,
    resolve_inheritance,
    resolve_relationship_members,
    resolve_reverse_properties,
)
from msonbundle.transform.schemas import entity_to_schema
from msonbundle.transform.signatures import entity_to_model, method_signature

__all__ = [
    "IdGenerator",
    "NamingPolicy",
    "RelationshipMember",
    "ResolvedMember",
    "assemble_bundle",
    "entity_to_model",
    "entity_to_schema",
    "method_signature",
    "normalize_primitive",
    "resolve_attribute_kind",
    "resolve_forward_properties",
    "resolve_inheritance",
    "resolve_members",
    "resolve_relationship_members",
    "resolve_reverse_properties",
    "to_identifier",
]
