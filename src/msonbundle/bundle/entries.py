# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime bundle entries: schemas, models, and the bundle that holds them."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

# Base capability every schema inherits from. Always first in ``_inherit``.
ROOT_MARKER = "_Component"

# Key under which a method signature stores its return type.
RETURN_KEY = "=>"

# Entry keys that carry identity rather than members.
RESERVED_KEYS = frozenset({"_id", "_name", "_inherit"})

DEFAULT_VERSION = "0.0.1"

# A member's type in a model entry: a type name, a one-element collection
# template such as ``["Course"]``, or a method signature mapping.
TypeExpression = str | list[str] | dict[str, str]


class MemberKind(Enum):
    """Structural kind of a schema member."""

    PROPERTY = "property"
    METHOD = "method"
    LINK = "link"
    COLLECTION = "collection"


class SchemaEntry(BaseModel):
    """Structural description of one entity: which members exist and of what kind."""

    id: str
    name: str
    inherit: list[str] = _Field(default_factory=lambda: [ROOT_MARKER])
    members: dict[str, MemberKind] = _Field(default_factory=dict)


class ModelEntry(BaseModel):
    """Type signatures for the members of one entity, keyed like its schema entry."""

    id: str
    name: str
    members: dict[str, TypeExpression] = _Field(default_factory=dict)


class Bundle(BaseModel):
    """A complete runtime bundle.

    ``schemas``, ``models`` and ``components`` are keyed by entity name. The
    ``types`` and ``behaviors`` sections are reserved and stay empty for
    bundles assembled from MSON models.
    """

    id: str
    name: str
    description: str = ""
    version: str = DEFAULT_VERSION
    master: bool = True
    schemas: dict[str, SchemaEntry] = _Field(default_factory=dict)
    models: dict[str, ModelEntry] = _Field(default_factory=dict)
    types: dict[str, dict[str, Any]] = _Field(default_factory=dict)
    behaviors: dict[str, dict[str, Any]] = _Field(default_factory=dict)
    components: dict[str, dict[str, Any]] = _Field(default_factory=dict)
