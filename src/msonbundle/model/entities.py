# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entities, members, and relationships of an MSON model.

Field aliases follow the camelCase spelling of MSON documents, so a decoded
JSON payload can be passed straight to ``MsonModel.model_validate``. Python
code may use either spelling.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from msonbundle.model.types import EntityKind, ModelKind, Multiplicity, RelationshipKind, Visibility

# ###############
# Public Interface
# ###############


class _MsonBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Attribute(_MsonBase):
    """A data member; ``type`` is a primitive tag or another entity's name."""

    name: str
    type: str
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = _Field(default=False, alias="isStatic")
    is_read_only: bool = _Field(default=False, alias="isReadOnly")


class Parameter(_MsonBase):
    """A named, typed method parameter."""

    name: str
    type: str


class Method(_MsonBase):
    """A behavioural member with an ordered parameter list."""

    name: str
    parameters: list[Parameter] = _Field(default_factory=list)
    return_type: str = _Field(default="void", alias="returnType")
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = _Field(default=False, alias="isStatic")
    is_abstract: bool = _Field(default=False, alias="isAbstract")


class Entity(_MsonBase):
    """A class, interface, enum, component, or actor."""

    id: str
    name: str
    kind: EntityKind = _Field(default=EntityKind.CLASS, alias="type")
    attributes: list[Attribute] = _Field(default_factory=list)
    methods: list[Method] = _Field(default_factory=list)
    stereotype: str | None = None
    namespace: str | None = None
    values: list[str] = _Field(default_factory=list)


class MultiplicityPair(_MsonBase):
    """Cardinalities at both ends of a relationship. A missing end means exactly one."""

    source: Multiplicity | None = _Field(default=None, alias="from")
    target: Multiplicity | None = _Field(default=None, alias="to")

    @property
    def source_is_many(self) -> bool:
        return self.source is not None and self.source.is_many

    @property
    def target_is_many(self) -> bool:
        return self.target is not None and self.target.is_many


class Relationship(_MsonBase):
    """A directed edge from the ``source`` entity id to the ``target`` entity id."""

    id: str
    source: str = _Field(alias="from")
    target: str = _Field(alias="to")
    kind: RelationshipKind = _Field(alias="type")
    multiplicity: MultiplicityPair | None = None
    name: str | None = None

    @property
    def source_is_many(self) -> bool:
        return self.multiplicity is not None and self.multiplicity.source_is_many

    @property
    def target_is_many(self) -> bool:
        return self.multiplicity is not None and self.multiplicity.target_is_many


class MsonModel(_MsonBase):
    """Top-level input: a named set of entities and the relationships between them."""

    id: str
    name: str
    kind: ModelKind = _Field(default=ModelKind.CLASS, alias="type")
    description: str | None = None
    entities: list[Entity] = _Field(default_factory=list)
    relationships: list[Relationship] = _Field(default_factory=list)

    def entity_by_id(self, entity_id: str) -> Entity | None:
        """Return the entity with *entity_id*, or None if it is not part of the model."""
        for entity in self.entities:
            if entity.id == entity_id:
                return entity
        return None
