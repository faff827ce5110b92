# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Encoding of bundles to and from compact JSON text.

The encoded form is the flat runtime layout: identity keys (``_id``,
``_name``, ``_inherit``) sit beside the member keys of each entry. Decoding
yields the plain mapping, which the validator accepts as is, and
:func:`bundle_from_dict` rebuilds a typed :class:`Bundle` from it.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from msonbundle.bundle.entries import RESERVED_KEYS, Bundle, MemberKind, ModelEntry, SchemaEntry
from msonbundle.errors import ArtifactError

# ###############
# Public Interface
# ###############


def serialize(bundle: Bundle | Mapping[str, Any]) -> str:
    """Serialize a bundle (typed or already flat) to a compact JSON string."""
    obj = bundle_to_dict(bundle) if isinstance(bundle, Bundle) else bundle
    return json.dumps(obj, separators=(",", ":"))


def deserialize(data: str) -> dict[str, Any]:
    """Decode JSON text produced by :func:`serialize` into a flat bundle mapping.

    Raises:
        ArtifactError: If the text is not JSON or does not hold a JSON object.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ArtifactError(f"Bundle text is not valid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise ArtifactError(f"Bundle text must hold a JSON object, got {type(obj).__name__}")
    return obj


def bundle_to_dict(bundle: Bundle) -> dict[str, Any]:
    """Flatten a typed bundle into its runtime JSON layout.

    Sections and entries that were replaced after construction by something
    other than the declared types are passed through unchanged, so the
    validator can report them.
    """
    return {
        "_id": bundle.id,
        "name": bundle.name,
        "description": bundle.description,
        "version": bundle.version,
        "master": bundle.master,
        "schemas": _section_to_dict(bundle.schemas, SchemaEntry, _schema_to_dict),
        "models": _section_to_dict(bundle.models, ModelEntry, _model_to_dict),
        "types": _section_to_dict(bundle.types, Mapping, dict),
        "behaviors": _section_to_dict(bundle.behaviors, Mapping, dict),
        "components": _section_to_dict(bundle.components, Mapping, dict),
    }


def bundle_from_dict(obj: Mapping[str, Any]) -> Bundle:
    """Rebuild a typed bundle from its flat runtime layout.

    Raises:
        ArtifactError: If the mapping does not describe a well-formed bundle.
    """
    try:
        return Bundle(
            id=obj["_id"],
            name=obj["name"],
            description=obj.get("description", ""),
            version=obj["version"],
            master=obj.get("master", True),
            schemas={key: _schema_from_dict(s) for key, s in obj.get("schemas", {}).items()},
            models={key: _model_from_dict(m) for key, m in obj.get("models", {}).items()},
            types=obj.get("types", {}),
            behaviors=obj.get("behaviors", {}),
            components=obj.get("components", {}),
        )
    except KeyError as exc:
        raise ArtifactError(f"Bundle is missing required key {exc}") from exc
    except (AttributeError, TypeError, ValueError, ValidationError) as exc:
        raise ArtifactError(f"Malformed bundle: {exc}") from exc


# ################
# Implementation
# ################


def _section_to_dict(section: Any, entry_type: type, convert: Callable[[Any], Any]) -> Any:
    if not isinstance(section, Mapping):
        return section
    return {key: convert(entry) if isinstance(entry, entry_type) else entry for key, entry in section.items()}


def _schema_to_dict(schema: SchemaEntry) -> dict[str, Any]:
    inherit = list(schema.inherit) if isinstance(schema.inherit, list) else schema.inherit
    d: dict[str, Any] = {"_id": schema.id, "_name": schema.name, "_inherit": inherit}
    if isinstance(schema.members, Mapping):
        for member, kind in schema.members.items():
            d[member] = getattr(kind, "value", kind)
    return d


def _schema_from_dict(obj: Mapping[str, Any]) -> SchemaEntry:
    return SchemaEntry(
        id=obj["_id"],
        name=obj["_name"],
        inherit=list(obj.get("_inherit", [])),
        members={key: MemberKind(value) for key, value in obj.items() if key not in RESERVED_KEYS},
    )


def _model_to_dict(model: ModelEntry) -> dict[str, Any]:
    d: dict[str, Any] = {"_id": model.id, "_name": model.name}
    if isinstance(model.members, Mapping):
        for member, expression in model.members.items():
            d[member] = _copy_expression(expression)
    return d


def _model_from_dict(obj: Mapping[str, Any]) -> ModelEntry:
    return ModelEntry(
        id=obj["_id"],
        name=obj["_name"],
        members={key: value for key, value in obj.items() if key not in RESERVED_KEYS},
    )


def _copy_expression(expression: Any) -> Any:
    if isinstance(expression, list):
        return list(expression)
    if isinstance(expression, dict):
        return dict(expression)
    return expression
