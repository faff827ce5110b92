# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for runtime bundles.

The checks accept any object. Bundles assembled by :mod:`msonbundle.transform`
are converted to their flat layout first; anything else (JSON decoded
mappings, hand-built dictionaries, garbage) is inspected as is. Problems are
reported as findings and never raised.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from msonbundle.bundle.artifact import bundle_to_dict
from msonbundle.bundle.entries import RESERVED_KEYS, RETURN_KEY, ROOT_MARKER, Bundle, MemberKind

# ###############
# Public Interface
# ###############


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Finding:
    """An issue detected in a bundle.

    Attributes:
        message: Human-readable description of the issue.
        severity: ``Severity.ERROR`` makes the bundle invalid; warnings do not.
    """

    message: str
    severity: Severity

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message, "severity": self.severity.value}


@dataclass
class ValidationReport:
    """Result of validating a bundle.

    Attributes:
        findings: All findings in the order the checks produced them.
    """

    findings: list[Finding] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True if no finding has error severity."""
        return not self.errors

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity is Severity.WARNING]

    def to_dict(self) -> dict[str, Any]:
        return {"isValid": self.is_valid, "findings": [f.to_dict() for f in self.findings]}


def validate(bundle: object) -> ValidationReport:
    """Run all consistency checks on *bundle*.

    Checks performed, all of them on every call:

    1. **Shape** (error): the bundle, its sections, their entries and the
       component entries must be mappings; schema and model entries need
       string ``_id`` and ``_name``; type and behavior entries need a string
       ``_id``. Malformed parts are
       reported and left out of the checks below.

    2. **Duplicate identifiers** (error): every ``_id`` of the bundle, schemas,
       models, types, behaviors and component instances must be unique. One
       finding per duplicated value.

    3. **Dangling references** (error / warning): each ``_inherit`` entry must
       be the root marker or the name of a schema (error). A model without a
       schema of the same name, a component type without a schema, and a
       behavior attached to an unknown component are warnings.

    4. **Circular inheritance** (error): the first cycle found in each
       connected group of schemas.

    5. **Method signatures** (error): in a model member carrying the ``=>``
       key, the return type and all parameter types must be strings.

    6. **Member consistency** (warning): a schema and the model of the same
       name must declare the same members, and schema member kinds must be
       known.

    7. **Version** (warning): the bundle version should look like a semantic
       version.

    Args:
        bundle: A :class:`Bundle`, a mapping in the flat runtime layout, or
            any other object.

    Returns:
        A :class:`ValidationReport`. ``is_valid`` is False exactly when an
        error finding was produced.
    """
    if isinstance(bundle, Bundle):
        try:
            bundle = bundle_to_dict(bundle)
        except (AttributeError, TypeError, ValueError) as exc:
            return ValidationReport([_error(f"Bundle could not be flattened: {exc}")])
    if not isinstance(bundle, Mapping):
        return ValidationReport([_error(f"Bundle must be a mapping, got {type(bundle).__name__}.")])

    findings: list[Finding] = []
    view = _BundleView.read(bundle, findings)

    findings.extend(_check_duplicate_ids(view))
    findings.extend(_check_references(view))
    findings.extend(_check_inheritance_cycles(view))
    findings.extend(_check_method_signatures(view))
    findings.extend(_check_member_consistency(view))
    findings.extend(_check_version(bundle))

    return ValidationReport(findings)


def is_semver(version: str) -> bool:
    """Return True if *version* is shaped like ``MAJOR.MINOR.PATCH[-pre][+build]``."""
    return _SEMVER.match(version) is not None


# ################
# Implementation
# ################

_SEMVER = re.compile(r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.-]+)?(\+[a-zA-Z0-9.-]+)?$")

_ID_SECTIONS = ("schemas", "models", "types", "behaviors")


def _error(message: str) -> Finding:
    return Finding(message, Severity.ERROR)


def _warning(message: str) -> Finding:
    return Finding(message, Severity.WARNING)


def _str(entry: Mapping[Any, Any], key: str) -> str | None:
    value = entry.get(key)
    return value if isinstance(value, str) else None


@dataclass
class _BundleView:
    """The well-formed parts of a bundle, as ``(key, entry)`` pairs per section."""

    bundle_id: str | None
    sections: dict[str, list[tuple[str, Mapping[Any, Any]]]]
    components: list[tuple[str, Mapping[Any, Any]]]

    @classmethod
    def read(cls, bundle: Mapping[Any, Any], findings: list[Finding]) -> _BundleView:
        sections: dict[str, list[tuple[str, Mapping[Any, Any]]]] = {}
        for name in _ID_SECTIONS:
            required = ("_id", "_name") if name in ("schemas", "models") else ("_id",)
            sections[name] = _read_section(bundle, name, required, findings)
        components: list[tuple[str, Mapping[Any, Any]]] = []
        for key, entry in _read_mapping(bundle, "components", findings):
            if isinstance(entry, Mapping):
                components.append((key, entry))
            else:
                findings.append(_error(f"Entry '{key}' in 'components' must be a mapping, got {type(entry).__name__}."))
        return cls(bundle_id=_str(bundle, "_id"), sections=sections, components=components)

    def names(self, section: str) -> list[str]:
        return [entry["_name"] for _, entry in self.sections[section]]


def _read_mapping(bundle: Mapping[Any, Any], section: str, findings: list[Finding]) -> list[tuple[str, Any]]:
    value = bundle.get(section)
    if value is None:
        return []
    if not isinstance(value, Mapping):
        findings.append(_error(f"Section '{section}' must be a mapping, got {type(value).__name__}."))
        return []
    return [(str(key), entry) for key, entry in value.items()]


def _read_section(
    bundle: Mapping[Any, Any],
    section: str,
    required: tuple[str, ...],
    findings: list[Finding],
) -> list[tuple[str, Mapping[Any, Any]]]:
    result: list[tuple[str, Mapping[Any, Any]]] = []
    for key, entry in _read_mapping(bundle, section, findings):
        if not isinstance(entry, Mapping):
            findings.append(_error(f"Entry '{key}' in '{section}' must be a mapping, got {type(entry).__name__}."))
            continue
        missing = [k for k in required if _str(entry, k) is None]
        if missing:
            keys = ", ".join(f"'{k}'" for k in missing)
            findings.append(_error(f"Entry '{key}' in '{section}' lacks a string {keys}."))
            continue
        result.append((key, entry))
    return result


def _parents(schema: Mapping[Any, Any]) -> list[Any] | None:
    """Return the inheritance list of *schema*, [] if absent, or None if it is not a list."""
    parents = schema.get("_inherit")
    if parents is None:
        return []
    return parents if isinstance(parents, list) else None


def _check_duplicate_ids(view: _BundleView) -> list[Finding]:
    """Return one error per identifier used by more than one entry."""
    owners: dict[str, list[str]] = {}
    if view.bundle_id is not None:
        owners[view.bundle_id] = ["the bundle"]
    for section in _ID_SECTIONS:
        for key, entry in view.sections[section]:
            owners.setdefault(entry["_id"], []).append(f"{section}['{key}']")
    for type_name, instances in view.components:
        for instance_key, instance in instances.items():
            if isinstance(instance, Mapping) and isinstance(instance.get("_id"), str):
                owners.setdefault(instance["_id"], []).append(f"components['{type_name}']['{instance_key}']")

    return [
        _error(f"Duplicate identifier '{ident}' used by {', '.join(where)}.")
        for ident, where in owners.items()
        if len(where) > 1
    ]


def _check_references(view: _BundleView) -> list[Finding]:
    """Return errors for dangling inheritance and warnings for orphaned entries."""
    findings: list[Finding] = []
    schema_names = set(view.names("schemas"))

    for _, schema in view.sections["schemas"]:
        name = schema["_name"]
        parents = _parents(schema)
        if parents is None:
            findings.append(_error(f"Schema '{name}' has a malformed '_inherit' (expected a list)."))
            continue
        for parent in parents:
            if not isinstance(parent, str):
                findings.append(_error(f"Schema '{name}' has a non-string '_inherit' entry {parent!r}."))
            elif parent != ROOT_MARKER and parent not in schema_names:
                findings.append(_error(f"Schema '{name}' inherits from non-existent schema '{parent}'."))

    for model_name in view.names("models"):
        if model_name not in schema_names:
            findings.append(_warning(f"Model '{model_name}' has no corresponding schema."))

    for type_name, _ in view.components:
        if type_name not in schema_names:
            findings.append(_warning(f"Component type '{type_name}' has no corresponding schema."))

    for key, behavior in view.sections["behaviors"]:
        component = behavior.get("component")
        if not isinstance(component, str) or (component != view.bundle_id and component not in schema_names):
            findings.append(_warning(f"Behavior '{key}' references non-existent component {component!r}."))

    return findings


def _inheritance_graph(view: _BundleView) -> dict[str, list[str]]:
    graph: dict[str, list[str]] = {}
    for _, schema in view.sections["schemas"]:
        parents = _parents(schema)
        edges = graph.setdefault(schema["_name"], [])
        if parents is None:
            continue
        for parent in parents:
            if isinstance(parent, str) and parent != ROOT_MARKER and parent not in edges:
                edges.append(parent)
    return graph


def _connected_groups(graph: dict[str, list[str]]) -> list[list[str]]:
    """Split the nodes of *graph* into weakly connected groups, in first-seen order."""
    neighbours: dict[str, set[str]] = {}
    for node, targets in graph.items():
        neighbours.setdefault(node, set())
        for target in targets:
            neighbours[node].add(target)
            neighbours.setdefault(target, set()).add(node)

    position = {node: index for index, node in enumerate(neighbours)}
    groups: list[list[str]] = []
    assigned: set[str] = set()
    for start in neighbours:
        if start in assigned:
            continue
        group: list[str] = []
        stack = [start]
        assigned.add(start)
        while stack:
            node = stack.pop()
            group.append(node)
            for other in neighbours[node]:
                if other not in assigned:
                    assigned.add(other)
                    stack.append(other)
        group.sort(key=position.__getitem__)
        groups.append(group)
    return groups


def _detect_cycle(graph: dict[str, list[str]], nodes: list[str]) -> list[str] | None:
    """Detect a cycle reachable from *nodes* using an iterative three-colour DFS.

    Returns:
        The cycle with its start node repeated at the end (e.g.
        ``["A", "B", "A"]``), or ``None`` if there is none.
    """
    WHITE, GREY, BLACK = 0, 1, 2
    color: dict[str, int] = {}

    for root in nodes:
        if color.get(root, WHITE) != WHITE:
            continue
        path: list[str] = [root]
        color[root] = GREY
        stack = [iter(graph.get(root, []))]
        while stack:
            neighbour = next(stack[-1], None)
            if neighbour is None:
                stack.pop()
                color[path.pop()] = BLACK
                continue
            state = color.get(neighbour, WHITE)
            if state == GREY:
                return path[path.index(neighbour) :] + [neighbour]
            if state == WHITE:
                color[neighbour] = GREY
                path.append(neighbour)
                stack.append(iter(graph.get(neighbour, [])))
    return None


def _check_inheritance_cycles(view: _BundleView) -> list[Finding]:
    """Return one error per connected group of schemas containing an inheritance cycle."""
    graph = _inheritance_graph(view)
    findings: list[Finding] = []
    for group in _connected_groups(graph):
        cycle = _detect_cycle(graph, group)
        if cycle is not None:
            findings.append(_error(f"Circular inheritance detected: {' -> '.join(cycle)}."))
    return findings


def _check_method_signatures(view: _BundleView) -> list[Finding]:
    findings: list[Finding] = []
    for _, model in view.sections["models"]:
        name = model["_name"]
        for member, signature in model.items():
            if member in RESERVED_KEYS or not isinstance(signature, Mapping) or RETURN_KEY not in signature:
                continue
            if not isinstance(signature[RETURN_KEY], str):
                findings.append(_error(f"Method '{member}' in model '{name}' has an invalid return type."))
            for param, param_type in signature.items():
                if param != RETURN_KEY and not isinstance(param_type, str):
                    findings.append(
                        _error(f"Method '{member}' in model '{name}' has an invalid type for parameter '{param}'.")
                    )
    return findings


def _check_member_consistency(view: _BundleView) -> list[Finding]:
    findings: list[Finding] = []
    known_kinds = {k.value for k in MemberKind}
    models: dict[str, Mapping[Any, Any]] = {}
    for _, model in view.sections["models"]:
        models.setdefault(model["_name"], model)

    for _, schema in view.sections["schemas"]:
        name = schema["_name"]
        schema_members = {k for k in schema if k not in RESERVED_KEYS}
        for member in sorted(schema_members, key=str):
            kind = schema[member]
            if not isinstance(kind, str) or kind not in known_kinds:
                findings.append(_warning(f"Schema '{name}' member '{member}' has unknown kind {kind!r}."))
        model = models.get(name)
        if model is None:
            continue
        model_members = {k for k in model if k not in RESERVED_KEYS}
        only_schema = sorted(map(str, schema_members - model_members))
        only_model = sorted(map(str, model_members - schema_members))
        if only_schema:
            findings.append(_warning(f"Schema '{name}' members missing from its model: {', '.join(only_schema)}."))
        if only_model:
            findings.append(_warning(f"Model '{name}' members missing from its schema: {', '.join(only_model)}."))
    return findings


def _check_version(bundle: Mapping[Any, Any]) -> list[Finding]:
    if "version" not in bundle:
        return []
    version = bundle["version"]
    if not isinstance(version, str) or not is_semver(version):
        return [_warning(f"Bundle version {version!r} is not a semantic version.")]
    return []
