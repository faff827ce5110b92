# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for bundle assembly and identifier generation."""

import itertools

import pytest

from msonbundle.bundle import DEFAULT_VERSION, ROOT_MARKER, Bundle, MemberKind
from msonbundle.config import ReverseNaming, TransformConfig
from msonbundle.model import (
    Attribute,
    Entity,
    EntityKind,
    Method,
    MsonModel,
    MultiplicityPair,
    Parameter,
    Relationship,
    RelationshipKind,
)
from msonbundle.transform import IdGenerator, assemble_bundle
from msonbundle.validation import validate

# ###############
# Test Helpers
# ###############


def _university() -> MsonModel:
    return MsonModel(
        id="uni",
        name="University",
        description="Students and the courses they take",
        entities=[
            Entity(
                id="person",
                name="Person",
                kind=EntityKind.INTERFACE,
                attributes=[Attribute(name="name", type="string")],
            ),
            Entity(
                id="student",
                name="Student",
                attributes=[Attribute(name="courses", type="Course"), Attribute(name="enrolledOn", type="date")],
                methods=[Method(name="enroll", parameters=[Parameter(name="course", type="Course")])],
            ),
            Entity(id="course", name="Course", attributes=[Attribute(name="title", type="string")]),
            Entity(id="room", name="Room"),
        ],
        relationships=[
            Relationship(id="r1", source="student", target="person", kind=RelationshipKind.IMPLEMENTATION),
            Relationship(
                id="r2",
                source="student",
                target="course",
                kind=RelationshipKind.ASSOCIATION,
                multiplicity=MultiplicityPair(source="1", target="0..*"),
                name="enrolls in",
            ),
            Relationship(
                id="r3",
                source="course",
                target="room",
                kind=RelationshipKind.AGGREGATION,
                multiplicity=MultiplicityPair(source="0..*", target="1"),
            ),
            Relationship(id="r4", source="course", target="room", kind=RelationshipKind.DEPENDENCY),
        ],
    )


def _all_ids(bundle: Bundle) -> list[str]:
    return [bundle.id] + [s.id for s in bundle.schemas.values()] + [m.id for m in bundle.models.values()]


# ###############
# Assembly
# ###############


class TestAssembleBundle:
    def test_one_entry_per_entity_keyed_by_name(self) -> None:
        bundle = assemble_bundle(_university())
        names = ["Person", "Student", "Course", "Room"]

        assert list(bundle.schemas) == names
        assert list(bundle.models) == names
        assert list(bundle.components) == names
        assert all(bundle.schemas[n].name == n for n in names)
        assert all(bundle.models[n].name == n for n in names)
        assert all(c == {} for c in bundle.components.values())

    def test_identity_metadata(self) -> None:
        bundle = assemble_bundle(_university())

        assert bundle.name == "University"
        assert bundle.description == "Students and the courses they take"
        assert bundle.version == DEFAULT_VERSION == "0.0.1"
        assert bundle.master is True
        assert bundle.id.startswith("sys")

    def test_reserved_sections_are_empty(self) -> None:
        bundle = assemble_bundle(_university())
        assert bundle.types == {}
        assert bundle.behaviors == {}

    def test_version_override(self) -> None:
        assert assemble_bundle(_university(), version="2.0.0").version == "2.0.0"

    def test_config_default_version(self) -> None:
        config = TransformConfig(default_version="1.4.2")
        assert assemble_bundle(_university(), config=config).version == "1.4.2"
        assert assemble_bundle(_university(), "3.0.0", config=config).version == "3.0.0"

    def test_missing_description_becomes_empty(self) -> None:
        model = MsonModel(id="m", name="Bare", entities=[Entity(id="a", name="A")])
        assert assemble_bundle(model).description == ""

    def test_empty_model(self) -> None:
        bundle = assemble_bundle(MsonModel(id="m", name="Empty"))
        assert bundle.schemas == {}
        assert bundle.models == {}
        assert bundle.components == {}

    def test_entry_contents(self) -> None:
        bundle = assemble_bundle(_university())

        student = bundle.schemas["Student"]
        assert student.inherit == [ROOT_MARKER, "Person"]
        assert student.members["courses"] is MemberKind.COLLECTION
        assert student.members["enrolledOn"] is MemberKind.PROPERTY
        assert student.members["enroll"] is MemberKind.METHOD

        course = bundle.schemas["Course"]
        assert course.members["enrollsInOf"] is MemberKind.LINK
        assert course.members["room"] is MemberKind.LINK
        assert bundle.models["Course"].members["room"] == "Room"

        room = bundle.schemas["Room"]
        assert room.members == {"courses": MemberKind.COLLECTION}
        assert bundle.models["Room"].members == {"courses": ["Course"]}

    def test_reverse_naming_from_config(self) -> None:
        config = TransformConfig(reverse_naming=ReverseNaming.SOURCE_NAME)
        bundle = assemble_bundle(_university(), config=config)
        assert bundle.schemas["Course"].members["student"] is MemberKind.LINK
        assert bundle.models["Course"].members["student"] == "Student"

    def test_identifiers_unique_within_bundle(self) -> None:
        ids = _all_ids(assemble_bundle(_university()))
        assert len(ids) == len(set(ids))

    def test_fresh_identifiers_per_call(self) -> None:
        model = _university()
        first = assemble_bundle(model)
        second = assemble_bundle(model)
        assert first.id != second.id
        assert set(_all_ids(first)).isdisjoint(_all_ids(second))

    def test_structure_is_deterministic(self) -> None:
        model = _university()
        first = assemble_bundle(model)
        second = assemble_bundle(model)
        for name in first.schemas:
            assert first.schemas[name].inherit == second.schemas[name].inherit
            assert first.schemas[name].members == second.schemas[name].members
            assert first.models[name].members == second.models[name].members

    def test_input_is_not_mutated(self) -> None:
        model = _university()
        before = model.model_dump()
        assemble_bundle(model)
        assert model.model_dump() == before

    def test_assembled_bundle_validates_cleanly(self) -> None:
        report = validate(assemble_bundle(_university()))
        assert report.is_valid
        assert report.findings == []


# ###############
# Identifier generation
# ###############


class TestIdGenerator:
    def test_prefix_is_applied(self) -> None:
        assert IdGenerator(lambda: "abc").next("s") == "sabc"

    def test_collisions_are_retried(self) -> None:
        tokens = iter(["a", "a", "a", "b"])
        ids = IdGenerator(lambda: next(tokens))
        assert ids.next("x") == "xa"
        assert ids.next("x") == "xb"
        assert ids.issued == frozenset({"xa", "xb"})

    def test_same_token_different_prefix_is_unique(self) -> None:
        ids = IdGenerator(lambda: "t")
        assert {ids.next("s"), ids.next("m")} == {"st", "mt"}

    def test_incrementing_source_through_assembler(self) -> None:
        counter = itertools.count()
        ids = IdGenerator(lambda: str(next(counter)))
        bundle = assemble_bundle(_university(), ids=ids)
        assert bundle.id == "sys0"
        assert bundle.schemas["Person"].id == "s1"
        assert bundle.models["Person"].id == "m2"

    def test_default_generator_is_random(self) -> None:
        ids = IdGenerator()
        assert len({ids.next() for _ in range(50)}) == 50


@pytest.mark.parametrize("version", [None, "0.0.1", "10.2.3-beta.1"])
def test_validate_transform_property(version: str | None) -> None:
    """Any valid input model transforms into a bundle free of errors."""
    assert validate(assemble_bundle(_university(), version)).is_valid
