# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for relationship-derived members and inheritance linearization."""

from msonbundle.bundle import ROOT_MARKER, MemberKind
from msonbundle.config import ReverseNaming
from msonbundle.model import Attribute, Entity, Method, MultiplicityPair, Relationship, RelationshipKind
from msonbundle.transform.naming import NamingPolicy
from msonbundle.transform.relationships import (
    RelationshipMember,
    resolve_forward_properties,
    resolve_inheritance,
    resolve_relationship_members,
    resolve_reverse_properties,
)

# ###############
# Test Helpers
# ###############


def _rel(
    rel_id: str,
    source: str,
    target: str,
    kind: RelationshipKind = RelationshipKind.ASSOCIATION,
    mult: tuple[str | None, str | None] | None = None,
    name: str | None = None,
) -> Relationship:
    multiplicity = MultiplicityPair(source=mult[0], target=mult[1]) if mult else None
    return Relationship(id=rel_id, source=source, target=target, kind=kind, multiplicity=multiplicity, name=name)


def _names(members: list[RelationshipMember]) -> dict[str, MemberKind]:
    return {m.name: m.kind for m in members}


# ###############
# Reverse members
# ###############


class TestReverseProperties:
    def test_student_course_reverse_on_course(self) -> None:
        student = Entity(id="student", name="Student", attributes=[Attribute(name="courses", type="Course")])
        course = Entity(id="course", name="Course")
        rels = [_rel("r1", "student", "course", mult=("1", "0..*"), name="enrolls in")]

        reverse = resolve_reverse_properties(course, rels, [student, course])

        assert reverse == [RelationshipMember("enrollsInOf", MemberKind.LINK, "Student", "r1")]

    def test_kind_follows_source_side(self) -> None:
        person = Entity(id="person", name="Person")
        company = Entity(id="company", name="Company")
        rels = [_rel("r1", "person", "company", mult=("0..*", "1"), name="employer")]

        reverse = resolve_reverse_properties(company, rels, [person, company])

        assert _names(reverse) == {"employerOf": MemberKind.COLLECTION}

    def test_source_name_policy(self) -> None:
        person = Entity(id="person", name="Person")
        company = Entity(id="company", name="Company")
        rels = [_rel("r1", "person", "company", mult=("0..*", "1"), name="employer")]
        policy = NamingPolicy(reverse_naming=ReverseNaming.SOURCE_NAME)

        reverse = resolve_reverse_properties(company, rels, [person, company], policy)

        assert _names(reverse) == {"persons": MemberKind.COLLECTION}

    def test_unnamed_relationship_uses_source_name(self) -> None:
        order = Entity(id="order", name="Order")
        item = Entity(id="item", name="LineItem")
        rels = [_rel("r1", "order", "item", kind=RelationshipKind.COMPOSITION)]

        assert _names(resolve_reverse_properties(item, rels, [order, item])) == {"order": MemberKind.LINK}

    def test_declared_attribute_with_same_name_wins(self) -> None:
        person = Entity(id="person", name="Person")
        company = Entity(id="company", name="Company", attributes=[Attribute(name="persons", type="string")])
        rels = [_rel("r1", "person", "company", mult=("0..*", "1"))]

        assert resolve_reverse_properties(company, rels, [person, company]) == []

    def test_declared_method_with_same_name_wins(self) -> None:
        person = Entity(id="person", name="Person")
        company = Entity(id="company", name="Company", methods=[Method(name="person")])
        rels = [_rel("r1", "person", "company")]

        assert resolve_reverse_properties(company, rels, [person, company]) == []

    def test_attributes_referencing_each_other_express_unnamed_relationship(self) -> None:
        """Both sides already declare the relationship as attributes: nothing is synthesized."""
        student = Entity(id="student", name="Student", attributes=[Attribute(name="courses", type="Course")])
        course = Entity(id="course", name="Course", attributes=[Attribute(name="students", type="Student")])
        rels = [_rel("r1", "student", "course", mult=("0..*", "0..*"))]

        assert resolve_reverse_properties(course, rels, [student, course]) == []
        assert resolve_forward_properties(student, rels, [student, course]) == []

    def test_unrelated_attribute_typed_as_source_keeps_reverse_member(self) -> None:
        student = Entity(id="student", name="Student")
        course = Entity(id="course", name="Course", attributes=[Attribute(name="lead", type="Student")])
        rels = [_rel("r1", "student", "course", mult=("0..*", "0..*"), name="enrolls in")]

        reverse = resolve_reverse_properties(course, rels, [student, course])

        assert reverse == [RelationshipMember("enrollsInOf", MemberKind.COLLECTION, "Student", "r1")]

    def test_non_structural_relationships_yield_nothing(self) -> None:
        a = Entity(id="a", name="A")
        b = Entity(id="b", name="B")
        rels = [
            _rel("r1", "a", "b", kind=RelationshipKind.DEPENDENCY),
            _rel("r2", "a", "b", kind=RelationshipKind.INHERITANCE),
        ]
        assert resolve_reverse_properties(b, rels, [a, b]) == []
        assert resolve_forward_properties(a, rels, [a, b]) == []


# ###############
# Forward members
# ###############


class TestForwardProperties:
    def test_named_forward_member(self) -> None:
        person = Entity(id="person", name="Person")
        company = Entity(id="company", name="Company")
        rels = [_rel("r1", "person", "company", mult=("0..*", "1"), name="employer")]

        assert _names(resolve_forward_properties(person, rels, [person, company])) == {"employer": MemberKind.LINK}

    def test_unnamed_forward_collection_is_pluralized(self) -> None:
        order = Entity(id="order", name="Order")
        item = Entity(id="item", name="LineItem")
        rels = [_rel("r1", "order", "item", kind=RelationshipKind.AGGREGATION, mult=("1", "1..*"))]

        assert _names(resolve_forward_properties(order, rels, [order, item])) == {"lineItems": MemberKind.COLLECTION}

    def test_unknown_target_id_falls_back_to_raw_id(self) -> None:
        order = Entity(id="order", name="Order")
        rels = [_rel("r1", "order", "Ghost")]

        members = resolve_forward_properties(order, rels, [order])

        assert members == [RelationshipMember("ghost", MemberKind.LINK, "Ghost", "r1")]

    def test_unrelated_attribute_typed_as_target_keeps_named_member(self) -> None:
        student = Entity(id="student", name="Student", attributes=[Attribute(name="favorite", type="Course")])
        course = Entity(id="course", name="Course")
        rels = [_rel("r1", "student", "course", mult=("1", "0..*"), name="enrolls in")]

        members = resolve_forward_properties(student, rels, [student, course])

        assert members == [RelationshipMember("enrollsIn", MemberKind.COLLECTION, "Course", "r1")]

    def test_attribute_typed_as_target_expresses_unnamed_relationship(self) -> None:
        order = Entity(id="order", name="Order", attributes=[Attribute(name="items", type="LineItem")])
        item = Entity(id="item", name="LineItem")
        rels = [_rel("r1", "order", "item", kind=RelationshipKind.COMPOSITION, mult=("1", "0..*"))]

        assert resolve_forward_properties(order, rels, [order, item]) == []


class TestSelfReferential:
    def test_tree_node_children(self) -> None:
        node = Entity(id="treenode", name="TreeNode")
        rels = [_rel("r1", "treenode", "treenode", mult=("1", "0..*"), name="children")]

        members = resolve_relationship_members(node, rels, [node])

        assert members == [
            RelationshipMember("children", MemberKind.COLLECTION, "TreeNode", "r1"),
            RelationshipMember("childrenOf", MemberKind.LINK, "TreeNode", "r1"),
        ]

    def test_first_name_wins_between_forward_and_reverse(self) -> None:
        """With source-name naming a self loop derives the same name twice; the forward one stays."""
        node = Entity(id="n", name="Node")
        rels = [_rel("r1", "n", "n")]
        policy = NamingPolicy(reverse_naming=ReverseNaming.SOURCE_NAME)

        members = resolve_relationship_members(node, rels, [node], policy)

        assert [m.name for m in members] == ["node"]


# ###############
# Inheritance
# ###############


class TestInheritance:
    def test_no_parents_gives_root_only(self) -> None:
        assert resolve_inheritance(Entity(id="a", name="A"), [], []) == [ROOT_MARKER]

    def test_implementations_in_declaration_order(self) -> None:
        dog = Entity(id="dog", name="Dog")
        ia = Entity(id="ia", name="InterfaceA")
        ib = Entity(id="ib", name="InterfaceB")
        rels = [
            _rel("r1", "dog", "ia", kind=RelationshipKind.IMPLEMENTATION),
            _rel("r2", "dog", "ib", kind=RelationshipKind.IMPLEMENTATION),
        ]
        assert resolve_inheritance(dog, rels, [dog, ia, ib]) == [ROOT_MARKER, "InterfaceA", "InterfaceB"]

    def test_inheritance_before_implementation(self) -> None:
        dog = Entity(id="dog", name="Dog")
        animal = Entity(id="animal", name="Animal")
        pet = Entity(id="pet", name="Pet")
        rels = [
            _rel("r1", "dog", "pet", kind=RelationshipKind.IMPLEMENTATION),
            _rel("r2", "dog", "animal", kind=RelationshipKind.INHERITANCE),
        ]
        assert resolve_inheritance(dog, rels, [dog, animal, pet]) == [ROOT_MARKER, "Animal", "Pet"]

    def test_duplicates_are_removed(self) -> None:
        dog = Entity(id="dog", name="Dog")
        animal = Entity(id="animal", name="Animal")
        rels = [
            _rel("r1", "dog", "animal", kind=RelationshipKind.INHERITANCE),
            _rel("r2", "dog", "animal", kind=RelationshipKind.INHERITANCE),
            _rel("r3", "dog", "animal", kind=RelationshipKind.IMPLEMENTATION),
        ]
        assert resolve_inheritance(dog, rels, [dog, animal]) == [ROOT_MARKER, "Animal"]

    def test_own_name_and_root_marker_are_excluded(self) -> None:
        weird = Entity(id="w", name="Weird")
        root = Entity(id="root", name=ROOT_MARKER)
        rels = [
            _rel("r1", "w", "w", kind=RelationshipKind.INHERITANCE),
            _rel("r2", "w", "root", kind=RelationshipKind.INHERITANCE),
        ]
        assert resolve_inheritance(weird, rels, [weird, root]) == [ROOT_MARKER]

    def test_only_outgoing_edges_count(self) -> None:
        animal = Entity(id="animal", name="Animal")
        dog = Entity(id="dog", name="Dog")
        rels = [_rel("r1", "dog", "animal", kind=RelationshipKind.INHERITANCE)]
        assert resolve_inheritance(animal, rels, [animal, dog]) == [ROOT_MARKER]
