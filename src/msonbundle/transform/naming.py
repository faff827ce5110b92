# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Naming rules for members synthesized from relationships.

The rules are deliberately mechanical:

* A declared relationship name is split on every non-alphanumeric character
  and joined in lowerCamelCase: ``"enrolls in"`` becomes ``enrollsIn``.
* A name derived from an entity lowers the entity name's first character:
  ``TreeNode`` becomes ``treeNode``. Collection members append the plural
  suffix (``treeNodes``); no irregular plurals are attempted.
* The forward member (on the declaring side) uses the declared name when one
  is given, otherwise the target entity's derived name.
* The reverse member (on the opposite side) follows :class:`ReverseNaming`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from msonbundle.config.loader import ReverseNaming, TransformConfig

# ###############
# Public Interface
# ###############

# Appended to a declared name to describe the relationship from the other end.
INVERSE_SUFFIX = "Of"


def to_identifier(text: str) -> str:
    """Join the alphanumeric words of *text* in lowerCamelCase.

    Returns an empty string when *text* has no alphanumeric characters.
    """
    words = [w for w in _WORD_SPLIT.split(text) if w]
    if not words:
        return ""
    head, *tail = words
    return _lower_first(head) + "".join(_upper_first(w) for w in tail)


@dataclass(frozen=True)
class NamingPolicy:
    """Names forward and reverse relationship members.

    Attributes:
        reverse_naming: Rule used for the reverse member.
        plural_suffix: Suffix appended to derived collection names.
    """

    reverse_naming: ReverseNaming = ReverseNaming.DECLARED
    plural_suffix: str = "s"

    @classmethod
    def from_config(cls, config: TransformConfig) -> NamingPolicy:
        return cls(reverse_naming=config.reverse_naming, plural_suffix=config.plural_suffix)

    def entity_member_name(self, entity_name: str, collection: bool) -> str:
        """Derive a member name from an entity name."""
        base = to_identifier(entity_name) or entity_name
        return base + self.plural_suffix if collection else base

    def forward_name(self, declared_name: str | None, target_name: str, collection: bool) -> str:
        """Name of the member added to the declaring (source) entity."""
        declared = to_identifier(declared_name) if declared_name else ""
        if declared:
            return declared
        return self.entity_member_name(target_name, collection)

    def reverse_name(self, declared_name: str | None, source_name: str, collection: bool) -> str:
        """Name of the member implied on the opposite (target) entity."""
        if self.reverse_naming is ReverseNaming.DECLARED and declared_name:
            declared = to_identifier(declared_name)
            if declared:
                return declared + INVERSE_SUFFIX
        return self.entity_member_name(source_name, collection)


# ################
# Implementation
# ################

_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")


def _lower_first(word: str) -> str:
    return word[:1].lower() + word[1:]


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]
