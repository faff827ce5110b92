# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime bundle representation and its JSON encoding."""

from msonbundle.bundle.artifact import bundle_from_dict, bundle_to_dict, deserialize, serialize
from msonbundle.bundle.entries import (
    DEFAULT_VERSION,
    RESERVED_KEYS,
    RETURN_KEY,
    ROOT_MARKER,
    Bundle,
    MemberKind,
    ModelEntry,
    SchemaEntry,
    TypeExpression,
)

__all__ = [
    "DEFAULT_VERSION",
    "RESERVED_KEYS",
    "RETURN_KEY",
    "ROOT_MARKER",
    "Bundle",
    "MemberKind",
    "ModelEntry",
    "SchemaEntry",
    "TypeExpression",
    "serialize",
    "deserialize",
    "bundle_to_dict",
    "bundle_from_dict",
]
