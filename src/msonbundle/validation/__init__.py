# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for runtime bundles (duplicate ids, dangling refs, cycles)."""

from msonbundle.validation.checks import (
    Finding,
    Severity,
    ValidationReport,
    is_semver,
    validate,
)

__all__ = [
    "Finding",
    "Severity",
    "ValidationReport",
    "is_semver",
    "validate",
]
