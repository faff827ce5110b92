# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""MSON object models to runtime component bundles, plus bundle validation."""

from msonbundle.errors import ArtifactError, ConfigError, MsonBundleError
from msonbundle.transform.assembler import assemble_bundle
from msonbundle.validation.checks import validate

__all__ = [
    "ArtifactError",
    "ConfigError",
    "MsonBundleError",
    "assemble_bundle",
    "validate",
]
