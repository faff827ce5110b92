# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy for msonbundle."""


class MsonBundleError(Exception):
    """Base class for all errors raised by msonbundle."""


class ConfigError(MsonBundleError):
    """Raised when a transform configuration file is invalid or cannot be loaded."""


class ArtifactError(MsonBundleError):
    """Raised when bundle text cannot be decoded."""
