# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Transform configuration for msonbundle."""

from msonbundle.config.loader import (
    ReverseNaming,
    TransformConfig,
    load_transform_config,
    parse_transform_config,
)

__all__ = [
    "ReverseNaming",
    "TransformConfig",
    "load_transform_config",
    "parse_transform_config",
]
