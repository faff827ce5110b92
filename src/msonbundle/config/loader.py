# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for transform configuration files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import yaml

from msonbundle.bundle.entries import DEFAULT_VERSION
from msonbundle.errors import ConfigError

# ###############
# Public Interface
# ###############


class ReverseNaming(Enum):
    """How the property synthesized on the target side of a relationship is named.

    ``DECLARED``: a named relationship yields its declared name with the
    ``Of`` suffix (``children`` becomes ``childrenOf``); an unnamed one falls
    back to the source entity's name.

    ``SOURCE_NAME``: always derive the name from the source entity
    (``Person`` becomes ``person``, or ``persons`` for a collection).
    """

    DECLARED = "declared"
    SOURCE_NAME = "source-name"


@dataclass(frozen=True)
class TransformConfig:
    """Settings that shape bundle assembly.

    Attributes:
        default_version: Bundle version used when the caller supplies none.
        reverse_naming: Naming rule for synthesized reverse properties.
        plural_suffix: Suffix appended to derived names of collection members.
    """

    default_version: str = DEFAULT_VERSION
    reverse_naming: ReverseNaming = ReverseNaming.DECLARED
    plural_suffix: str = "s"


def load_transform_config(path: Path) -> TransformConfig:
    """Load and parse a transform configuration file.

    Args:
        path: Path to a YAML file.

    Returns:
        A TransformConfig populated from the file. Keys that are absent keep
        their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Transform config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read transform config file: {exc}") from exc

    return parse_transform_config(text, source_label=str(path))


def parse_transform_config(text: str, source_label: str = "<string>") -> TransformConfig:
    """Parse transform config YAML text.

    An empty document yields the default configuration.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return TransformConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: transform config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    defaults = TransformConfig()
    default_version = _optional_string(data, "default-version", source_label) or defaults.default_version
    plural_suffix = _optional_string(data, "plural-suffix", source_label)
    if plural_suffix is None:
        plural_suffix = defaults.plural_suffix

    reverse_naming = defaults.reverse_naming
    raw_naming = _optional_string(data, "reverse-naming", source_label)
    if raw_naming is not None:
        try:
            reverse_naming = ReverseNaming(raw_naming)
        except ValueError:
            choices = ", ".join(n.value for n in ReverseNaming)
            raise ConfigError(
                f"{source_label}: 'reverse-naming' must be one of {choices}, got {raw_naming!r}"
            ) from None

    return TransformConfig(
        default_version=default_version,
        reverse_naming=reverse_naming,
        plural_suffix=plural_suffix,
    )


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"default-version", "reverse-naming", "plural-suffix"})


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str | None:
    """Extract an optional string field, raising ConfigError if it has another type."""
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value
