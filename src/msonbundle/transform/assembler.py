# Copyright 2026 msonbundle Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of complete runtime bundles from MSON models."""

from __future__ import annotations

import logging

from msonbundle.bundle.entries import Bundle
from msonbundle.config.loader import TransformConfig
from msonbundle.model.entities import MsonModel
from msonbundle.transform.ids import IdGenerator
from msonbundle.transform.naming import NamingPolicy
from msonbundle.transform.schemas import entity_to_schema
from msonbundle.transform.signatures import entity_to_model

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

BUNDLE_ID_PREFIX = "sys"


def assemble_bundle(
    model: MsonModel,
    version: str | None = None,
    *,
    config: TransformConfig | None = None,
    ids: IdGenerator | None = None,
) -> Bundle:
    """Transform a validated MSON model into a runtime bundle.

    Every entity contributes one schema entry, one model entry and one empty
    component placeholder, all keyed by the entity name. The ``types`` and
    ``behaviors`` sections are left empty. The model itself is not modified.

    Args:
        model: The input model. Entity ids must be unique and relationship
            endpoints must name existing entities; this is not re-checked.
        version: Bundle version; ``config.default_version`` when omitted.
        config: Transform settings; defaults apply when omitted.
        ids: Identifier generator; a fresh one per call when omitted.

    Returns:
        A new :class:`Bundle` with freshly generated identifiers.
    """
    config = config or TransformConfig()
    ids = ids or IdGenerator()
    policy = NamingPolicy.from_config(config)

    bundle = Bundle(
        id=ids.next(BUNDLE_ID_PREFIX),
        name=model.name,
        description=model.description or "",
        version=version if version is not None else config.default_version,
        master=True,
    )

    for entity in model.entities:
        schema = entity_to_schema(entity, model.relationships, model.entities, ids=ids, policy=policy)
        model_entry = entity_to_model(entity, model.relationships, model.entities, ids=ids, policy=policy)
        bundle.schemas[entity.name] = schema
        bundle.models[entity.name] = model_entry
        bundle.components[entity.name] = {}

    logger.debug(
        "Assembled bundle '%s' (%s) with %d schemas from model '%s'",
        bundle.name,
        bundle.id,
        len(bundle.schemas),
        model.id,
    )
    return bundle
