from __future__ import annotations

from typing import Dict, Tuple

from gedcom_lossless.friendly.build_family import build_family
from gedcom_lossless.friendly.build_individual import build_individual
from gedcom_lossless.friendly.build_media import build_media_object
from gedcom_lossless.friendly.build_note import build_note
from gedcom_lossless.friendly.build_repository import build_repository
from gedcom_lossless.friendly.build_source import build_source
from gedcom_lossless.friendly.entities import FriendlyModel
from gedcom_lossless.friendly.utils import DEFAULT_CONTEXT, Builder, BuildContext
from gedcom_lossless.loader.classifier import CanonicalModel
from gedcom_lossless.logging import get_logger

log = get_logger(__name__)

# top-level tag -> (FriendlyModel collection, builder)
RECORD_BUILDERS: Dict[str, Tuple[str, Builder]] = {
    "INDI": ("individuals", build_individual),
    "FAM": ("families", build_family),
    "SOUR": ("sources", build_source),
    "OBJE": ("media", build_media_object),
    "REPO": ("repositories", build_repository),
    "NOTE": ("notes", build_note),
}


def build_friendly_model(
    canonical: CanonicalModel,
    ctx: BuildContext = DEFAULT_CONTEXT,
) -> FriendlyModel:
    """
    Project the canonical records onto typed entities.

    Records whose tag has no builder (SUBM, custom _PLAC records, ...) stay in
    the canonical model only.
    """
    model = FriendlyModel()
    skipped = 0

    for pointer, node in canonical.records.items():
        entry = RECORD_BUILDERS.get(node.tag)
        if entry is None:
            skipped += 1
            continue

        collection, builder = entry
        model.register(collection, pointer, builder(node, ctx))

    log.debug("Friendly model built: %s (skipped=%d)", model.counts(), skipped)
    return model
