"""Section normalization.

Turns a raw, possibly stale section map into a complete map holding one
Section per tag, consistent with the current base shape.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..labels import normalize_shape, parse_count, parse_section_tag
from ..topology import default_option, is_active, match_option
from ..value_objects import (
    ALL_SECTION_TAGS,
    NONE_VALUE,
    BaseShape,
    Section,
    SectionTag,
)

logger = logging.getLogger(__name__)


def split_raw_section(raw: Any) -> tuple[Any, Any]:
    """Return the (seater, quantity) pair of a raw section entry."""
    if isinstance(raw, Section):
        return raw.seater_value, raw.quantity
    if isinstance(raw, Mapping):
        seater = raw.get("seater", raw.get("seaterValue", raw.get("option")))
        quantity = raw.get("qty", raw.get("quantity"))
        return seater, quantity
    return raw, None


class SectionNormalizer:
    """Repairs section maps against the shape topology.

    For every tag in the tag universe: inactive tags become an explicit
    ``"none"`` section; active tags keep their raw value when it is legal
    for the shape and otherwise fall back to the shape default. Quantities
    default to 1 and are floored to 1.

    The normalizer never raises and is idempotent.
    """

    def normalize(
        self,
        shape: BaseShape | str,
        raw_sections: Mapping[Any, Any] | None,
    ) -> dict[SectionTag, Section]:
        shape = normalize_shape(shape)
        by_tag: dict[SectionTag, Any] = {}
        for key, value in (raw_sections or {}).items():
            tag = parse_section_tag(key)
            if tag is None:
                logger.debug(f"Ignoring unknown section tag {key!r}")
                continue
            by_tag[tag] = value

        sections: dict[SectionTag, Section] = {}
        for tag in ALL_SECTION_TAGS:
            sections[tag] = self.normalize_section(shape, tag, by_tag.get(tag))
        return sections

    def normalize_section(self, shape: BaseShape | str, tag: SectionTag, raw: Any) -> Section:
        shape = normalize_shape(shape)
        raw_seater, raw_quantity = split_raw_section(raw)

        if not is_active(shape, tag):
            if raw_seater not in (None, NONE_VALUE):
                logger.debug(f"Clearing section {tag.value}: inactive for {shape.value}")
            return Section(tag=tag)

        seater = match_option(shape, tag, raw_seater)
        if seater is None:
            seater = default_option(shape, tag)
            if raw_seater is not None:
                logger.debug(
                    f"Section {tag.value}: {raw_seater!r} not allowed for "
                    f"{shape.value}, using {seater!r}"
                )

        quantity = parse_count(raw_quantity, default=1)
        if quantity < 1:
            logger.debug(f"Section {tag.value}: quantity {raw_quantity!r} floored to 1")
            quantity = 1

        return Section(tag=tag, seater_value=seater, quantity=quantity)


def normalize_sections(
    shape: BaseShape | str, raw_sections: Mapping[Any, Any] | None
) -> dict[SectionTag, Section]:
    """Module-level convenience wrapper around SectionNormalizer."""
    return SectionNormalizer().normalize(shape, raw_sections)
