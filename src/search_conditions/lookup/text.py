"""Default lookup: fetch labels for entry keys from the search itself."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..exceptions import LookupResolutionError
from .base import DISPLAY_FIELD, LookupResolver

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


def _needs_label(entry: Mapping[str, Any]) -> bool:
    return not entry.get(DISPLAY_FIELD)


class TextLookup(LookupResolver):
    """
    Resolve labels by querying documents whose ``key_field`` matches.

    Only entries without a label are looked up; entries that already
    carry one are returned as copies, untouched.
    """

    def load(self, entries: list[Mapping[str, Any]]) -> list[dict[str, Any]]:
        loaded = [dict(entry) for entry in entries]
        keys = [entry.get("key") for entry in loaded if _needs_label(entry)]
        if not keys:
            return loaded

        labels = self._fetch_labels(keys)
        for entry in loaded:
            if not _needs_label(entry):
                continue
            label = labels.get(str(entry.get("key")))
            if label is None:
                logger.warning(
                    "No %s found for %s=%r (condition %s)",
                    self.label_field,
                    self.key_field,
                    entry.get("key"),
                    self.condition_name,
                )
            entry[DISPLAY_FIELD] = label
        return loaded

    def _fetch_labels(self, keys: list[Any]) -> dict[str, Any]:
        if self.search_context is None:
            raise LookupResolutionError(
                "Text lookup requires a search context to query labels",
                condition_name=self.condition_name,
            )

        from ..condition import Condition

        clause = Condition(name=self.key_field, values=keys).compile()
        logger.debug("Text lookup for %s: %s", self.condition_name, clause)

        labels: dict[str, Any] = {}
        for document in self.search_context.search(clause):
            key = document.get(self.key_field)
            if key is not None:
                labels[str(key)] = document.get(self.label_field)
        return labels
