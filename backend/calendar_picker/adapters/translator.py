from __future__ import annotations
from typing import Any, Mapping, Optional

from ..config import DEFAULT_MESSAGES
from ..ports.picker import Translator


class CatalogTranslator(Translator):
    """Looks up dotted keys (``MSC.eventPicker``) in a nested message catalog.

    Unknown keys resolve to their last segment, so a missing label shows up as
    ``eventPicker`` instead of failing.
    """

    def __init__(self, messages: Optional[Mapping[str, Any]] = None):
        self.messages = messages if messages is not None else DEFAULT_MESSAGES

    def translate(self, key: str) -> str:
        node: Any = self.messages
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return key.rsplit(".", 1)[-1]
            node = node[part]
        if not isinstance(node, str):
            return key.rsplit(".", 1)[-1]
        return node
