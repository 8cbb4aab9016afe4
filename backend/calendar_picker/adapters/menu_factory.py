from __future__ import annotations
from typing import Any, Dict

from ..domain.picker import MenuItem
from ..ports.picker import MenuFactory


class DictMenuFactory(MenuFactory):
    """Turns provider options into ``MenuItem`` objects."""

    def create_item(self, name: str, options: Dict[str, Any]) -> MenuItem:
        return MenuItem(
            name=name,
            label=options.get("label", name),
            link_attributes=dict(options.get("linkAttributes") or {}),
            current=bool(options.get("current", False)),
            uri=options.get("uri"),
        )
