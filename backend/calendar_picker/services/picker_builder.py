from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..domain.picker import PickerConfig
from ..errors import ProviderNotFound
from ..ports.picker import PickerProvider

logger = logging.getLogger(__name__)


@dataclass
class Picker:
    config: PickerConfig
    providers: List[PickerProvider]
    current_provider: Optional[PickerProvider]

    def get_menu(self) -> List[Any]:
        return [p.create_menu_item(self.config) for p in self.providers]

    def get_current_url(self) -> str:
        if self.current_provider is None:
            return ""
        return self.current_provider.get_url(self.config)


class PickerBuilder:
    """Registry of picker providers; composes the ones matching a context."""

    def __init__(self, providers: Iterable[PickerProvider] = ()):
        self._providers: Dict[str, PickerProvider] = {}
        for p in providers:
            self.add_provider(p)

    def add_provider(self, provider: PickerProvider) -> None:
        self._providers[provider.get_name()] = provider

    def get_provider(self, name: str) -> PickerProvider:
        try:
            return self._providers[name]
        except KeyError:
            raise ProviderNotFound(name)

    @property
    def providers(self) -> List[PickerProvider]:
        return list(self._providers.values())

    def _matching(self, context: str, allowed: Optional[Iterable[str]] = None) -> List[PickerProvider]:
        allowed_set = set(allowed) if allowed is not None else None
        return [
            p for p in self._providers.values()
            if (allowed_set is None or p.get_name() in allowed_set) and p.supports_context(context)
        ]

    def supports_context(self, context: str, allowed: Optional[Iterable[str]] = None) -> bool:
        return bool(self._matching(context, allowed))

    def create_picker(self, config: PickerConfig) -> Optional[Picker]:
        providers = self._matching(config.context)
        if not providers:
            logger.debug("no picker provider supports context %r", config.context)
            return None
        if not config.current:
            chosen = next((p for p in providers if p.supports_value(config)), providers[0])
            config = config.clone_for_current(chosen.get_name())
        current = next((p for p in providers if p.is_current(config)), None)
        logger.debug("picker for context %r uses provider %s", config.context, config.current)
        return Picker(config=config, providers=providers, current_provider=current)

    def get_url(self, context: str, extras: Optional[Dict[str, Any]] = None, value: str = "") -> str:
        picker = self.create_picker(PickerConfig(context, dict(extras or {}), value))
        if picker is None:
            return ""
        return picker.get_current_url()
