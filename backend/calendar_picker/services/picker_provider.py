"""Picker providers.

A provider contributes one entry to the picker menu and, for DCA providers,
describes how the popup should render the record list of its table and how a
selected record id maps back to a stored value.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from prometheus_client import Counter

from ..config import BACKEND_ROUTE
from ..adapters.translator import CatalogTranslator
from ..domain.insert_tags import EVENT_TABLE, format_event_url, parse_event_url
from ..domain.picker import PickerConfig
from ..errors import PreconditionError, PreconditionReason
from ..ports.picker import BackendUserPrincipal, MenuFactory, TokenStorage, Translator, UrlRouter

logger = logging.getLogger(__name__)

MENU_ITEM_COUNT = Counter(
    "calendar_picker_menu_items_total", "Picker menu items created", ["provider"]
)


class AbstractPickerProvider(ABC):
    """Shared behaviour; subclasses define the name and the route parameters."""

    def __init__(
        self,
        menu_factory: MenuFactory,
        router: UrlRouter,
        translator: Optional[Translator] = None,
    ):
        self.menu_factory = menu_factory
        self.router = router
        self.translator = translator or CatalogTranslator()
        self.token_storage: Optional[TokenStorage] = None

    @abstractmethod
    def get_name(self) -> str: ...

    @abstractmethod
    def get_route_parameters(self, config: Optional[PickerConfig] = None) -> Dict[str, Any]: ...

    @abstractmethod
    def supports_context(self, context: str) -> bool: ...

    @abstractmethod
    def supports_value(self, config: PickerConfig) -> bool: ...

    def set_token_storage(self, token_storage: Optional[TokenStorage]) -> None:
        self.token_storage = token_storage

    def get_url(self, config: PickerConfig) -> str:
        return self._generate_url(config)

    def create_menu_item(self, config: PickerConfig) -> Any:
        name = self.get_name()
        MENU_ITEM_COUNT.labels(provider=name).inc()
        return self.menu_factory.create_item(
            name,
            {
                "label": self.translator.translate(f"MSC.{name}"),
                "linkAttributes": {"class": name},
                "current": self.is_current(config),
                "uri": self._generate_url(config),
            },
        )

    def is_current(self, config: PickerConfig) -> bool:
        return config.current == self.get_name()

    def get_user(self) -> BackendUserPrincipal:
        if self.token_storage is None:
            raise PreconditionError(PreconditionReason.NO_TOKEN_STORAGE)
        token = self.token_storage.get_token()
        if token is None:
            raise PreconditionError(PreconditionReason.NO_TOKEN)
        user = token.get_user()
        if user is None or not isinstance(user, BackendUserPrincipal):
            logger.debug("%s: token user %r is not a back end user", self.get_name(), user)
            raise PreconditionError(PreconditionReason.NO_BACKEND_USER)
        return user

    def _generate_url(self, config: PickerConfig) -> str:
        params = dict(self.get_route_parameters(config))
        params["popup"] = 1
        params["picker"] = config.clone_for_current(self.get_name()).url_encode()
        return self.router.generate(BACKEND_ROUTE, params)


class EventPickerProvider(AbstractPickerProvider):
    """Selects calendar events; values are stored as ``{{event_url::<id>}}``."""

    NAME = "eventPicker"

    def get_name(self) -> str:
        return self.NAME

    def get_route_parameters(self, config: Optional[PickerConfig] = None) -> Dict[str, Any]:
        return {"do": "calendar"}

    def supports_context(self, context: str) -> bool:
        user = self.get_user()
        return context == "link" and user.has_access("calendar", "modules")

    def supports_value(self, config: PickerConfig) -> bool:
        return parse_event_url(config.value) is not None

    def get_dca_table(self) -> str:
        return EVENT_TABLE

    def get_dca_attributes(self, config: PickerConfig) -> Dict[str, Any]:
        attributes: Dict[str, Any] = {"fieldType": "radio"}
        source = config.get_extra("source")
        if source:
            attributes["preserveRecord"] = source
        record_id = parse_event_url(config.value)
        if record_id is not None:
            attributes["value"] = record_id
        return attributes

    def convert_dca_value(self, config: PickerConfig, value: Any) -> str:
        return format_event_url(value)
