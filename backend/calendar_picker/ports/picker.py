from __future__ import annotations
from typing import Protocol, Any, Dict, Optional, runtime_checkable

from ..domain.picker import PickerConfig


class MenuFactory(Protocol):
    """Builds the host representation of a picker menu entry."""

    def create_item(self, name: str, options: Dict[str, Any]) -> Any: ...


class UrlRouter(Protocol):
    def generate(self, name: str, params: Dict[str, Any]) -> str:
        """Return the URL of a named route; must be deterministic for equal input."""
        ...


@runtime_checkable
class BackendUserPrincipal(Protocol):
    def has_access(self, module_key: str, field: str = "modules") -> bool: ...


class Token(Protocol):
    def get_user(self) -> Optional[Any]: ...


class TokenStorage(Protocol):
    def get_token(self) -> Optional[Token]: ...


class Translator(Protocol):
    def translate(self, key: str) -> str:
        """Return the message for a dotted key, or the key itself when unknown."""
        ...


class PickerProvider(Protocol):
    def get_name(self) -> str: ...
    def create_menu_item(self, config: PickerConfig) -> Any: ...
    def get_url(self, config: PickerConfig) -> str: ...
    def get_route_parameters(self, config: Optional[PickerConfig] = None) -> Dict[str, Any]: ...
    def is_current(self, config: PickerConfig) -> bool: ...
    def supports_context(self, context: str) -> bool: ...
    def supports_value(self, config: PickerConfig) -> bool: ...


class DcaPickerProvider(PickerProvider, Protocol):
    def get_dca_table(self) -> str: ...
    def get_dca_attributes(self, config: PickerConfig) -> Dict[str, Any]: ...
    def convert_dca_value(self, config: PickerConfig, value: Any) -> str: ...
