from fastapi import Header, Request

from ..adapters.menu_factory import DictMenuFactory
from ..adapters.token_storage import BearerTokenStorage
from ..adapters.translator import CatalogTranslator
from ..adapters.url_router import FastAPIUrlRouter
from ..errors import UnauthorizedError
from ..services.picker_builder import PickerBuilder
from ..services.picker_provider import EventPickerProvider


def get_token_storage(authorization: str | None = Header(None)) -> BearerTokenStorage:
    storage = BearerTokenStorage(authorization)
    if storage.get_token() is None:
        raise UnauthorizedError("valid bearer token required")
    return storage


def build_picker(request: Request, token_storage: BearerTokenStorage) -> PickerBuilder:
    """Request-scoped builder: providers see the caller's token and the app's routes."""
    provider = EventPickerProvider(DictMenuFactory(), FastAPIUrlRouter(request.app), CatalogTranslator())
    provider.set_token_storage(token_storage)
    return PickerBuilder([provider])
