from __future__ import annotations
from typing import Any, Dict
from urllib.parse import urlencode

from starlette.routing import NoMatchFound

from ..errors import NotFoundError
from ..ports.picker import UrlRouter


class FastAPIUrlRouter(UrlRouter):
    """Generates URLs for named routes of a FastAPI/Starlette application.

    Parameters are appended as a query string in insertion order, which keeps
    the output deterministic.
    """

    def __init__(self, app):
        self.app = app

    def generate(self, name: str, params: Dict[str, Any]) -> str:
        try:
            path = str(self.app.url_path_for(name))
        except NoMatchFound:
            raise NotFoundError("ROUTE_NOT_FOUND", f"Route {name!r} does not exist")
        if not params:
            return path
        return f"{path}?{urlencode(params)}"
