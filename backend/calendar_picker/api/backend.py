"""Popup view addressed by picker menu items (route name ``contao_backend``)."""
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional

from ..adapters.token_storage import BearerTokenStorage
from ..db.session import get_db
from ..domain.insert_tags import EVENT_TABLE
from ..domain.picker import PickerConfig
from ..errors import ProviderNotFound, ValidationAppError
from ..repositories.event_repository import MAX_ROW_ID, SqlAlchemyEventRepository
from .deps import build_picker, get_token_storage

router = APIRouter(tags=["backend"])

event_repository = SqlAlchemyEventRepository()


def _event_out(event) -> Dict[str, Any]:
    return {
        "id": event.id,
        "pid": event.pid,
        "title": event.title,
        "alias": event.alias,
        "startDate": event.start_date,
    }


@router.get("/contao", name="contao_backend")
def backend_popup(
    request: Request,
    do: str = Query(...),
    popup: int = Query(0),
    picker: Optional[str] = Query(None),
    pid: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    db: Session = Depends(get_db),
    token_storage: BearerTokenStorage = Depends(get_token_storage),
):
    if not picker:
        raise ValidationAppError("NO_PICKER", "picker parameter is required")
    config = PickerConfig.url_decode(picker)
    built = build_picker(request, token_storage).create_picker(config)
    provider = built.current_provider if built else None
    if provider is None:
        raise ProviderNotFound(config.current)
    if provider.get_route_parameters(config).get("do") != do:
        raise ValidationAppError("MODULE_MISMATCH", f"Provider {provider.get_name()!r} does not serve module {do!r}")

    result: Dict[str, Any] = {
        "popup": bool(popup),
        "provider": provider.get_name(),
        "config": built.config.json_serialize(),
    }
    if hasattr(provider, "get_dca_table"):
        table = provider.get_dca_table()
        attributes = provider.get_dca_attributes(built.config)
        records = event_repository.list_for_picker(db, calendar_id=pid) if table == EVENT_TABLE else []
        selected = None
        if table == EVENT_TABLE and "value" in attributes:
            event = event_repository.get(db, int(attributes["value"]))
            selected = _event_out(event) if event else None
        result.update(
            table=table,
            attributes=attributes,
            records=[_event_out(e) for e in records],
            selected=selected,
        )
    return result
