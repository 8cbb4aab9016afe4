from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel
from typing import Any, Dict, List, Union

from ..adapters.token_storage import BearerTokenStorage
from ..domain.picker import PickerConfig
from ..errors import ValidationAppError
from .deps import build_picker, get_token_storage

router = APIRouter(prefix="/picker", tags=["picker"])


class ConvertIn(BaseModel):
    picker: str
    value: Union[int, str]


class ConvertOut(BaseModel):
    value: str


class UrlOut(BaseModel):
    url: str


@router.get("/menu")
def picker_menu(
    request: Request,
    context: str = Query(...),
    value: str = Query(""),
    token_storage: BearerTokenStorage = Depends(get_token_storage),
) -> List[Dict[str, Any]]:
    builder = build_picker(request, token_storage)
    picker = builder.create_picker(PickerConfig(context, {}, value))
    if picker is None:
        return []
    return [item.to_dict() for item in picker.get_menu()]


@router.get("/url", response_model=UrlOut)
def picker_url(
    request: Request,
    context: str = Query(...),
    value: str = Query(""),
    token_storage: BearerTokenStorage = Depends(get_token_storage),
):
    builder = build_picker(request, token_storage)
    return UrlOut(url=builder.get_url(context, value=value))


@router.post("/convert", response_model=ConvertOut)
def convert_value(
    body: ConvertIn,
    request: Request,
    token_storage: BearerTokenStorage = Depends(get_token_storage),
):
    config = PickerConfig.url_decode(body.picker)
    provider = build_picker(request, token_storage).get_provider(config.current)
    if not hasattr(provider, "convert_dca_value"):
        raise ValidationAppError("NOT_A_DCA_PICKER", f"Provider {config.current!r} does not convert values")
    return ConvertOut(value=provider.convert_dca_value(config, body.value))
