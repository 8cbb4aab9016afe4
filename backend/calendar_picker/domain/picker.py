"""Picker value objects.

``PickerConfig`` travels between the picker menu and the popup view inside the
``picker`` query parameter. The wire format is url-safe base64 (``+/=`` mapped to
``-_,``) of the gzip compressed JSON document; decoders also accept the raw JSON
form because compression is best effort.
"""
from __future__ import annotations
import base64
import binascii
import gzip
import json
import logging
import zlib
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from ..errors import InvalidPickerConfig

logger = logging.getLogger(__name__)

_GZIP_MAGIC = b"\x1f\x8b"
_TO_URL = str.maketrans("+/=", "-_,")
_FROM_URL = str.maketrans("-_,", "+/=")


@dataclass(frozen=True)
class PickerConfig:
    context: str
    extras: Dict[str, Any] = field(default_factory=dict)
    value: str = ""
    current: str = ""

    def get_extra(self, name: str, default: Any = None) -> Any:
        return self.extras.get(name, default)

    def clone_for_current(self, current: str) -> "PickerConfig":
        return replace(self, extras=dict(self.extras), current=current)

    def json_serialize(self) -> Dict[str, Any]:
        return {
            "context": self.context,
            "extras": self.extras,
            "current": self.current,
            "value": self.value,
        }

    def url_encode(self) -> str:
        data = json.dumps(self.json_serialize(), separators=(",", ":")).encode("utf-8")
        try:
            data = gzip.compress(data, mtime=0)
        except (OSError, ValueError, zlib.error):
            logger.warning("gzip compression of picker config failed, using raw JSON")
        return base64.b64encode(data).decode("ascii").translate(_TO_URL)

    @classmethod
    def url_decode(cls, data: str) -> "PickerConfig":
        try:
            raw = base64.b64decode(data.translate(_FROM_URL).encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError, ValueError):
            raise InvalidPickerConfig("picker config is not valid base64")
        if raw.startswith(_GZIP_MAGIC):
            try:
                raw = gzip.decompress(raw)
            except (OSError, EOFError, zlib.error):
                logger.debug("picker config has gzip magic but does not decompress, trying raw JSON")
        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            raise InvalidPickerConfig("picker config is not valid JSON")
        return cls.from_dict(payload)

    @classmethod
    def from_dict(cls, payload: Any) -> "PickerConfig":
        if not isinstance(payload, dict) or not isinstance(payload.get("context"), str):
            raise InvalidPickerConfig("picker config must be an object with a context")
        extras = payload.get("extras") or {}
        if not isinstance(extras, dict):
            raise InvalidPickerConfig("picker extras must be an object")
        return cls(
            context=payload["context"],
            extras=extras,
            value=str(payload.get("value") or ""),
            current=str(payload.get("current") or ""),
        )


@dataclass
class MenuItem:
    name: str
    label: str
    link_attributes: Dict[str, str] = field(default_factory=dict)
    current: bool = False
    uri: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "linkAttributes": dict(self.link_attributes),
            "current": self.current,
            "uri": self.uri,
        }
