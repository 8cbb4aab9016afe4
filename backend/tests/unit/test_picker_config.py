import base64
import json

import pytest

from calendar_picker.domain.insert_tags import format_event_url, parse_event_url
from calendar_picker.domain.picker import MenuItem, PickerConfig
from calendar_picker.errors import InvalidPickerConfig


def _url_b64(data: bytes) -> str:
    return base64.b64encode(data).decode().translate(str.maketrans("+/=", "-_,"))


def test_url_encode_round_trip():
    config = PickerConfig("link", {"source": "tl_calendar_events.2", "fieldType": "radio"}, "{{event_url::5}}", "eventPicker")

    encoded = config.url_encode()

    assert PickerConfig.url_decode(encoded) == config
    assert not set("+/=") & set(encoded)


def test_url_encode_is_deterministic():
    config = PickerConfig("link", {}, "", "eventPicker")
    assert config.url_encode() == config.url_encode()


def test_url_decode_accepts_uncompressed_json():
    raw = json.dumps({"context": "link", "extras": {}, "current": "eventPicker", "value": "{{event_url::3}}"}).encode()

    config = PickerConfig.url_decode(_url_b64(raw))

    assert config == PickerConfig("link", {}, "{{event_url::3}}", "eventPicker")


def test_url_decode_accepts_empty_extras_list():
    # PHP serializes an empty extras array as []
    raw = b'{"context":"link","extras":[],"current":"","value":""}'
    assert PickerConfig.url_decode(_url_b64(raw)).extras == {}


@pytest.mark.parametrize("data", [
    "not base64!!",
    _url_b64(b"\x1f\x8bgarbage"),
    _url_b64(b"[1, 2, 3]"),
    _url_b64(b'{"extras": {}}'),
    _url_b64(b'{"context": "link", "extras": "x"}'),
])
def test_url_decode_rejects_malformed_input(data):
    with pytest.raises(InvalidPickerConfig) as exc:
        PickerConfig.url_decode(data)
    assert exc.value.code == "INVALID_PICKER_CONFIG"
    assert exc.value.http_status == 400


def test_clone_for_current_keeps_other_fields():
    config = PickerConfig("link", {"source": "tl_calendar_events.2"}, "{{event_url::5}}", "filePicker")

    clone = config.clone_for_current("eventPicker")

    assert clone.current == "eventPicker"
    assert clone.context == "link"
    assert clone.value == "{{event_url::5}}"
    assert clone.extras == config.extras
    assert clone.extras is not config.extras
    assert config.current == "filePicker"


def test_get_extra_default():
    config = PickerConfig("link", {"source": "tl_calendar_events.2"})
    assert config.get_extra("source") == "tl_calendar_events.2"
    assert config.get_extra("missing") is None
    assert config.get_extra("missing", "x") == "x"


def test_json_serialize_key_order():
    assert list(PickerConfig("link").json_serialize()) == ["context", "extras", "current", "value"]


def test_menu_item_to_dict():
    item = MenuItem("eventPicker", "Event picker", {"class": "eventPicker"}, True, "/contao?do=calendar")
    assert item.to_dict() == {
        "label": "Event picker",
        "linkAttributes": {"class": "eventPicker"},
        "current": True,
        "uri": "/contao?do=calendar",
    }


@pytest.mark.parametrize("value,expected", [
    ("{{event_url::5}}", "5"),
    ("{{event_url::123}}", "123"),
    ("{{link_url::5}}", None),
    ("{{event_url::}}", None),
    ("{{event_url::5}} trailing", None),
    ("", None),
    (None, None),
])
def test_parse_event_url(value, expected):
    assert parse_event_url(value) == expected


def test_format_event_url():
    assert format_event_url(5) == "{{event_url::5}}"
    assert format_event_url("42") == "{{event_url::42}}"


def test_url_encode_falls_back_to_raw_json_when_compression_fails(monkeypatch):
    def broken_compress(data, *args, **kwargs):
        raise OSError("compression unavailable")

    monkeypatch.setattr("calendar_picker.domain.picker.gzip.compress", broken_compress)
    config = PickerConfig("link", {}, "{{event_url::5}}", "eventPicker")

    encoded = config.url_encode()

    raw = b'{"context":"link","extras":{},"current":"eventPicker","value":"{{event_url::5}}"}'
    assert encoded == _url_b64(raw)
    assert PickerConfig.url_decode(encoded) == config
