from unittest.mock import Mock
from urllib.parse import urlencode

import pytest

from calendar_picker.adapters.menu_factory import DictMenuFactory
from calendar_picker.adapters.token_storage import BackendUser, ClaimsToken, StaticTokenStorage
from calendar_picker.domain.picker import MenuItem, PickerConfig
from calendar_picker.errors import ProviderNotFound
from calendar_picker.services.picker_builder import PickerBuilder
from calendar_picker.services.picker_provider import EventPickerProvider


class FakeProvider:
    def __init__(self, name, contexts=("link",), prefix=None):
        self.name = name
        self.contexts = contexts
        self.prefix = prefix

    def get_name(self):
        return self.name

    def get_route_parameters(self, config=None):
        return {"do": self.name}

    def create_menu_item(self, config):
        return MenuItem(self.name, self.name, current=self.is_current(config), uri=self.get_url(config))

    def get_url(self, config):
        return f"/{self.name}"

    def is_current(self, config):
        return config.current == self.name

    def supports_context(self, context):
        return context in self.contexts

    def supports_value(self, config):
        return bool(self.prefix) and config.value.startswith(self.prefix)


@pytest.fixture
def builder():
    return PickerBuilder([
        FakeProvider("pagePicker", prefix="{{link_url::"),
        FakeProvider("filePicker", contexts=("link", "file"), prefix="{{file::"),
    ])


def test_get_provider(builder):
    assert builder.get_provider("filePicker").get_name() == "filePicker"
    with pytest.raises(ProviderNotFound) as exc:
        builder.get_provider("eventPicker")
    assert exc.value.http_status == 404


def test_supports_context(builder):
    assert builder.supports_context("link")
    assert builder.supports_context("file")
    assert not builder.supports_context("image")
    assert builder.supports_context("file", allowed=["filePicker"])
    assert not builder.supports_context("file", allowed=["pagePicker"])


def test_create_picker_defaults_to_first_provider(builder):
    picker = builder.create_picker(PickerConfig("link"))

    assert picker.config.current == "pagePicker"
    assert picker.current_provider.get_name() == "pagePicker"
    assert [p.get_name() for p in picker.providers] == ["pagePicker", "filePicker"]


def test_create_picker_selects_provider_owning_the_value(builder):
    picker = builder.create_picker(PickerConfig("link", {}, "{{file::abc}}"))

    assert picker.current_provider.get_name() == "filePicker"
    menu = picker.get_menu()
    assert [(m.name, m.current) for m in menu] == [("pagePicker", False), ("filePicker", True)]


def test_create_picker_keeps_explicit_current(builder):
    picker = builder.create_picker(PickerConfig("link", {}, "{{file::abc}}", "pagePicker"))
    assert picker.current_provider.get_name() == "pagePicker"


def test_create_picker_without_matching_provider(builder):
    assert builder.create_picker(PickerConfig("image")) is None
    assert builder.get_url("image") == ""


def test_get_url(builder):
    assert builder.get_url("file") == "/filePicker"


def test_builder_with_event_provider():
    router = Mock()
    router.generate.side_effect = lambda name, params: name + "?" + urlencode(params)
    provider = EventPickerProvider(DictMenuFactory(), router)
    provider.set_token_storage(StaticTokenStorage(ClaimsToken({"sub": "1", "modules": ["calendar"]})))
    builder = PickerBuilder([provider])

    picker = builder.create_picker(PickerConfig("link", {}, "{{event_url::9}}"))

    [item] = picker.get_menu()
    assert item.name == "eventPicker"
    assert item.label == "Event picker"
    assert item.current is True
    assert item.uri.startswith("contao_backend?do=calendar&popup=1&picker=")
    assert builder.get_url("link").startswith("contao_backend?do=calendar")


def test_builder_hides_event_provider_without_calendar_access():
    provider = EventPickerProvider(DictMenuFactory(), Mock())
    provider.set_token_storage(StaticTokenStorage(ClaimsToken({"sub": "1", "modules": ["news"]})))

    assert not PickerBuilder([provider]).supports_context("link")


def test_backend_user_admin_has_access_everywhere():
    assert BackendUser("1", admin=True).has_access("calendar")
    assert not BackendUser("1").has_access("calendar")
    assert BackendUser("1", modules=["calendar"]).has_access("calendar", "modules")


def test_backend_user_access_only_checks_list_fields():
    user = BackendUser("1", username="calendar-editor", modules=["news"])
    assert not user.has_access("calendar", "username")
    assert not user.has_access("calendar", "missing")
    assert user.has_access("news", "modules")
