"""Host lifecycle and client listener wiring."""

from __future__ import annotations

import pytest

from langhost.config import ClientLocaleSettings, HostSettings, TranslationSettings
from langhost.domain.models import GameClient, QueryStatus
from langhost.host.module import TRANSLATION_INTERFACE, TranslationModule
from langhost.i18n.service import CallerTranslation


class DummyClientManager:
    def __init__(self) -> None:
        self.listeners = []
        self.queries = []

    def install_client_listener(self, listener) -> None:
        self.listeners.append(listener)

    def remove_client_listener(self, listener) -> None:
        self.listeners.remove(listener)

    def query_setting(self, client, name, callback) -> None:
        self.queries.append((client, name, callback))

    def complete(self, status, value, name: str | None = None) -> None:
        client, query_name, callback = self.queries.pop(0)
        callback(client, status, name or query_name, value)


class DummyRegistry:
    def __init__(self) -> None:
        self.interfaces = {}

    def register_interface(self, owner, identity, factory) -> None:
        self.interfaces[identity] = (owner, factory)


@pytest.fixture
def settings(tmp_path) -> HostSettings:
    return HostSettings(
        sharp_path=tmp_path,
        translation=TranslationSettings(directory="translation"),
        client_locale=ClientLocaleSettings(),
    )


@pytest.fixture
def module(settings) -> TranslationModule:
    settings.translation_root.mkdir(parents=True, exist_ok=True)
    return TranslationModule(DummyClientManager(), DummyRegistry(), settings=settings)


def test_post_init_installs_listener_and_publishes_interface(module):
    manager = module._client_manager
    registry = module._registry

    assert module.init() is True
    module.post_init()

    assert manager.listeners == [module]
    owner, factory = registry.interfaces[TRANSLATION_INTERFACE]
    assert owner == "Translation"
    handle = factory("MatchZy")
    assert isinstance(handle, CallerTranslation)
    assert handle.caller == "MatchZy"


def test_shutdown_removes_listener_once(module):
    module.post_init()

    module.shutdown()
    module.shutdown()

    assert module._client_manager.listeners == []


@pytest.mark.parametrize(
    "client",
    [
        GameClient(slot=1, is_hltv=True),
        GameClient(slot=2, is_fake_client=True),
        GameClient(slot=3, is_valid=False),
    ],
)
def test_proxies_bots_and_invalid_clients_are_not_queried(module, client):
    module.on_client_post_admin_check(client)

    assert module._client_manager.queries == []


def test_intact_language_query_records_client_language(module):
    manager = module._client_manager
    client = GameClient(slot=4, name="player")

    module.on_client_post_admin_check(client)
    assert manager.queries[0][1] == "cl_language"
    manager.complete(QueryStatus.VALUE_INTACT, "Russian")

    assert module.service.tracker.get(4) == "ru"


def test_plain_string_status_is_accepted(module):
    module.on_setting_query_finished(GameClient(slot=6), "value_intact", "cl_language", "German")

    assert module.service.tracker.get(6) == "de"


@pytest.mark.parametrize(
    ("status", "name"),
    [
        (QueryStatus.NOT_FOUND, "cl_language"),
        (QueryStatus.PROTECTED, "cl_language"),
        (QueryStatus.VALUE_INTACT, "cl_other"),
    ],
)
def test_failed_or_unrelated_queries_are_ignored(module, status, name):
    module.on_client_post_admin_check(GameClient(slot=5))
    module._client_manager.complete(status, "Russian", name=name)

    assert module.service.tracker.get(5) is None


def test_disconnect_evicts_when_enabled(module):
    module.on_setting_query_finished(GameClient(slot=8), QueryStatus.VALUE_INTACT, "cl_language", "French")

    module.on_client_disconnected(GameClient(slot=8))

    assert module.service.tracker.get(8) is None


def test_disconnect_keeps_entry_when_eviction_disabled(tmp_path):
    settings = HostSettings(
        sharp_path=tmp_path,
        client_locale=ClientLocaleSettings(evict_on_disconnect=False),
    )
    module = TranslationModule(DummyClientManager(), DummyRegistry(), settings=settings)
    module.on_setting_query_finished(GameClient(slot=8), QueryStatus.VALUE_INTACT, "cl_language", "French")

    module.on_client_disconnected(GameClient(slot=8))

    assert module.service.tracker.get(8) == "fr"


def test_consumer_flow_through_published_interface(module, settings):
    (settings.translation_root / "matchzy.json").write_text(
        '{"ready.markedready": {"en": "Marked as ready", "ru": "Готов"}}',
        encoding="utf-8",
    )
    module.post_init()
    _, factory = module._registry.interfaces[TRANSLATION_INTERFACE]
    translation = factory("MatchZy")

    assert translation.load_translation("matchzy") is True

    client = GameClient(slot=9)
    module.on_client_post_admin_check(client)
    module._client_manager.complete(QueryStatus.VALUE_INTACT, "Russian")

    assert translation.get_translated_for_client(client, "ready.markedready") == "Готов"
    assert translation.get_translated("ready.markedready", "en") == "Marked as ready"
    assert translation.get_translated_for_client(GameClient(slot=10), "ready.markedready") == "ready.markedready"
