"""Plugin module that wires the translation service into the host."""

from __future__ import annotations

from langhost.config import HostSettings, get_settings
from langhost.domain.models import GameClient, QueryStatus
from langhost.host.interfaces import ClientManager, ModuleRegistry
from langhost.i18n.service import CallerTranslation, TranslationService
from langhost.logging import logger

TRANSLATION_INTERFACE = "langhost.i18n.CallerTranslation"


class TranslationModule:
    display_name = "Translation"

    def __init__(
        self,
        client_manager: ClientManager,
        registry: ModuleRegistry,
        *,
        settings: HostSettings | None = None,
        service: TranslationService | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.service = service or TranslationService.from_settings(self.settings)
        self._client_manager = client_manager
        self._registry = registry
        self._listening = False

    def init(self) -> bool:
        return True

    def post_init(self) -> None:
        self._client_manager.install_client_listener(self)
        self._listening = True
        self._registry.register_interface(self.display_name, TRANSLATION_INTERFACE, self.interface_for)
        logger.info(
            "translation_module_ready",
            interface=TRANSLATION_INTERFACE,
            environment=self.settings.environment,
            translation_root=str(self.service.translation_root),
        )

    def on_all_modules_loaded(self) -> None:
        pass

    def shutdown(self) -> None:
        if self._listening:
            self._client_manager.remove_client_listener(self)
            self._listening = False

    def interface_for(self, caller: str) -> CallerTranslation:
        return self.service.for_caller(caller)

    def on_client_post_admin_check(self, client: GameClient) -> None:
        if not client.is_real_player:
            return
        self._client_manager.query_setting(
            client,
            self.settings.client_locale.setting_name,
            self.on_setting_query_finished,
        )

    def on_setting_query_finished(
        self,
        client: GameClient,
        status: QueryStatus,
        name: str,
        value: str,
    ) -> None:
        if status != QueryStatus.VALUE_INTACT or name != self.settings.client_locale.setting_name:
            logger.debug(
                "client_setting_ignored",
                slot=client.slot,
                setting=name,
                status=getattr(status, "value", status),
            )
            return
        self.service.record_client_language(client.slot, value)

    def on_client_disconnected(self, client: GameClient) -> None:
        if self.settings.client_locale.evict_on_disconnect:
            self.service.forget_client(client.slot)


__all__ = ["TRANSLATION_INTERFACE", "TranslationModule"]
