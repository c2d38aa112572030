"""Host services the translation module talks to."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from langhost.domain.models import GameClient, QueryStatus

SettingQueryCallback = Callable[[GameClient, QueryStatus, str, str], None]


class ClientManager(Protocol):
    def install_client_listener(self, listener: Any) -> None: ...

    def remove_client_listener(self, listener: Any) -> None: ...

    def query_setting(self, client: GameClient, name: str, callback: SettingQueryCallback) -> None:
        """Ask ``client`` for a setting; ``callback`` fires later, or never if it leaves."""
        ...


class ModuleRegistry(Protocol):
    def register_interface(self, owner: str, identity: str, factory: Callable[[str], Any]) -> None:
        """Publish ``factory``; the host calls it with each consumer's identity."""
        ...


__all__ = ["ClientManager", "ModuleRegistry", "SettingQueryCallback"]
