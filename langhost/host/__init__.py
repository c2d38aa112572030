from langhost.host.interfaces import ClientManager, ModuleRegistry, SettingQueryCallback
from langhost.host.module import TRANSLATION_INTERFACE, TranslationModule

__all__ = [
    "ClientManager",
    "ModuleRegistry",
    "SettingQueryCallback",
    "TRANSLATION_INTERFACE",
    "TranslationModule",
]
