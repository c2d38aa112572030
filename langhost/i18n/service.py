"""Translation facade shared by every component of the host."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Literal

from langhost.config import HostSettings
from langhost.domain.models import GameClient
from langhost.i18n.formatting import format_template
from langhost.i18n.languages import resolve_language_code
from langhost.i18n.store import DEFAULT_FALLBACK_LANGUAGE, TranslationStore, namespaced_key
from langhost.i18n.tracker import ClientLocaleTracker
from langhost.logging import logger
from langhost.services.exceptions import (
    EmptyPack,
    FormatFailure,
    InvalidPath,
    KeyNotFound,
    LanguageMissing,
    ParseFailure,
    TranslationFileNotFound,
)

UNKNOWN_CALLER = "Unknown"

LookupMode = Literal["message_key", "legacy"]
PackReader = Callable[[Path], str]
ClientRef = GameClient | int | None


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8-sig")


def _caller_or_unknown(caller: str | None) -> str:
    if caller and caller.strip():
        return caller.strip()
    return UNKNOWN_CALLER


def _slot_of(client: ClientRef) -> int | None:
    if client is None or isinstance(client, bool):
        return None
    if isinstance(client, int):
        return client
    return getattr(client, "slot", None)


class TranslationService:
    """Owns the translation table and the client language map.

    Nothing raised while loading or rendering crosses this boundary: loads
    report through their boolean result and renders degrade to the message
    key, the namespaced key or the language code.
    """

    def __init__(
        self,
        *,
        translation_root: str | Path,
        store: TranslationStore | None = None,
        tracker: ClientLocaleTracker | None = None,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
        file_extension: str = "json",
        lookup_mode: LookupMode = "message_key",
        reader: PackReader | None = None,
    ) -> None:
        self.translation_root = Path(translation_root)
        self.store = store if store is not None else TranslationStore()
        self.tracker = tracker if tracker is not None else ClientLocaleTracker()
        self.fallback_language = fallback_language
        self.file_extension = file_extension
        self.lookup_mode = lookup_mode
        self._reader = reader or _read_text
        if lookup_mode == "legacy":
            logger.warning(
                "legacy_lookup_enabled",
                detail="get_translated builds '{caller}.{language}' and ignores the message key",
            )

    @classmethod
    def from_settings(cls, settings: HostSettings, **kwargs: Any) -> "TranslationService":
        return cls(
            translation_root=settings.translation_root,
            fallback_language=settings.translation.fallback_language,
            file_extension=settings.translation.file_extension,
            lookup_mode=settings.translation.lookup_mode,
            **kwargs,
        )

    def for_caller(self, caller: str) -> "CallerTranslation":
        return CallerTranslation(self, caller)

    def pack_path(self, path: str) -> Path:
        if not isinstance(path, str) or not path.strip():
            raise InvalidPath("Translation path is empty.")
        if "\x00" in path:
            raise InvalidPath("Translation path contains a NUL byte.")
        try:
            root = self.translation_root.resolve()
            candidate = (root / f"{path.strip()}.{self.file_extension}").resolve()
        except (OSError, ValueError) as exc:
            raise InvalidPath(f"{path!r} cannot be resolved: {exc}") from exc
        if not candidate.is_relative_to(root):
            raise InvalidPath(f"{path!r} points outside {root}.")
        return candidate

    def load_translation(self, caller: str, path: str) -> bool:
        caller = _caller_or_unknown(caller)
        try:
            file_path = self.pack_path(path)
        except InvalidPath as exc:
            logger.warning("translation_path_invalid", caller=caller, path=path, reason=str(exc))
            return False

        try:
            if not file_path.is_file():
                raise TranslationFileNotFound(str(file_path))
            added = self.store.load(caller, self._reader(file_path))
        except TranslationFileNotFound:
            logger.warning("translation_file_not_found", caller=caller, file=str(file_path))
            return False
        except ParseFailure as exc:
            logger.warning(
                "translation_parse_failed", caller=caller, file=str(file_path), reason=str(exc)
            )
            return False
        except EmptyPack:
            logger.warning("translation_pack_empty", caller=caller, file=str(file_path))
            return False
        except Exception:
            logger.exception("translation_load_failed", caller=caller, path=path)
            return False

        logger.info("translation_loaded", caller=caller, count=added, file=str(file_path))
        return True

    def get_translated_for_client(self, caller: str, client: ClientRef, key: str, *args: Any) -> str:
        slot = _slot_of(client)
        if slot is None:
            return key
        language = self.tracker.get(slot)
        if language is None:
            return key
        return self.get_translated(caller, key, language, *args)

    def get_translated(self, caller: str, key: str, language: str, *args: Any) -> str:
        if self.lookup_mode == "legacy":
            return self.translate_legacy(caller, key, language, *args)
        return self.translate_by_message_key(caller, key, language, *args)

    def translate_by_message_key(self, caller: str, key: str, language: str, *args: Any) -> str:
        """Render ``key`` from the caller's own pack.

        ``key`` may be given bare (``"ready"``) or already prefixed with the
        caller identity (``"Demo.ready"``).
        """

        def lookup_key(owner: str) -> str:
            full_key = namespaced_key(owner, key)
            if full_key not in self.store and key.lower().startswith(f"{owner.lower()}."):
                return key
            return full_key

        return self._render(caller, key, language, args, lookup_key)

    def translate_legacy(self, caller: str, key: str, language: str, *args: Any) -> str:
        """Lookup that keys the group by ``{caller}.{language}``.

        ``key`` only shows up in diagnostics. Kept for components written
        against that behaviour; new code should use ``translate_by_message_key``.
        """

        return self._render(caller, key, language, args, lambda owner: namespaced_key(owner, language))

    def record_client_language(self, slot: int, display_name: str | None) -> str:
        code = resolve_language_code(display_name)
        if not code:
            self.tracker.remove(slot)
            logger.info("client_language_unknown", slot=slot, locale=display_name)
            return ""
        self.tracker.set(slot, code)
        logger.info("client_language_recorded", slot=slot, language=code)
        return code

    def forget_client(self, slot: int) -> None:
        self.tracker.remove(slot)

    def _render(
        self,
        caller: str,
        key: str,
        language: str,
        args: tuple[Any, ...],
        build_key: Callable[[str], str],
    ) -> str:
        try:
            if not language or not language.strip():
                return ""
            caller = _caller_or_unknown(caller)
            lookup_key = build_key(caller)
            template = self.store.resolve(lookup_key, language, self.fallback_language)
            return format_template(template, args)
        except (KeyNotFound, LanguageMissing):
            return lookup_key
        except FormatFailure as exc:
            logger.warning(
                "translation_format_failed",
                caller=caller,
                key=key,
                language=language,
                reason=str(exc),
            )
            return language
        except Exception:
            logger.exception("translation_failed", caller=caller, key=key, language=language)
            return language


class CallerTranslation:
    """Service handle bound to one component's identity."""

    def __init__(self, service: TranslationService, caller: str) -> None:
        self._service = service
        self.caller = _caller_or_unknown(caller)

    def load_translation(self, path: str) -> bool:
        return self._service.load_translation(self.caller, path)

    def get_translated(self, key: str, language: str, *args: Any) -> str:
        return self._service.get_translated(self.caller, key, language, *args)

    def get_translated_for_client(self, client: ClientRef, key: str, *args: Any) -> str:
        return self._service.get_translated_for_client(self.caller, client, key, *args)


__all__ = ["CallerTranslation", "TranslationService", "UNKNOWN_CALLER"]
