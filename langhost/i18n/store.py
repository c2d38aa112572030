"""In-memory translation table keyed by caller-namespaced message keys.

Every group is stored under ``"{caller}.{message_key}"`` and maps a language
code to a template. Keys and language codes compare case-insensitively.
Packs only ever merge into the table; there is no unload.
"""

from __future__ import annotations

import json
import threading
from typing import Any, Mapping

from langhost.services.exceptions import EmptyPack, KeyNotFound, LanguageMissing, ParseFailure

DEFAULT_FALLBACK_LANGUAGE = "en"


def namespaced_key(caller: str, message_key: str) -> str:
    return f"{caller}.{message_key}"


def _fold(value: str) -> str:
    return value.lower()


class TranslationStore:
    def __init__(self) -> None:
        self._groups: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _fold(key) in self._groups

    def languages(self, key: str) -> frozenset[str]:
        return frozenset(self._groups.get(_fold(key), {}))

    def load(self, caller: str, document: str | bytes | Mapping[str, Any]) -> int:
        """Merge a pack into the table under ``caller``'s namespace.

        ``document`` is either raw JSON text or an already parsed mapping of
        ``message_key -> {language: template}``. Members that are not objects
        and templates that are not strings are skipped.

        Returns the number of templates written, counting a repeated
        ``(key, language)`` pair, such as keys that differ only in case,
        once per write.

        Raises:
            ValueError: If ``caller`` is blank.
            ParseFailure: If the document is not valid JSON or its root is not an object.
            EmptyPack: If nothing usable was found.
        """

        if not caller or not caller.strip():
            raise ValueError("caller identity must not be blank")

        root = self._parse(document)
        staged: dict[str, dict[str, str]] = {}
        added = 0
        for message_key, group in root.items():
            if not isinstance(group, Mapping):
                continue
            for language, template in group.items():
                if not isinstance(template, str):
                    continue
                key = _fold(namespaced_key(caller, str(message_key)))
                staged.setdefault(key, {})[_fold(str(language))] = template
                added += 1

        if added == 0:
            raise EmptyPack(f"No usable translations for {caller!r}.")

        with self._lock:
            for key, group in staged.items():
                self._groups.setdefault(key, {}).update(group)
        return added

    def resolve(
        self,
        key: str,
        language: str,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ) -> str:
        """Return the template for ``language``, else for ``fallback_language``.

        Empty templates count as missing. Only one level of fallback is tried.
        """

        group = self._groups.get(_fold(key))
        if group is None:
            raise KeyNotFound(key)

        template = group.get(_fold(language))
        if template:
            return template
        template = group.get(_fold(fallback_language))
        if template:
            return template
        raise LanguageMissing(key, language, fallback_language)

    @staticmethod
    def _parse(document: str | bytes | Mapping[str, Any]) -> Mapping[str, Any]:
        if isinstance(document, (str, bytes, bytearray)):
            try:
                document = json.loads(document)
            except ValueError as exc:
                raise ParseFailure(f"Malformed translation document: {exc}") from exc
        if not isinstance(document, Mapping):
            raise ParseFailure(
                f"Translation document root must be an object, got {type(document).__name__}."
            )
        return document


__all__ = ["DEFAULT_FALLBACK_LANGUAGE", "TranslationStore", "namespaced_key"]
