from langhost.i18n.languages import LANGUAGE_CODES, resolve_language_code
from langhost.i18n.service import CallerTranslation, TranslationService
from langhost.i18n.store import TranslationStore
from langhost.i18n.tracker import ClientLocaleTracker

__all__ = [
    "CallerTranslation",
    "ClientLocaleTracker",
    "LANGUAGE_CODES",
    "TranslationService",
    "TranslationStore",
    "resolve_language_code",
]
