"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class TranslationError(ServiceError):
    pass


class InvalidPath(TranslationError):
    pass


class TranslationFileNotFound(TranslationError):
    pass


class ParseFailure(TranslationError):
    pass


class EmptyPack(TranslationError):
    pass


class KeyNotFound(TranslationError):
    def __init__(self, namespaced_key: str) -> None:
        super().__init__(f"No translations registered for {namespaced_key!r}.")
        self.namespaced_key = namespaced_key


class LanguageMissing(TranslationError):
    def __init__(self, namespaced_key: str, language: str, fallback_language: str) -> None:
        super().__init__(
            f"{namespaced_key!r} has neither {language!r} nor fallback {fallback_language!r}."
        )
        self.namespaced_key = namespaced_key
        self.language = language
        self.fallback_language = fallback_language


class FormatFailure(TranslationError):
    pass
