"""Game client locale names mapped to the short codes used in packs."""

from __future__ import annotations

from types import MappingProxyType

LANGUAGE_CODES = MappingProxyType(
    {
        name.lower(): code
        for name, code in {
            "Arabic": "ar",
            "Bulgarian": "bg",
            "SChinese": "chi",
            "Czech": "cze",
            "Danish": "da",
            "German": "de",
            "Greek": "el",
            "English": "en",
            "Spanish": "es",
            "Finnish": "fi",
            "French": "fr",
            "Hebrew": "he",
            "Hungarian": "hu",
            "Italian": "it",
            "Japanese": "jp",
            "Korean": "ko",
            "LatAm": "las",
            "Lithuanian": "lt",
            "Latvian": "lv",
            "Dutch": "nl",
            "Norwegian": "no",
            "Polish": "pl",
            "Brazilian": "pt",
            "Portuguese": "pt_p",
            "Romanian": "ro",
            "Russian": "ru",
            "Slovak": "sk",
            "Swedish": "sv",
            "Thai": "th",
            "Turkish": "tr",
            "Ukrainian": "ua",
            "Vietnamese": "vi",
            "TChinese": "zho",
        }.items()
    }
)


def resolve_language_code(display_name: str | None) -> str:
    """Return the short code for a client locale name, or "" when unmapped."""

    if not display_name:
        return ""
    return LANGUAGE_CODES.get(display_name.strip().lower(), "")


__all__ = ["LANGUAGE_CODES", "resolve_language_code"]
