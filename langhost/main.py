"""Command-line entrypoint: load a pack for a caller and render one message."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from langhost.config import get_settings
from langhost.i18n.service import TranslationService
from langhost.logging import configure_logging, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="langhost", description="Render a message from a translation pack")
    parser.add_argument("pack", help="Pack path relative to the translation root, without extension")
    parser.add_argument("key", help="Message key inside the pack")
    parser.add_argument("language", help="Language code, e.g. en or ru")
    parser.add_argument("args", nargs="*", help="Positional template arguments")
    parser.add_argument("--caller", default="Cli", help="Caller identity the pack is loaded under")
    parser.add_argument("--root", help="Override the configured translation directory")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    options = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, log_format=settings.log_format)

    service = TranslationService(
        translation_root=options.root or settings.translation_root,
        fallback_language=settings.translation.fallback_language,
        file_extension=settings.translation.file_extension,
        lookup_mode=settings.translation.lookup_mode,
    )
    translation = service.for_caller(options.caller)

    if not translation.load_translation(options.pack):
        logger.error("cli_pack_not_loaded", pack=options.pack, caller=translation.caller)
        return 1

    print(translation.get_translated(options.key, options.language, *options.args))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
