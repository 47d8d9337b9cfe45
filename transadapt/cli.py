"""CLI for transadapt - translation through interchangeable providers."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from contextlib import aclosing
from typing import Any

from .config import ConfigValidator, load_config
from .translation import (
    TranslationError,
    TranslationRequest,
    Translator,
    TranslatorFactory,
    TranslatorMetadata,
    get_language_name,
)

__all__ = ["main"]

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def _configure_logging(config: dict[str, Any]) -> None:
    logging_config = config.get("logging", {})
    logging.basicConfig(
        level=getattr(logging, logging_config.get("level", "WARNING")),
        format=logging_config.get("format"),
        stream=sys.stderr,
    )


def _build_config(args: argparse.Namespace) -> dict[str, Any]:
    """Defaults + environment + CLI flags."""
    translation: dict[str, Any] = {}
    if getattr(args, "provider", None):
        translation["provider"] = args.provider
    if getattr(args, "endpoint", None):
        translation["providers"] = {"libretranslate": {"endpoint": args.endpoint}}

    overrides: dict[str, Any] = {}
    if translation:
        overrides["translation"] = translation
    if getattr(args, "log_level", None):
        overrides["logging"] = {"level": args.log_level}

    config = load_config(overrides)
    ConfigValidator.validate_or_raise(config)
    return config


# =============================================================================
# Subcommand: providers
# =============================================================================

def cmd_providers(args: argparse.Namespace) -> int:
    """List available translation providers."""
    providers = TranslatorMetadata.get_all()
    if not providers:
        print("No providers found.")
        return 0

    for pid, info in providers.items():
        flags = []
        if info.requires_network:
            flags.append("network")
        if info.supports_streaming:
            flags.append("streaming")
        suffix = f" ({', '.join(flags)})" if flags else ""
        print(f"{pid}: {info.display_name}{suffix}")

    return 0


# =============================================================================
# Subcommand: translate
# =============================================================================

async def _print_translation(translator: Translator, request: TranslationRequest, stream: bool) -> None:
    if not stream:
        response = await translator.translate(request)
        print(response.text)
        return

    async with aclosing(translator.translate_incrementally(request)) as responses:
        async for response in responses:
            marker = "" if response.is_final else "... "
            print(f"{marker}{response.text}")


async def _run_translate(config: dict[str, Any], request: TranslationRequest, stream: bool) -> None:
    async with TranslatorFactory.from_config(config) as translator:
        await _print_translation(translator, request, stream)


def cmd_translate(args: argparse.Namespace) -> int:
    """Translate a single text."""
    try:
        config = _build_config(args)
        _configure_logging(config)
        translation = config["translation"]
        request = TranslationRequest(
            args.text,
            args.source or translation.get("source_language", ""),
            args.target or translation.get("target_language", ""),
        )
        asyncio.run(_run_translate(config, request, args.stream))
        return 0
    except (TranslationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 130


# =============================================================================
# Subcommand: interactive
# =============================================================================

async def _prompt(message: str) -> str | None:
    try:
        return await asyncio.to_thread(input, message)
    except EOFError:
        return None


async def _interactive_session(translator: Translator, stream: bool) -> None:
    print("--- transadapt console translator ---")
    print(f"Type '{EXIT_COMMAND}' to quit.")

    while True:
        text = await _prompt("\nText to translate: ")
        if text is None or text.strip().lower() == EXIT_COMMAND:
            break

        source = await _prompt("Source language (e.g. 'en'): ")
        if source is None:
            break
        target = await _prompt("Target language (e.g. 'uk'): ")
        if target is None:
            break

        try:
            request = TranslationRequest(text, source, target)
            print(
                f"--- Result ({get_language_name(request.source_lang)}"
                f" -> {get_language_name(request.target_lang)}) ---"
            )
            await _print_translation(translator, request, stream)
        except TranslationError as e:
            # 対話ループは継続
            logger.debug("Interactive translation failed", exc_info=True)
            print(f"Error: {e}")

    print("Done.")


async def _run_interactive(config: dict[str, Any], stream: bool) -> None:
    async with TranslatorFactory.from_config(config) as translator:
        await _interactive_session(translator, stream)


def cmd_interactive(args: argparse.Namespace) -> int:
    """Interactive console translation loop."""
    try:
        config = _build_config(args)
        _configure_logging(config)
        asyncio.run(_run_interactive(config, args.stream))
        return 0
    except (TranslationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nStopping...", file=sys.stderr)
        return 0


# =============================================================================
# Main entry point
# =============================================================================

def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--provider",
        choices=TranslatorMetadata.list_provider_ids(),
        help="Translation provider (default: from config, mock)",
    )
    parser.add_argument(
        "--endpoint",
        help="LibreTranslate endpoint URL",
    )
    parser.add_argument(
        "--stream",
        action="store_true",
        help="Print incremental (partial) results",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="transadapt",
        description="Translate text through interchangeable providers.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # providers command
    providers_parser = subparsers.add_parser("providers", help="List translation providers")
    providers_parser.set_defaults(func=cmd_providers)

    # translate command
    translate_parser = subparsers.add_parser("translate", help="Translate a text")
    translate_parser.add_argument("text", help="Text to translate")
    translate_parser.add_argument(
        "-s", "--source",
        help="Source language code (default: from config, en)",
    )
    translate_parser.add_argument(
        "-t", "--target",
        help="Target language code (default: from config, uk)",
    )
    _add_common_arguments(translate_parser)
    translate_parser.set_defaults(func=cmd_translate)

    # interactive command
    interactive_parser = subparsers.add_parser("interactive", help="Interactive console translator")
    _add_common_arguments(interactive_parser)
    interactive_parser.set_defaults(func=cmd_interactive)

    args = parser.parse_args(argv)

    # No command specified - show help
    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
