"""Command-line interface for msg-header-merge.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from pathlib import Path

import structlog

from msg_header_merge import __version__
from msg_header_merge.config import Settings, get_settings
from msg_header_merge.exceptions import ConfigurationError, MsgHeaderMergeError
from msg_header_merge.labels import LabelTable
from msg_header_merge.models import MessageBody
from msg_header_merge.render import RtfConverter
from msg_header_merge.renderer import HeaderRenderer

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="msg-header-merge", description="Message header merge")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render an item's metadata header and merge it into its body",
    )
    render_parser.add_argument(
        "item",
        type=Path,
        help='JSON file of the form {"item_type": "...", "metadata": {...}}',
    )
    render_parser.add_argument("--html-body", type=Path, default=None, help="HTML body file")
    render_parser.add_argument("--rtf-body", type=Path, default=None, help="RTF body file")
    render_parser.add_argument("--text-body", type=Path, default=None, help="Plain text body file")
    render_parser.add_argument(
        "--rtf-converter",
        default=None,
        help="RTF to HTML converter as module:function (required for --rtf-body)",
    )
    render_parser.add_argument(
        "--hyperlinks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Render mailto and attachment links (default: settings hyperlinks)",
    )
    render_parser.add_argument(
        "--labels",
        type=Path,
        default=None,
        help="JSON file with label overrides (default: settings labels_path)",
    )
    render_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the document to this file instead of stdout",
    )

    labels_parser = subparsers.add_parser("labels", help="Print the active label table as JSON")
    labels_parser.add_argument(
        "--labels",
        type=Path,
        default=None,
        help="JSON file with label overrides (default: settings labels_path)",
    )

    return parser


def _load_converter(target: str) -> RtfConverter:
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"RTF converter must be given as module:function, got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import RTF converter module {module_name!r}") from exc

    converter = getattr(module, attr, None)
    if not callable(converter):
        raise ConfigurationError(f"RTF converter {target!r} is not callable")
    return converter


def _read_optional(path: Path | None) -> str | None:
    if path is None:
        return None
    if not path.exists():
        raise ConfigurationError(f"Body file not found: {path}")
    return path.read_text(encoding="utf-8")


def _load_labels(path: Path | None) -> LabelTable:
    path = path or get_settings().labels_path
    return LabelTable.from_json(path) if path is not None else LabelTable.english()


def _cmd_render(args: argparse.Namespace) -> int:
    if not args.item.exists():
        raise ConfigurationError(f"Item file not found: {args.item}")

    try:
        payload = json.loads(args.item.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Item file is not valid JSON: {args.item}") from exc

    if not isinstance(payload, dict) or "item_type" not in payload:
        raise ConfigurationError('Item file must be a JSON object with an "item_type" key')

    metadata = payload.get("metadata") or {}
    if not isinstance(metadata, dict):
        raise ConfigurationError('"metadata" must be a JSON object')

    body = MessageBody(
        html=_read_optional(args.html_body),
        rtf=_read_optional(args.rtf_body),
        text=_read_optional(args.text_body),
    )
    converter = _load_converter(args.rtf_converter) if args.rtf_converter else None

    renderer = HeaderRenderer(labels=_load_labels(args.labels), rtf_converter=converter)
    document = renderer.render_mapping(
        payload["item_type"],
        metadata,
        body,
        hyperlinks=args.hyperlinks,
    )

    if args.output is not None:
        args.output.write_text(document, encoding="utf-8")
        logger.info("document_written", path=str(args.output), length=len(document))
    else:
        sys.stdout.write(document)
    return 0


def _cmd_labels(args: argparse.Namespace) -> int:
    labels = _load_labels(args.labels)
    print(json.dumps(labels.to_dict(), indent=2, ensure_ascii=False))
    return 0


def _log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def main(args: list[str] | None = None) -> int:
    """Main entry point for the msg-header-merge CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()

    # Configure logging; events go to stderr so stdout carries only the document
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(_log_level(settings)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    logger.debug("msg_header_merge_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        if parsed.command == "render":
            return _cmd_render(parsed)
        if parsed.command == "labels":
            return _cmd_labels(parsed)
    except MsgHeaderMergeError as exc:
        logger.error("command_failed", command=parsed.command, error=str(exc))
        return 1

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
