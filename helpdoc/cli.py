"""CLI entrypoints for helpdoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import HelpDocError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .rendering.dialects import available_dialects


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _heading_level(value: str) -> int:
    try:
        level = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid heading level: {value}") from exc
    if level not in {1, 2, 3}:
        raise argparse.ArgumentTypeError("heading level must be 1, 2 or 3")
    return level


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="helpdoc",
        description="Render help metadata as Markdown or Confluence documents.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render help for a callable, module, or YAML comment block.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    source = render_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--name",
        help="Dotted import path of the callable or module to document.",
    )
    source.add_argument(
        "--path",
        help="YAML file with an embedded help comment block, or a Python source file.",
    )
    render_parser.add_argument(
        "--dialect",
        choices=available_dialects(),
        default=None,
        help="Output dialect (defaults to the configured dialect, else markdown).",
    )
    render_parser.add_argument(
        "--heading-level",
        type=_heading_level,
        default=None,
        help="Base heading level for the document title (1-3).",
    )
    render_parser.add_argument(
        "--fill-missing",
        action="store_true",
        default=None,
        help="Fill absent descriptions, remarks and notes with placeholder text.",
    )
    render_parser.add_argument(
        "--output",
        "-o",
        help="Write the document to this file instead of stdout.",
    )
    render_parser.add_argument(
        "--config",
        default=".",
        help="Path to .helpdoc.yml or the directory containing it.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP rendering service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for helpdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    if args.command == "render":
        try:
            config = load_config(Path(args.config))
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        orchestrator = Orchestrator(config=config)
        try:
            document = orchestrator.run_render(
                name=args.name,
                path=args.path,
                dialect=args.dialect,
                heading_level=args.heading_level,
                fill_missing=args.fill_missing,
            )
        except HelpDocError as exc:
            parser.exit(1, f"helpdoc render failed: {exc}\n")
        except ValueError as exc:
            parser.exit(1, f"{exc}\n")
        if args.output:
            output = Path(args.output)
            output.write_text(document, encoding="utf-8")
            print(f"Help written to {_relativize(output.resolve())}")
        else:
            sys.stdout.write(document)
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
