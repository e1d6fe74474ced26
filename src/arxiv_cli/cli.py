"""CLI/bootstrap helpers for the arXiv CLI browser."""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from arxiv_cli.action_messages import (
    build_fetch_error_message,
    build_seen_save_error_message,
)
from arxiv_cli.config import CONFIG_APP_NAME, _coerce_page, _coerce_timeout, load_config
from arxiv_cli.models import (
    MAX_PAGE,
    MAX_TIMEOUT_SECONDS,
    PaginationParams,
    SearchResult,
    UserConfig,
)
from arxiv_cli.seen import SeenSet, SeenStoreError, get_seen_path, load_seen_ids, save_seen_ids
from arxiv_cli.services import FetchError, fetch_page_blocking
from arxiv_cli.session import BrowserSession

logger = logging.getLogger(__name__)


def _resolve_params(args: argparse.Namespace, config: UserConfig) -> PaginationParams:
    """Build the startup pagination params: CLI flags override config."""
    query = args.query if args.query is not None else config.default_query
    page = _coerce_page(args.page) if args.page is not None else config.start_page
    return PaginationParams(page=page, query=query.strip())


def _apply_overrides(args: argparse.Namespace, config: UserConfig) -> UserConfig:
    """Return a copy of ``config`` with connection/storage flags applied."""
    return UserConfig(
        base_url=(args.base_url or "").strip() or config.base_url,
        default_query=config.default_query,
        start_page=config.start_page,
        timeout_seconds=(
            _coerce_timeout(args.timeout) if args.timeout is not None else config.timeout_seconds
        ),
        seen_file=args.seen_file if args.seen_file is not None else config.seen_file,
        ascii_icons=config.ascii_icons or args.ascii,
        version=config.version,
    )


def _configure_logging(debug: bool) -> None:
    """Configure logging. When debug=True, logs to file at DEBUG level."""
    if not debug:
        # Default: suppress all logging (TUI captures stderr)
        logging.disable(logging.CRITICAL)
        return

    log_dir = Path(user_config_dir(CONFIG_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "debug.log"

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG)


def _configure_color_mode(color_mode: str) -> None:
    """Configure environment hints for terminal color behavior."""
    if color_mode == "never":
        os.environ["NO_COLOR"] = "1"
        os.environ.pop("FORCE_COLOR", None)
        return
    if color_mode == "always":
        os.environ["FORCE_COLOR"] = "1"
        os.environ.pop("NO_COLOR", None)
        return
    # auto
    os.environ.pop("FORCE_COLOR", None)


def _validate_interactive_tty() -> bool:
    """Return True when stdin/stdout are interactive terminals."""
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arxiv-cli",
        description="Page through arXiv search results in a TUI",
    )
    parser.add_argument(
        "-q",
        "--query",
        type=str,
        default=None,
        help="Search query to start with (default: config value, 'algorithms')",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=None,
        help=f"Page to start on (0-{MAX_PAGE}; default: config value, 1)",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Search service URL (default: config value)",
    )
    parser.add_argument(
        "--seen-file",
        type=str,
        default=None,
        help="File that stores seen paper ids (default: ~/.arxiv-cli)",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=None,
        help=f"HTTP timeout in seconds (1-{MAX_TIMEOUT_SECONDS}; default: config value, 30)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to file (~/.config/arxiv-cli/debug.log)",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output mode for terminal UI (default: auto)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable terminal colors (equivalent to --color never)",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Use ASCII-only seen indicators for compatibility with limited terminals",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    load_config_fn: Callable[[], UserConfig] = load_config,
    fetch_fn: Callable[..., list[SearchResult]] = fetch_page_blocking,
    load_seen_fn: Callable[[Path], SeenSet] = load_seen_ids,
    save_seen_fn: Callable[[Path, SeenSet], None] = save_seen_ids,
    configure_logging_fn: Callable[[bool], None] = _configure_logging,
    configure_color_mode_fn: Callable[[str], None] = _configure_color_mode,
    validate_interactive_tty_fn: Callable[[], bool] = _validate_interactive_tty,
    app_factory: Callable[..., Any] | None = None,
) -> int:
    """Main entry point. Returns exit code."""
    args = _build_parser().parse_args(argv)

    color_mode = "never" if args.no_color else args.color
    configure_color_mode_fn(color_mode)
    configure_logging_fn(args.debug)
    logger.debug("arxiv-cli starting, cwd=%s", Path.cwd())

    config = _apply_overrides(args, load_config_fn())
    params = _resolve_params(args, config)

    seen_path = get_seen_path(config.seen_file)
    seen = load_seen_fn(seen_path)

    try:
        results = fetch_fn(
            params=params,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )
    except FetchError as exc:
        print(
            build_fetch_error_message(
                str(exc),
                query=params.query,
                page=params.page,
                status_code=exc.status_code,
            ),
            file=sys.stderr,
        )
        return 1

    if not validate_interactive_tty_fn():
        print(
            "Error: arxiv-cli requires an interactive TTY for the full UI.",
            file=sys.stderr,
        )
        print("Next steps:", file=sys.stderr)
        print("  - Run arxiv-cli directly in a terminal session", file=sys.stderr)
        print("  - Use --help for command documentation", file=sys.stderr)
        return 2

    if app_factory is None:
        from arxiv_cli.app import ArxivCli as _ArxivCli

        app_factory = _ArxivCli

    session = BrowserSession(params, seen, results)
    app = app_factory(session, config=config, ascii_icons=config.ascii_icons)
    returned_seen = app.run()

    fetch_error = getattr(app, "fetch_error", None)
    if fetch_error is not None:
        print(
            build_fetch_error_message(
                str(fetch_error),
                query=params.query,
                page=params.page,
                status_code=fetch_error.status_code,
            ),
            file=sys.stderr,
        )
        return 1

    if returned_seen is None:
        logger.debug("App exited without quit; seen set not saved")
        return 0

    try:
        save_seen_fn(seen_path, returned_seen)
    except SeenStoreError as exc:
        print(build_seen_save_error_message(str(exc)), file=sys.stderr)
        return 1
    return 0


__all__ = [
    "_apply_overrides",
    "_configure_color_mode",
    "_configure_logging",
    "_resolve_params",
    "_validate_interactive_tty",
    "main",
]
