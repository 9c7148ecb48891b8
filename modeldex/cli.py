"""
Modeldex CLI - find AI models from the terminal.

Usage:
    modeldex serve [--host 127.0.0.1] [--port 8000] [--reload]
        Runs the search API.

    modeldex search "image generation" [--pricing free] [--json]
        Runs one search against the API and prints the cards.

    modeldex browse
        Interactive browser: type a query to search, then use
        :filter, :open, :back, :categories, :category, :help, :quit.
"""

import argparse
import asyncio
import json
import logging
import os
import sys

from modeldex.client import DEFAULT_SERVER_URL, SearchClient
from modeldex.controller import CATEGORIES, PRICING_OPTIONS, SearchController
from modeldex.render import render_list, render_session

logger = logging.getLogger(__name__)

BROWSE_HELP = """Commands:
  <text>            search for AI models
  :filter <value>   filter by pricing ({options})
  :open <n>         show details for card n
  :back             return to the result list
  :categories       list category shortcuts
  :category <n>     search a category shortcut
  :help             show this help
  :quit             exit"""


def _server_url(args: argparse.Namespace) -> str:
    return args.server or os.environ.get("MODELDEX_SERVER_URL", DEFAULT_SERVER_URL)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    from backend.config import settings

    uvicorn.run(
        "backend.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
        log_level="debug" if args.verbose else "info",
    )


async def _search_once(args: argparse.Namespace) -> int:
    async with SearchClient(_server_url(args), timeout=args.timeout) as client:
        controller = SearchController(client)
        await controller.submit(args.query)
        session = controller.session
        if session.query is None:
            print("Error: query must not be empty", file=sys.stderr)
            return 2
        if session.error is not None:
            print(render_session(session), file=sys.stderr)
            return 1

        controller.change_filter(args.pricing)
        if args.json:
            print(json.dumps([m.to_wire() for m in session.derive_view()], indent=2))
        else:
            print(render_list(session.derive_view()))
        return 0


def cmd_search(args: argparse.Namespace) -> None:
    sys.exit(asyncio.run(_search_once(args)))


async def _handle_command(controller: SearchController, line: str) -> bool:
    """Handle one browse command. Returns False when the user quits."""
    command, _, arg = line.partition(" ")
    arg = arg.strip()

    if command in (":quit", ":q", ":exit"):
        return False
    if command == ":help":
        print(BROWSE_HELP.format(options=", ".join(PRICING_OPTIONS)))
        return True
    if command == ":categories":
        for i, name in enumerate(CATEGORIES, 1):
            print(f"  {i}. {name}")
        return True

    try:
        if command == ":filter":
            controller.change_filter(arg or "all")
        elif command == ":open":
            controller.open(int(arg))
        elif command == ":back":
            controller.back()
        elif command == ":category":
            await controller.choose_category(arg)
        elif command.startswith(":"):
            print(f"Unknown command {command}. Type :help for help.")
            return True
        else:
            await controller.submit(line)
    except ValueError as e:
        logger.debug(f"Rejected browse command {line!r}: {e}")
        print(f"Error: {e}")
        return True

    print()
    print(render_session(controller.session))
    print()
    return True


async def _browse(args: argparse.Namespace) -> None:
    async with SearchClient(_server_url(args), timeout=args.timeout) as client:
        controller = SearchController(client)
        print(render_session(controller.session))
        print("Type :help for commands.")
        while True:
            try:
                line = input("modeldex> ").strip()
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if not line:
                continue
            if not await _handle_command(controller, line):
                break


def cmd_browse(args: argparse.Namespace) -> None:
    asyncio.run(_browse(args))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="modeldex",
        description="Modeldex - find AI models for a free-text query",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # 'serve' subcommand
    serve_parser = subparsers.add_parser("serve", help="Run the search API")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve_parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    serve_parser.set_defaults(func=cmd_serve)

    # Options shared by the client commands
    client_args = argparse.ArgumentParser(add_help=False)
    client_args.add_argument(
        "--server",
        type=str,
        default=None,
        help=f"Search API URL (default: $MODELDEX_SERVER_URL or {DEFAULT_SERVER_URL})",
    )
    client_args.add_argument("--timeout", type=float, default=60.0, help="Request timeout (s)")
    client_args.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    # 'search' subcommand
    search_parser = subparsers.add_parser(
        "search", parents=[client_args], help="Run one search and print the results"
    )
    search_parser.add_argument("query", type=str, help="Free-text query")
    search_parser.add_argument(
        "--pricing", type=str, default="all", help="Pricing filter (all, free, freemium, ...)"
    )
    search_parser.add_argument("--json", action="store_true", help="Print records as JSON")
    search_parser.set_defaults(func=cmd_search)

    # 'browse' subcommand
    browse_parser = subparsers.add_parser(
        "browse", parents=[client_args], help="Interactive result browser"
    )
    browse_parser.set_defaults(func=cmd_browse)

    args = parser.parse_args(argv)

    # Configure logging
    level = logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    args.func(args)


if __name__ == "__main__":
    main()
