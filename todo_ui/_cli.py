"""Command-line entry point: render the todo page or apply one action to it.

Usage:
    todo-ui --view completed render
    todo-ui add "Buy milk"
    todo-ui toggle 5
    todo-ui delete 7
"""

import argparse
import asyncio
import logging
import sys
from contextlib import asynccontextmanager

from pydantic import ValidationError

from todo_ui.client import TrpcClient, TrpcTodoApi
from todo_ui.components import IndexPage
from todo_ui.config import Settings, get_settings
from todo_ui.errors import TodoUIError
from todo_ui.models import Status
from todo_ui.views import ALL_VIEW, TodoPage

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@asynccontextmanager
async def open_api(settings: Settings):
    async with TrpcClient.from_settings(settings) as client:
        yield TrpcTodoApi(client)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo-ui", description="Render and drive the todo page")
    parser.add_argument("--api-url", default=None, help="tRPC base URL (env: TODO_UI_API_URL)")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (env: TODO_UI_LOG_LEVEL)",
    )
    parser.add_argument(
        "--view",
        default=ALL_VIEW,
        choices=[ALL_VIEW] + [s.value for s in Status],
        help="Tab to render (default: all)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("render", help="Print the page HTML")

    p_add = subparsers.add_parser("add", help="Create a todo, then print the page")
    p_add.add_argument("body", help="Todo text")

    p_toggle = subparsers.add_parser("toggle", help="Flip a todo's status, then print the page")
    p_toggle.add_argument("id", type=int, help="Todo id")

    p_delete = subparsers.add_parser("delete", help="Delete a todo, then print the page")
    p_delete.add_argument("id", type=int, help="Todo id")

    return parser


async def apply_action(page: TodoPage, args: argparse.Namespace):
    """Run the requested mutation through the page's view models.

    Raises:
        TodoUIError: If the todo does not exist or the mutation failed.
    """
    if args.command == "add":
        await page.create_form.submit(args.body)
        mutation = page.create_form.create_todo
    elif args.command == "toggle":
        model = page.views[ALL_VIEW]
        todos = await model.fetch()
        if model.error is not None:
            raise model.error
        todo = next((t for t in todos if t.id == args.id), None)
        if todo is None:
            raise TodoUIError(f"No todo with id {args.id}")
        await model.toggle_status(todo)
        mutation = model.update_status
    elif args.command == "delete":
        model = page.views[ALL_VIEW]
        await model.delete(args.id)
        mutation = model.delete_todo
    else:
        return

    if mutation.error is not None:
        raise mutation.error


async def run(args: argparse.Namespace, api) -> str:
    page = TodoPage(api)
    page.select_view(args.view)
    await apply_action(page, args)
    return await IndexPage(page=page).render()


async def _main(args: argparse.Namespace, settings: Settings) -> str:
    async with open_api(settings) as api:
        return await run(args, api)


def main(argv=None):
    """Run the todo-ui CLI."""
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings(api_url=args.api_url, log_level=args.log_level)
    except ValidationError as e:
        print(f"Error: invalid settings\n\n{e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        html = asyncio.run(_main(args, settings))
    except TodoUIError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(html)


if __name__ == "__main__":
    main()
