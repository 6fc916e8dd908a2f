"""Command-line front-end for the school list."""

import asyncio
import sys

import httpx

from app.core.config import settings
from app.core.http import get_http_client
from app.core.observability import setup_logging
from app.schemas.school import SchoolDraft
from app.services.school_api import SchoolApiClient
from app.services.school_list import SchoolListController
from app.views.school_list import render_school_list

USAGE = """Usage: python main.py <command>
Commands:
  list
  create <name> [address] [phone]
  update <id> <name> [address] [phone]
  delete <id> [--yes]"""


async def prompt_confirm(message: str) -> bool:
    """Ask a yes/no question on the terminal; anything but yes declines."""
    answer = await asyncio.to_thread(input, f"{message} [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def _draft(values: list[str], default: str | None) -> SchoolDraft:
    name, *rest = values
    address = rest[0] if len(rest) > 0 else default
    phone = rest[1] if len(rest) > 1 else default
    return SchoolDraft(name=name, address=address, phone=phone)


async def run(args: list[str], client: httpx.AsyncClient, confirm=prompt_confirm) -> int:
    """Run one command against the API. Returns the process exit code."""
    command, params = args[0], args[1:]
    assume_yes = "--yes" in params
    params = [p for p in params if p != "--yes"]

    if assume_yes:
        confirm = lambda _: True  # noqa: E731

    controller = SchoolListController(SchoolApiClient(client), confirm)
    state = await controller.load()

    if command == "list":
        pass
    elif command == "create":
        if not 1 <= len(params) <= 3:
            print(USAGE)
            return 2
        controller.open_create()
        state = await controller.create(_draft(params, ""))
    elif command in ("update", "delete"):
        if not params or not params[0].isdecimal():
            print(USAGE)
            return 2
        school_id = int(params[0])
        if command == "delete":
            state = await controller.delete(school_id)
        else:
            if not 2 <= len(params) <= 4:
                print(USAGE)
                return 2
            state = await controller.update(school_id, _draft(params[1:], None))
    else:
        print(f"Unknown command: {command}")
        return 2

    print(render_school_list(state))
    return 1 if state.error_message else 0


async def _main(args: list[str]) -> int:
    async with get_http_client() as client:
        return await run(args, client)


def main() -> None:
    """CLI entry point."""
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)

    setup_logging("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)
    sys.exit(asyncio.run(_main(sys.argv[1:])))


if __name__ == "__main__":
    main()
