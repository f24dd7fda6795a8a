"""
Command-line interface for the Playable Catalog client.

Lists the catalog and resolves launch destinations.
"""

import asyncio
import json
import sys
import webbrowser
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from playable_catalog.catalog import (
    CatalogStore,
    Entry,
    label_for,
    launch_options,
    resolve_launch,
)
from playable_catalog.config import get_settings
from playable_catalog.logger import get_logger, setup_logging

logger = get_logger(__name__, component="cli")


class CLIOutput(BaseModel):
    """Structured output for CLI commands."""

    success: bool
    command: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] | list[Any] | None = None
    error: str | None = None


def print_json(output: CLIOutput) -> None:
    """Print output as formatted JSON."""
    print(json.dumps(output.model_dump(mode="json"), indent=2, ensure_ascii=False))


def describe_entry(entry: Entry) -> dict[str, Any]:
    """Flatten an entry into what a listing shows."""
    return {
        "id": entry.id,
        "name": entry.display_name,
        "label": label_for(entry),
        "options": [
            {"label": option.label, "path": option.destination.path}
            for option in launch_options(entry)
        ],
    }


async def cmd_list() -> None:
    """Fetch the catalog once and print every entry."""
    async with CatalogStore() as store:
        refreshed = await store.refresh()
        entries = store.entries

    output = CLIOutput(
        success=refreshed,
        command="list",
        data=[describe_entry(entry) for entry in entries],
        error=None if refreshed else "Catalog could not be fetched",
    )
    print_json(output)


async def cmd_launch(entry_id: str, sub_id: str, open_browser: bool = False) -> None:
    """Resolve a launch destination, optionally opening it in the browser."""
    destination = resolve_launch(entry_id, sub_id)
    url = destination.url(get_settings().catalog.base_url)

    logger.info("Resolved launch destination", entry_id=entry_id, sub_id=sub_id, url=url)

    opened = False
    if open_browser:
        opened = webbrowser.open(url)

    output = CLIOutput(
        success=True,
        command="launch",
        data={
            "entry_id": destination.entry_id,
            "sub_id": destination.sub_id,
            "path": destination.path,
            "url": url,
            "opened": opened,
        },
    )
    print_json(output)


async def cmd_test_config() -> None:
    """Test configuration loading."""
    settings = get_settings()

    output = CLIOutput(
        success=True,
        command="test-config",
        data={
            "environment": settings.environment,
            "catalog_base_url": settings.catalog.base_url,
            "catalog_list_path": settings.catalog.list_path,
            "catalog_timeout_seconds": settings.catalog.timeout_seconds,
            "log_level": settings.logging.level,
            "log_format": settings.logging.format,
        },
    )
    print_json(output)


def print_usage() -> None:
    """Print CLI usage information."""
    usage = """
Playable Catalog CLI
====================

Usage: playable-catalog <command> [arguments]

Commands:
  test-config                        Test configuration loading
  list                               Fetch the catalog and list entries
  launch <entry_id> <sub_id>         Resolve a launch destination

Options:
  --open                             (launch) Open the destination in the browser

Examples:
  playable-catalog list
  playable-catalog launch g2 i1 --open
"""
    print(usage)


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(1)

    setup_logging()
    command = sys.argv[1]

    try:
        if command == "test-config":
            asyncio.run(cmd_test_config())

        elif command == "list":
            asyncio.run(cmd_list())

        elif command == "launch":
            args = [a for a in sys.argv[2:] if a != "--open"]
            if len(args) < 2:
                print("Error: entry_id and sub_id required")
                sys.exit(1)
            asyncio.run(cmd_launch(args[0], args[1], open_browser="--open" in sys.argv))

        elif command in ("help", "--help", "-h"):
            print_usage()

        else:
            print(f"Unknown command: {command}")
            print_usage()
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.exception("CLI error", error=str(e))
        output = CLIOutput(
            success=False,
            command=command,
            error=str(e),
        )
        print_json(output)
        sys.exit(1)


if __name__ == "__main__":
    main()
