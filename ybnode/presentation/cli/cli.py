"""
CLI Module

Architectural Intent:
- Command-line interface for ybnode
- Entry point for composing, running and seeding
- Delegates to the composer and the RunNodeCommand use case via the composition root
- Supports --verbose/--debug flags for log level control
"""

import argparse
import asyncio
import json
import logging
import shlex
import sys
import traceback
from ybnode.application.dtos.node_command_dtos import NodeCommandRequest
from ybnode.composition_root import create_container
from ybnode.domain.exceptions import NodeCommandError
from ybnode.domain.value_objects.command_types import NodeCommandType
from ybnode.infrastructure.config import load_config
from ybnode.infrastructure.logging import configure_logging, level_from_name
from ybnode.infrastructure.repositories.catalog_seed import seed_catalog

logger = logging.getLogger(__name__)

COMMAND_CHOICES = [t.verb for t in NodeCommandType]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ybnode: compose and run node lifecycle commands"
    )
    parser.add_argument("--config", "-c", help="Path to ybnode JSON config")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit logs as JSON lines"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    compose_parser = subparsers.add_parser(
        "compose", help="Print the provisioning command without running it"
    )
    compose_parser.add_argument("node_command", choices=COMMAND_CHOICES)
    compose_parser.add_argument(
        "--params", "-p", required=True, help="JSON file with the node parameters"
    )

    run_parser = subparsers.add_parser(
        "run", help="Compose and run a node command"
    )
    run_parser.add_argument("node_command", choices=COMMAND_CHOICES)
    run_parser.add_argument(
        "--params", "-p", required=True, help="JSON file with the node parameters"
    )

    seed_parser = subparsers.add_parser(
        "seed", help="Load universes, access keys, releases and nodes into the catalog"
    )
    seed_parser.add_argument("catalog_file", help="JSON catalog document")

    return parser


def _read_json(path: str) -> dict:
    with open(path) as f:
        return json.load(f)


async def async_main():
    parser = _build_parser()
    args = parser.parse_args()

    config = load_config(args.config)
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = level_from_name(config.log_level)
    configure_logging(level=level, json_format=args.json_logs)

    verbose = args.verbose or args.debug

    if args.command is None:
        parser.print_help()
        return

    container = create_container(config)
    try:
        if args.command == "seed":
            try:
                counts = seed_catalog(container.catalog, _read_json(args.catalog_file))
            except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
                print(f"[-] Seeding failed: {e}")
                sys.exit(1)
            summary = ", ".join(f"{count} {kind}" for kind, count in counts.items())
            print(f"[+] Seeded catalog: {summary}")
            return

        try:
            request = NodeCommandRequest(args.node_command, _read_json(args.params))
            params = request.to_params()
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            print(f"[-] Invalid parameters: {e}")
            sys.exit(1)

        if args.command == "compose":
            try:
                command = container.composer.compose(request.command_type, params)
            except NodeCommandError as e:
                print(f"[-] Composition failed: {e}")
                if verbose:
                    traceback.print_exc()
                sys.exit(1)
            print(shlex.join(command.to_argv(container.config.devops.script)))
            return

        if args.command == "run":
            print(f"[*] Running {request.command} on {params.node_name}...")
            try:
                response = await container.run_node_command.execute(
                    request.command_type, params
                )
            except NodeCommandError as e:
                print(f"[-] Composition failed: {e}")
                if verbose:
                    traceback.print_exc()
                sys.exit(1)
            if response.message:
                print(response.message)
            if not response.ok:
                print(f"[-] {request.command} failed with exit code {response.code}")
                sys.exit(response.code if response.code > 0 else 1)
            print(f"[+] {request.command} succeeded.")
            return
    finally:
        container.close()


def main():
    asyncio.run(async_main())


if __name__ == "__main__":
    main()
