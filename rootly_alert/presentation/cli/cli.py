"""
CLI Module

Architectural Intent:
- Command-line interface and GitHub Action entry point for rootly-alert
- Delegates to application use cases via composition root
- Supports --verbose/--debug flags for log level control

Design Decisions:
- Every action input can be given as a flag; unset flags fall back to the
  runner's INPUT_* variables
- Any Exception from the pipeline marks the step failed with its message
"""

import argparse
import asyncio
import logging
import os
import sys
import traceback
from typing import Optional

from rootly_alert.composition_root import create_container
from rootly_alert.domain.value_objects.entity_kind import EntityKind
from rootly_alert.infrastructure.action_io import set_failed, set_output
from rootly_alert.infrastructure.config import load_config, load_inputs
from rootly_alert.infrastructure.logging import configure_logging

ALERT_ID_OUTPUT = "alert-id"

_INPUT_FLAGS = (
    ("--api-key", "api_key", "Rootly API key (Bearer token)"),
    ("--summary", "summary", "Alert summary"),
    ("--details", "details", "Alert description"),
    (
        "--notification-target-type",
        "notification_target_type",
        "User, Service, EscalationPolicy or Group (case-insensitive)",
    ),
    ("--notification-target", "notification_target", "Name or email of the target"),
    ("--alert-urgency", "alert_urgency", "Alert urgency name (default: High)"),
    ("--external-id", "external_id", "External ID for the alert"),
    ("--external-url", "external_url", "External URL for the alert"),
    ("--deduplication-key", "deduplication_key", "Deduplication key"),
    ("--services", "services", "Comma-separated service names"),
    ("--groups", "groups", "Comma-separated alert group names"),
    ("--labels", "labels", "Comma-separated key:value labels"),
    ("--environments", "environments", "Comma-separated environment names"),
)

_LOOKUP_KINDS = {kind.name.lower().replace("_", "-"): kind for kind in EntityKind}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rootly-alert",
        description="Create Rootly alerts from named users, services and groups",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit structured JSON logs"
    )
    parser.add_argument(
        "--github-actions",
        action="store_true",
        help="Emit logs as workflow commands (default when GITHUB_ACTIONS=true)",
    )
    parser.add_argument("--config", "-c", help="Path to JSON config file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    create_parser = subparsers.add_parser("create", help="Create an alert")
    for flag, dest, help_text in _INPUT_FLAGS:
        create_parser.add_argument(flag, dest=dest, default=None, help=help_text)
    create_parser.add_argument(
        "--set-as-noise",
        dest="set_as_noise",
        action="store_const",
        const=True,
        default=None,
        help="Mark the alert as noise",
    )

    lookup_parser = subparsers.add_parser(
        "lookup", help="Resolve a single name to its Rootly id"
    )
    lookup_parser.add_argument(
        "--kind", "-k", required=True, choices=sorted(_LOOKUP_KINDS), help="Entity kind"
    )
    lookup_parser.add_argument("--api-key", dest="api_key", default=None)
    lookup_parser.add_argument("name", help="Name (or email, for users) to resolve")

    return parser


def _log_level(args: argparse.Namespace, configured: str, in_actions: bool) -> int:
    if args.debug:
        return logging.DEBUG
    if args.verbose:
        return logging.INFO
    if in_actions:
        # The runner hides ::debug:: lines unless step debugging is on.
        return logging.DEBUG
    return getattr(logging, configured.upper(), logging.WARNING)


async def _create(args: argparse.Namespace, config, verbose: bool) -> None:
    overrides = {dest: getattr(args, dest) for _, dest, _ in _INPUT_FLAGS}
    inputs = load_inputs().merged(set_as_noise=args.set_as_noise, **overrides)
    container = create_container(inputs.api_key, config)

    try:
        alert_id = await container.trigger_alert.execute(inputs)
    except Exception as e:
        if verbose:
            traceback.print_exc()
        set_failed(str(e))
    finally:
        await container.rootly_adapter.aclose()

    set_output(ALERT_ID_OUTPUT, alert_id)
    if alert_id:
        print(f"[+] Created alert {alert_id}")
    else:
        print("[-] Alert was not created.")


async def _lookup(args: argparse.Namespace, config) -> None:
    api_key = args.api_key if args.api_key is not None else load_inputs().api_key
    container = create_container(api_key, config)
    try:
        entity_id = await container.rootly_adapter.lookup_id(
            _LOOKUP_KINDS[args.kind], args.name
        )
    finally:
        await container.rootly_adapter.aclose()

    if not entity_id:
        print(f"[-] No {args.kind} found for '{args.name}'")
        sys.exit(1)
    print(entity_id)


async def async_main(argv: Optional[list[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    in_actions = args.github_actions or os.environ.get("GITHUB_ACTIONS") == "true"
    configure_logging(
        level=_log_level(args, config.log_level, in_actions),
        json_format=args.json_logs,
        github_actions=in_actions,
    )

    verbose = args.verbose or args.debug

    if args.command == "create":
        await _create(args, config, verbose)
        return

    if args.command == "lookup":
        await _lookup(args, config)
        return

    parser.print_help()


def main():
    asyncio.run(async_main())


if __name__ == "__main__":
    main()
