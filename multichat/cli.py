"""
MultiChat command line.

Usage:
    multichat url --page-code PAGE1 --customer-email a@x.com --customer-name A
    multichat url --page-code PAGE1 --customer-email a@x.com --customer-name A \\
        --manager-email m@x.com --manager-name M
    multichat manager-status --data '{"emails": ["m@x.com"], "active": true}'

Connection values default to MULTICHAT_TOKEN / MULTICHAT_BASE_URL /
MULTICHAT_API_VERSION / MULTICHAT_TIMEOUT (environment or .env).
"""

import argparse
import json
import logging
import sys

import httpx
from dotenv import load_dotenv

from multichat.client import MultiChatConfig, MultiChatError, open_chat, update_managers_active_status
from multichat.config.settings import get_settings

logger = logging.getLogger(__name__)


def setup_logging(level: str, verbose: bool = False) -> None:
    """Log to stderr so stdout only carries command output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="multichat", description="MultiChat API client")
    parser.add_argument("--token", help="Bearer token (default: MULTICHAT_TOKEN)")
    parser.add_argument("--base-url", help="Service base URL (default: MULTICHAT_BASE_URL)")
    parser.add_argument("--api-version", help="API version (default: MULTICHAT_API_VERSION or v1)")
    parser.add_argument("--timeout", type=int, help="Request timeout in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    url_parser = subparsers.add_parser("url", help="Resolve participants and print the chat join URL")
    url_parser.add_argument("--page-code", required=True, help="Page-unique code of the chat")
    url_parser.add_argument("--customer-email", default="", help="Customer email")
    url_parser.add_argument("--customer-name", default="", help="Customer display name")
    url_parser.add_argument("--manager-email", default="", help="Manager opening the link")
    url_parser.add_argument("--manager-name", default="", help="Manager display name")
    url_parser.add_argument("--attached-manager-email", default="", help="Manager attached to the order")
    url_parser.add_argument("--attached-manager-name", default="", help="Attached manager display name")

    status_parser = subparsers.add_parser("manager-status", help="Broadcast manager active status")
    status_parser.add_argument("--data", required=True, help="JSON payload forwarded as-is")
    status_parser.add_argument("--status-timeout", type=int, help="Timeout in seconds (default: 60)")

    return parser


def _config_from_args(args: argparse.Namespace, page_unique_code: str = "") -> MultiChatConfig:
    return MultiChatConfig.from_settings(
        get_settings(),
        page_unique_code=page_unique_code,
        token=args.token,
        base_url=args.base_url,
        version=args.api_version,
        timeout=args.timeout,
    )


def run_url(args: argparse.Namespace) -> int:
    config = _config_from_args(args, page_unique_code=args.page_code)
    session = open_chat(
        config,
        args.page_code,
        args.customer_email,
        args.customer_name,
        manager_email=args.manager_email,
        manager_name=args.manager_name,
        attached_manager_email=args.attached_manager_email,
        attached_manager_name=args.attached_manager_name,
    )
    with session:
        print(session.build_url())
    return 0


def run_manager_status(args: argparse.Namespace) -> int:
    try:
        data = json.loads(args.data)
    except json.JSONDecodeError as e:
        print(f"Invalid JSON payload: {e}", file=sys.stderr)
        return 1

    config = _config_from_args(args)
    timeout = args.status_timeout or get_settings().MULTICHAT_STATUS_TIMEOUT
    update_managers_active_status(config, data, timeout=timeout)
    print("Manager active status updated")
    return 0


COMMANDS = {
    "url": run_url,
    "manager-status": run_manager_status,
}


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(get_settings().MULTICHAT_LOG_LEVEL, args.verbose)

    try:
        return COMMANDS[args.command](args)
    except MultiChatError as e:
        logger.debug("MultiChat command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        print(f"Connection error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
