#!/usr/bin/env python3
"""
CLI script to call Bot Manager API endpoints.

Connection settings come from botman.enc.yaml / a YAML file passed with
--config, or from AKAMAI_* environment variables. Request signing is not
configured here; pass an httpx.Auth to BotmanClient.from_settings() when
using the library directly.

Usage:
    # Analytics cookie values
    python scripts/botman_request.py cookie-values

    # Bot category exception of a security policy
    python scripts/botman_request.py get-category-exception \\
        --config-id 43253 --version 15 --policy-id AAAA_81230

    # Update it from a JSON file
    python scripts/botman_request.py update-category-exception \\
        --config-id 43253 --version 15 --policy-id AAAA_81230 \\
        --payload exception.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from botman_client.botman import (
    BotmanClient,
    BotmanError,
    GetAkamaiBotCategoryActionListRequest,
    GetAkamaiBotCategoryActionRequest,
    GetBotAnalyticsCookieRequest,
    GetBotCategoryExceptionRequest,
    RemoteAPIError,
    UpdateAkamaiBotCategoryActionRequest,
    UpdateBotAnalyticsCookieRequest,
    UpdateBotCategoryExceptionRequest,
    ValidationError,
)
from botman_client.config import check_sops_installed, get_settings
from botman_client.config.sops_loader import is_sops_file
from botman_client.utils import setup_logging

logger = logging.getLogger(__name__)


def read_payload(path: str) -> str:
    """Read a JSON payload from a file, or stdin when path is '-'."""
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")

    try:
        json.loads(text)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Payload is not valid JSON: {e}")
    return text


def add_version_args(parser: argparse.ArgumentParser, policy: bool = True) -> None:
    """Add the configuration / version / policy arguments."""
    parser.add_argument("--config-id", type=int, default=0, help="Security configuration ID")
    parser.add_argument("--version", type=int, default=0, help="Configuration version")
    if policy:
        parser.add_argument("--policy-id", default="", help="Security policy ID")


def add_payload_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--payload",
        type=read_payload,
        help="Path to JSON payload file ('-' for stdin)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Call Bot Manager API endpoints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analytics cookie values
  python scripts/botman_request.py cookie-values

  # Category actions filtered to one category
  python scripts/botman_request.py list-category-actions \\
      --config-id 43253 --version 15 --policy-id AAAA_81230 \\
      --category-id cc9c3f89-e179-4892-89cf-d5e623ba9dc7
        """,
    )
    parser.add_argument(
        "--config",
        help="Path to YAML or SOPS-encrypted config file",
    )
    parser.add_argument(
        "--section",
        default="default",
        help="Config section / AKAMAI_{SECTION}_* env prefix",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("cookie-values", help="Get bot analytics cookie values")

    p = sub.add_parser("get-cookie", help="Get bot analytics cookie settings")
    add_version_args(p, policy=False)

    p = sub.add_parser("update-cookie", help="Update bot analytics cookie settings")
    add_version_args(p, policy=False)
    add_payload_arg(p)

    p = sub.add_parser("get-category-exception", help="Get bot category exception")
    add_version_args(p)

    p = sub.add_parser(
        "update-category-exception", help="Update bot category exception"
    )
    add_version_args(p)
    add_payload_arg(p)

    p = sub.add_parser("list-category-actions", help="List Akamai bot category actions")
    add_version_args(p)
    p.add_argument("--category-id", default="", help="Only show this category")

    p = sub.add_parser("get-category-action", help="Get an Akamai bot category action")
    add_version_args(p)
    p.add_argument("--category-id", default="", help="Akamai bot category ID")

    p = sub.add_parser(
        "update-category-action", help="Update an Akamai bot category action"
    )
    add_version_args(p)
    p.add_argument("--category-id", default="", help="Akamai bot category ID")
    add_payload_arg(p)

    return parser


def run_command(client: BotmanClient, args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch the selected subcommand."""
    command = args.command

    if command == "cookie-values":
        return client.get_bot_analytics_cookie_values()
    if command == "get-cookie":
        return client.get_bot_analytics_cookie(
            GetBotAnalyticsCookieRequest(config_id=args.config_id, version=args.version)
        )
    if command == "update-cookie":
        return client.update_bot_analytics_cookie(
            UpdateBotAnalyticsCookieRequest(
                config_id=args.config_id,
                version=args.version,
                json_payload=args.payload,
            )
        )
    if command == "get-category-exception":
        return client.get_bot_category_exception(
            GetBotCategoryExceptionRequest(
                config_id=args.config_id,
                version=args.version,
                security_policy_id=args.policy_id,
            )
        )
    if command == "update-category-exception":
        return client.update_bot_category_exception(
            UpdateBotCategoryExceptionRequest(
                config_id=args.config_id,
                version=args.version,
                security_policy_id=args.policy_id,
                json_payload=args.payload,
            )
        )
    if command == "list-category-actions":
        return client.get_akamai_bot_category_action_list(
            GetAkamaiBotCategoryActionListRequest(
                config_id=args.config_id,
                version=args.version,
                security_policy_id=args.policy_id,
                category_id=args.category_id,
            )
        )
    if command == "get-category-action":
        return client.get_akamai_bot_category_action(
            GetAkamaiBotCategoryActionRequest(
                config_id=args.config_id,
                version=args.version,
                security_policy_id=args.policy_id,
                category_id=args.category_id,
            )
        )
    if command == "update-category-action":
        return client.update_akamai_bot_category_action(
            UpdateAkamaiBotCategoryActionRequest(
                config_id=args.config_id,
                version=args.version,
                security_policy_id=args.policy_id,
                category_id=args.category_id,
                json_payload=args.payload,
            )
        )

    raise ValueError(f"Unknown command: {command}")


def main() -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if args.config and is_sops_file(Path(args.config)) and not check_sops_installed():
        logger.error("SOPS is required to read encrypted config files")
        return 2

    settings = get_settings(args.config, args.section)
    setup_logging(level=logging.DEBUG if args.verbose else settings.log_level)

    try:
        client = BotmanClient.from_settings(settings)
    except ValueError as e:
        logger.error(str(e))
        return 2

    with client:
        try:
            result = run_command(client, args)
        except ValidationError as e:
            logger.error(f"Invalid request: {e}")
            return 2
        except RemoteAPIError as e:
            print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
            return 1
        except BotmanError as e:
            logger.error(str(e))
            return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
