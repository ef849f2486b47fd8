"""Command line entry point: check all configured products once."""

import argparse
from typing import List, Optional

from dotenv import load_dotenv

from price_alert.configs import Settings, settings
from price_alert.logger_config import get_logger
from price_alert.repositories.config_repository import ConfigRepository
from price_alert.services.notifications.base import BaseNotifier
from price_alert.services.notifications.desktop_notifier import DesktopNotifier, LogNotifier
from price_alert.services.price_check.models import ConfigurationError
from price_alert.services.price_check.normalizer import PriceNormalizer
from price_alert.services.price_check.pipeline import PriceFetchPipeline
from price_alert.services.price_check.service import PriceCheckService

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="price-alert",
        description="Notify when tracked products drop below their target price.",
    )
    parser.add_argument("--config", help="Path of the products/stores JSON file.")
    parser.add_argument("--env-file", help="Load settings from this .env file.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log alerts instead of showing desktop notifications.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a single price check over every configured product."""
    args = build_parser().parse_args(argv)

    active = settings
    if args.env_file:
        load_dotenv(args.env_file, override=True)
        active = Settings()

    logger = get_logger("price_alert", (args.log_level or active.LOG_LEVEL).upper())

    config_path = args.config or active.CONFIG_PATH
    try:
        config = ConfigRepository(config_path).load()
    except ConfigurationError as exc:
        logger.critical("%s", exc)
        return 1

    notifier: BaseNotifier
    if args.dry_run:
        notifier = LogNotifier()
    else:
        notifier = DesktopNotifier(
            app_name=active.NOTIFICATION_APP_NAME,
            timeout=active.NOTIFICATION_TIMEOUT,
        )

    pipeline = PriceFetchPipeline(
        normalizer=PriceNormalizer(),
        user_agent=active.USER_AGENT,
        timeout=active.REQUEST_TIMEOUT,
        parser=active.HTML_PARSER,
    )
    service = PriceCheckService(
        config,
        pipeline,
        notifier,
        notification_title=active.NOTIFICATION_TITLE,
        skip_unmatched=active.SKIP_UNMATCHED_PRICES,
    )
    service.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
