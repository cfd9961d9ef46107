"""
SWU Data Main Executor
"""

import argparse
import logging
import os
import sys
import traceback

from swu_data import constants

LOGGER: logging.Logger = logging.getLogger(__name__)


def use_cache_by_default() -> bool:
    """
    Cached responses are meant for development, so they are on by default
    when running from a checkout of the project
    :return: If the cache should be used when neither flag nor config say so
    """
    return os.path.realpath(os.getcwd()) == os.path.realpath(constants.TOP_LEVEL_DIR)


def scrape(args: argparse.Namespace) -> None:
    """
    Scrape every card from the card API and dump them to a file
    :param args: Parsed scrape arguments
    """
    from swu_data.card_builder import build_cards
    from swu_data.output_generator import write_cards_file
    from swu_data.providers import SwuApiProvider
    from swu_data.swu_data_config import SwuDataConfig

    if args.cache is not None:
        SwuDataConfig().use_cache = args.cache
    elif not SwuDataConfig().use_cache:
        SwuDataConfig().use_cache = use_cache_by_default()

    provider = SwuApiProvider(endpoint=args.endpoint)
    cards = build_cards(provider.iterate_raw_cards())

    write_cards_file(args.output, cards, pretty_print=not args.compact)


def download(args: argparse.Namespace) -> None:
    """
    Download all card art referenced by a scraped file
    :param args: Parsed download arguments
    """
    from swu_data.asset_downloader import download_card_art
    from swu_data.output_generator import load_cards_file
    from swu_data.swu_data_config import SwuDataConfig

    cards = load_cards_file(args.input)
    download_card_art(
        cards, args.output, args.concurrency or SwuDataConfig().concurrency
    )


def dispatcher(args: argparse.Namespace) -> None:
    """
    SWU Data Dispatcher
    """
    if args.stage == "scrape":
        scrape(args)
    elif args.stage == "download":
        download(args)
    else:
        raise ValueError(f"Unknown stage {args.stage}")


def main() -> None:
    """
    SWU Data safe main call
    """
    # Must happen before anything imports the network stack
    from gevent import monkey

    monkey.patch_all()

    from swu_data.arg_parser import parse_args
    from swu_data.swu_data_config import SwuDataConfig
    from swu_data.utils import init_logger

    args = parse_args()
    init_logger()

    LOGGER.info(f"Starting swu_data {SwuDataConfig().swu_data_version} ({args.stage})")

    try:
        dispatcher(args)
    except Exception as error:
        LOGGER.fatal(f"Exception caught: {error} {traceback.format_exc()}")
        sys.exit(1)


if __name__ == "__main__":
    main()
