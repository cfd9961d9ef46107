"""
SWU Data Arg Parser to determine what actions to take
"""

import argparse
import pathlib
import sys
from typing import List, Optional

from . import constants


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments from user to determine how to spawn up
    SWU Data and complete the request.
    :param argv: Arguments to parse, defaults to the process arguments
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("swu_data")
    stages = parser.add_subparsers(dest="stage", metavar="STAGE", required=True)

    scrape_parser = stages.add_parser(
        "scrape",
        help="Scrape the card API and write the normalized cards to a JSON file.",
    )
    scrape_parser.add_argument(
        "--cache",
        "-c",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Store and use cached responses for faster development. "
        "Enabled by default when run from the project root.",
    )
    scrape_parser.add_argument(
        "--endpoint",
        "-e",
        type=str,
        metavar="URL",
        help="The URL to make GET requests to for the card data.",
    )
    scrape_parser.add_argument(
        "--output",
        "-o",
        type=pathlib.Path,
        default=constants.DEFAULT_CARDS_FILE,
        metavar="FILE",
        help="The .json file to write the card data to.",
    )
    scrape_parser.add_argument(
        "--compact",
        action="store_true",
        help="When dumping the JSON file, minify the contents instead of prettifying them.",
    )

    download_parser = stages.add_parser(
        "download",
        help="Download the card art referenced by a scraped JSON file.",
    )
    download_parser.add_argument(
        "--input",
        "-i",
        type=pathlib.Path,
        default=constants.DEFAULT_CARDS_FILE,
        metavar="FILE",
        help="The .json file of cards to read from.",
    )
    download_parser.add_argument(
        "--output",
        "-o",
        type=pathlib.Path,
        default=constants.DEFAULT_ASSETS_PATH,
        metavar="DIR",
        help="The directory to write the images to. It is emptied first.",
    )
    download_parser.add_argument(
        "--concurrency",
        "-j",
        type=int,
        metavar="N",
        help="The number of concurrent downloads to allow.",
    )

    if argv is None:
        argv = sys.argv[1:]

    # Show help menu if no arguments are passed
    if not argv:
        parser.print_help()
        parser.exit()

    parsed_args = parser.parse_args(argv)

    if parsed_args.stage == "download" and parsed_args.concurrency is not None:
        if parsed_args.concurrency < 1:
            download_parser.error("--concurrency must be at least 1")

    return parsed_args
