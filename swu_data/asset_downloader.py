"""
Download the card art referenced by a cards file into a local asset tree

Layout: <output>/<front|back|thumb>/<style>/<set>-<number>.png
"""

import logging
import pathlib
import shutil
from typing import Dict, List, Optional, Sequence, Set, Tuple, Union

from . import constants
from .models import Card
from .parallel_call import parallel_call
from .providers.abstract import AbstractProvider
from .utils import get_padded_number

LOGGER = logging.getLogger(__name__)

AssetTarget = Tuple[str, pathlib.Path]


def get_asset_file_name(card: Card) -> str:
    """
    File name shared by every image of a card
    :param card: Card
    :return: File name, such as sor-001.png
    """
    number = get_padded_number(card.number, constants.ASSET_NUMBER_WIDTH)
    return f"{card.set_code}-{number}{constants.ASSET_EXTENSION}"


def resolve_asset_targets(
    cards: Sequence[Card], output_path: pathlib.Path
) -> List[AssetTarget]:
    """
    Enumerate every image to download, and where it goes.
    Two artworks of the same style share a path; the first one listed wins.
    :param cards: Cards to pull images from
    :param output_path: Root of the asset tree
    :return: List of (url, destination) pairs, destinations all distinct
    """
    targets: List[AssetTarget] = []
    destinations: Set[pathlib.Path] = set()
    for card in cards:
        file_name = get_asset_file_name(card)
        for art in card.art:
            for face, directory in constants.ASSET_FACE_DIRECTORIES.items():
                details = getattr(art, face)
                if details is None:
                    continue

                destination = output_path.joinpath(
                    directory, art.style.value, file_name
                )
                if destination in destinations:
                    LOGGER.warning(
                        f"{card.set_code} #{card.number}: skipping {details.url}, "
                        f"{destination} is already taken"
                    )
                    continue

                destinations.add(destination)
                targets.append((details.url, destination))
    return targets


def reset_output_directory(output_path: pathlib.Path) -> None:
    """
    Recreate the asset tree from scratch
    :param output_path: Root of the asset tree
    """
    if output_path.exists():
        LOGGER.info(f"Removing previous assets in {output_path}")
        shutil.rmtree(output_path)
    output_path.mkdir(parents=True)


class CardArtDownloader(AbstractProvider):
    """
    Fetches card images from the upstream CDN
    """

    def __init__(self) -> None:
        super().__init__(self._build_http_header())

    def _build_http_header(self) -> Dict[str, str]:
        """
        Construct the HTTP header
        :return: HTTP header
        """
        return {"Accept": "image/*"}

    def download(
        self, url: str, params: Optional[Dict[str, Union[str, int]]] = None
    ) -> bytes:
        """
        Download an image
        :param url: Image URL
        :param params: Options for URL download
        :return: Image contents
        """
        return self.get_or_fail(url, params).content

    def download_to_file(self, url: str, destination: pathlib.Path) -> pathlib.Path:
        """
        Download an image and write it to disk
        :param url: Image URL
        :param destination: File to write
        :return: File written
        """
        content = self.download(url)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(content)
        LOGGER.debug(f"Saved {url} to {destination}")
        return destination

    def download_all(
        self, targets: Sequence[AssetTarget], concurrency: int
    ) -> List[pathlib.Path]:
        """
        Download every target, a bounded number at a time.
        The first failed download aborts the rest.
        :param targets: List of (url, destination) pairs
        :param concurrency: Maximum downloads in flight
        :return: Files written
        """
        LOGGER.info(f"Downloading {len(targets)} images, {concurrency} at a time")
        files: List[pathlib.Path] = parallel_call(
            self.download_to_file,
            targets,
            pool_size=concurrency,
        )
        LOGGER.info(f"Downloaded {len(files)} images")
        return files


def download_card_art(
    cards: Sequence[Card], output_path: pathlib.Path, concurrency: int
) -> List[pathlib.Path]:
    """
    Rebuild the asset tree for a set of cards
    :param cards: Cards to pull images from
    :param output_path: Root of the asset tree
    :param concurrency: Maximum downloads in flight
    :return: Files written
    """
    targets = resolve_asset_targets(cards, output_path)
    reset_output_directory(output_path)
    return CardArtDownloader().download_all(targets, concurrency)
