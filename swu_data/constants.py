"""
SWU Data Constants that cannot be changed and are hardcoded intentionally
"""

import os
import pathlib
from typing import Dict, Tuple

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("swu_data").joinpath("resources")
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("swu_data.properties")
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("SWU_DATA_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)

LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("swu_data_logs")

CACHE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath(".swu_data_cache")

DEFAULT_CARDS_FILE: pathlib.Path = ENV_OUT_PATH.joinpath("output", "cards.json")
DEFAULT_ASSETS_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("output", "assets", "cards")

DEFAULT_ENDPOINT: str = "https://admin.starwarsunlimited.com/api/cards"
DEFAULT_LOCALE: str = "en"
DEFAULT_PAGE_SIZE: int = 50
DEFAULT_CONCURRENCY: int = 16

# Upstream orders by card type first, then collector number within the type
CARD_SORT_ORDER: str = "type.sortValue:asc,cardNumber:asc"

# Image sizes, most preferred first
ART_FORMAT_PREFERENCE: Tuple[str, ...] = ("card", "xxsmall")

# CardArt attribute => directory name in the asset tree
ASSET_FACE_DIRECTORIES: Dict[str, str] = {
    "front": "front",
    "back": "back",
    "thumbnail": "thumb",
}
ASSET_NUMBER_WIDTH: int = 3
ASSET_EXTENSION: str = ".png"
