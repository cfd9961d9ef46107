"""
SWU Data Configuration Service
"""

import configparser
import logging
import pathlib

from singleton_decorator import singleton

from . import constants


@singleton
class SwuDataConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    swu_data_version: str
    use_cache: bool
    endpoint: str
    locale: str
    page_size: int
    concurrency: int

    def __init__(self, config_path: pathlib.Path = constants.CONFIG_PATH):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()
        self.logger.debug(f"Loading configuration from {config_path}")
        self.config_parser.read(str(config_path))

        self.swu_data_version = self.get("SWU_DATA", "version", "NO_VERSION_FOUND")
        if not self.has_option("SWU_DATA", "version"):
            self.logger.warning(
                "Key 'version' is missing from Section 'SWU_DATA' in config file"
            )

        self.use_cache = self.get_boolean("SWU_DATA", "use_cache", False)
        self.endpoint = self.get("Scraper", "endpoint", constants.DEFAULT_ENDPOINT)
        self.locale = self.get("Scraper", "locale", constants.DEFAULT_LOCALE)
        self.page_size = self.get_int(
            "Scraper", "page_size", constants.DEFAULT_PAGE_SIZE
        )
        self.concurrency = self.get_int(
            "Downloader", "concurrency", constants.DEFAULT_CONCURRENCY
        )

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_boolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Boolean)
        """
        if self.has_option(section, option):
            return self.config_parser.getboolean(section, option, fallback=fallback)
        return fallback

    def get_int(self, section: str, option: str, fallback: int = 0) -> int:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as an Integer)
        """
        if self.has_option(section, option):
            return self.config_parser.getint(section, option, fallback=fallback)
        return fallback

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
