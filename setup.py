"""
Installation setup for swu_data
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("swu_data/resources/swu_data.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))

setuptools.setup(
    name="swu_data",
    version=config.get("SWU_DATA", "version", fallback="1.0.0+fallback"),
    description="Star Wars: Unlimited card data scraper and art downloader",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read()
    if project_root.joinpath("README.md").is_file()
    else "",
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python",
        "Topic :: Database",
    ],
    keywords=[
        "Card Games",
        "Collectible",
        "JSON",
        "Star Wars Unlimited",
        "SWU",
        "Trading Cards",
    ],
    python_requires=">=3.10",
    include_package_data=True,
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    package_data={"swu_data": ["resources/*.properties"]},
    install_requires=project_root.joinpath("requirements.txt")
    .open(encoding="utf-8")
    .readlines()
    if project_root.joinpath("requirements.txt").is_file()
    else [],  # Use the requirements file, if able
    extras_require={
        "test": project_root.joinpath("requirements_test.txt")
        .open(encoding="utf-8")
        .readlines()
        if project_root.joinpath("requirements_test.txt").is_file()
        else [],
    },
)
