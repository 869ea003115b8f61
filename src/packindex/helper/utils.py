import configparser
import logging
import os
import sys

CONFIG_FILE = "packindex.ini"
CONFIG_SECTION = "packindex"

DEFAULTS = {
    "index_path": "index.json",
    "pack_validator": "corsair mappings validate",
}


def get_config_path() -> str:
    return os.getenv("PACKINDEX_CONFIG", CONFIG_FILE)


def get_config():
    config = configparser.ConfigParser()
    config.read_dict({CONFIG_SECTION: DEFAULTS})
    config_path = get_config_path()
    if os.path.exists(config_path):
        config.read(config_path)
    return config[CONFIG_SECTION]


def default_index_path() -> str:
    return os.path.join(os.getcwd(), get_config()["index_path"])


def configure_logging():
    level = logging.getLevelName(os.getenv("PACKINDEX_LOG_LEVEL", "WARNING").upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(stream=sys.stderr, level=level)
