# What it does: Manages all read/write operations for the `.gitlet/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os
from .errors import InvalidConfigKey

DEFAULTS = {
    'core': {'abbrev': '7'},
    'log': {'dateformat': '%a %b %d %H:%M:%S %Y'},
}


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(repo_root, '.gitlet', 'config')


def read_config(repo_root): # Reads the config file layered over the built-in defaults
    config = configparser.ConfigParser(interpolation=None)
    config.read_dict(DEFAULTS)
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def split_key(key):
    section, _, option = key.partition('.')
    if not section or not option:
        raise InvalidConfigKey()
    return section, option


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    section, option = split_key(key)

    config_path = get_config_path(repo_root)
    config = configparser.ConfigParser(interpolation=None)
    if os.path.exists(config_path):
        config.read(config_path)

    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(config_path, 'w') as configfile:
        config.write(configfile)


def get_abbrev(config): # Number of id characters shown in one-line feedback
    try:
        return max(4, config.getint('core', 'abbrev'))
    except ValueError:
        return int(DEFAULTS['core']['abbrev'])


def get_date_format(config):
    return config.get('log', 'dateformat')
