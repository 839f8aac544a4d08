import os
from configparser import ConfigParser, NoOptionError, NoSectionError
from typing import Any, List, Optional, Tuple


class ConfigManager:
    """
    Immutable configuration manager - reads config files once and answers
    option lookups for the logger, the keymap and the CLI
    """

    def __init__(self, config_file: Optional[str] = None):
        self.base_config = self._load_configs(config_file)

    def _load_configs(self, config_file: Optional[str] = None) -> ConfigParser:
        """
        Load and merge configuration files
        :param config_file: optional path to a custom config file
        :return: ConfigParser object
        """
        # Get the default config file path and make sure it exists
        default_config_file = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.ini')
        if not os.path.exists(default_config_file):
            raise FileNotFoundError(f'Could not find the default config file at {default_config_file}')

        config = ConfigParser()
        config.read(default_config_file, encoding='utf-8')

        # Get the user config location from the default config file and check and read it
        if 'user_config' in config['DEFAULT']:
            user_config = self.resolve_file_path(config['DEFAULT']['user_config'])
            if user_config is not None:
                config.read(user_config, encoding='utf-8')

        # If a custom config file was specified, check and read it
        if config_file is not None:
            file = self.resolve_file_path(config_file)
            if file is None:
                raise FileNotFoundError(f'Could not find the custom config file at {config_file}')
            config.read(file, encoding='utf-8')

        return config

    def get_option(self, section: str, option: str, fallback: Any = None) -> Any:
        """
        Get a setting from the configuration
        :param section: the section to get the setting from
        :param option: the option to get
        :param fallback: the value to return if the option is not found
        :return: the setting value
        """
        try:
            return self.fix_values(self.base_config.get(section, option))
        except (NoSectionError, NoOptionError):
            return fallback

    def keymap_entries(self, section: str = 'KEYMAP') -> List[Tuple[str, str]]:
        """
        Raw (action, chords) pairs of a keymap section, in file order.
        Values are returned uninterpreted; options inherited from DEFAULT are skipped.
        """
        if not self.base_config.has_section(section):
            return []
        inherited = set(self.base_config.defaults())
        entries = []
        for option in self.base_config.options(section):
            if option in inherited:
                continue
            entries.append((option, self.base_config.get(section, option, raw=True)))
        return entries

    @staticmethod
    def fix_values(value: Any) -> Any:
        """Fix some values due to how they are stored and retrieved with ConfigParser"""
        if isinstance(value, str):
            value = value.strip()

            # Handle path expansion only for strings that clearly look like paths
            if value.startswith(('~', './', '/', '\\')):
                expanded = os.path.expanduser(value)
                if expanded != value:
                    value = expanded

            # Check for integer values
            if value.isdigit():
                return int(value)

            # Handle boolean values
            lower_value = value.lower()
            if lower_value in ('true', 'yes', 'on'):
                return True
            if lower_value in ('false', 'no', 'off'):
                return False

            # Remove quotes if present
            if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
                return value[1:-1]

        # Return as is for other cases
        return value

    @staticmethod
    def resolve_file_path(file_name: str, base_dir: Optional[str] = None) -> Optional[str]:
        """
        Works out the path to a file based on the filename and optional base directory
        :param file_name: name of the file to resolve the path to
        :param base_dir: optional base directory to resolve the path from
        :return: absolute path to the file or None
        """
        if file_name is None:
            return None

        # If base_dir is not specified, use the current working directory
        if base_dir is None:
            base_dir = os.getcwd()
        # If base_dir is a relative path, convert it to an absolute path based on the main.py directory
        elif not os.path.isabs(base_dir):
            main_dir = os.path.dirname(os.path.abspath(__file__))
            base_dir = os.path.abspath(os.path.join(main_dir, base_dir))
        base_dir = os.path.expanduser(base_dir)

        if not os.path.isdir(base_dir):
            return None

        file_name = os.path.expanduser(file_name)
        if os.path.isabs(file_name):
            return file_name if os.path.isfile(file_name) else None

        full_path = os.path.join(base_dir, file_name)
        if os.path.isfile(full_path):
            return full_path
        return None
