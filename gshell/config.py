import os
import toml
import logging
from dataclasses import dataclass, field
from typing import Optional, Any, Callable, Dict, List
from dotenv import load_dotenv

from .errors import ConfigurationError
from .i18n import LANGUAGE_NAMES, i18n

load_dotenv()

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.expanduser("~/.config/gshell")
DEFAULT_MODEL = "gemini-2.5-flash"

# The TOML section each property is stored under.
KEY_SECTIONS = {
    "GEMINI_API_KEY": "api",
    "GEMINI_API_ENDPOINT": "api",
    "GEMINI_MODEL": "api",
    "CLI_LOG_DIR": "application",
    "SILENT_MODE": "behavior",
    "LANGUAGE": "behavior",
    "CLI_VERBOSE": "behavior",
}

# Environment variables that differ from the property name. LANGUAGE is the
# gettext locale list (e.g. "en_US:en") on most desktops.
ENV_VARS = {
    "LANGUAGE": "GSHELL_LANGUAGE",
}


def parse_assert(name: str, condition: Any, message: str):
    """Raises a ConfigurationError naming the property when the condition fails."""
    if not condition:
        raise ConfigurationError(f"{i18n.t('Invalid config property')} {name}: {message}")


def _parse_string(name: str, value: Any) -> str:
    parse_assert(name, isinstance(value, str), "Must be a string")
    return value.strip()


def _parse_model(name: str, value: Any) -> str:
    model = _parse_string(name, value)
    parse_assert(name, model, "Cannot be empty")
    return model


def _parse_endpoint(name: str, value: Any) -> str:
    endpoint = _parse_string(name, value)
    parse_assert(name, not any(c.isspace() for c in endpoint), "Must not contain whitespace")
    return endpoint


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    parse_assert(name, text in ("true", "false"), "Must be a boolean (true or false)")
    return text == "true"


def _parse_language(name: str, value: Any) -> str:
    language = _parse_string(name, value).lower()
    parse_assert(
        name,
        language in LANGUAGE_NAMES,
        f"Must be one of {', '.join(sorted(LANGUAGE_NAMES))}",
    )
    return language


PARSERS: Dict[str, Callable[[str, Any], Any]] = {
    "GEMINI_API_KEY": _parse_string,
    "GEMINI_API_ENDPOINT": _parse_endpoint,
    "GEMINI_MODEL": _parse_model,
    "CLI_LOG_DIR": _parse_string,
    "SILENT_MODE": _parse_bool,
    "LANGUAGE": _parse_language,
    "CLI_VERBOSE": _parse_bool,
}


def parse_value(key: str, value: Any) -> Any:
    """Validates a raw configuration value and converts it to its typed form."""
    parse_assert(key, key in PARSERS, "Unknown config property")
    return PARSERS[key](key, value)


@dataclass
class Config:
    """Configuration handler for the CLI tool."""

    config_dir: str = CONFIG_DIR
    config_file: Optional[str] = None
    _file_config: dict = field(init=False, repr=False)

    # API Configuration
    api_key: str = field(init=False)
    api_endpoint: Optional[str] = field(init=False)
    model: str = field(init=False)

    # Behavior Configuration
    silent_mode: bool = field(init=False)
    language: str = field(init=False)
    verbose: bool = field(init=False)

    # Application Configuration
    log_dir: str = field(init=False)

    def __post_init__(self):
        """Post-initialization to set up dependent fields."""
        if self.config_file is None:
            self.config_file = os.path.join(self.config_dir, "config.toml")
        self._file_config = self._load_config_from_file()
        self.api_key = self._get_config("GEMINI_API_KEY", "")
        self.api_endpoint = self._get_config("GEMINI_API_ENDPOINT", "") or None
        self.model = self._get_config("GEMINI_MODEL", DEFAULT_MODEL)
        self.silent_mode = self._get_config("SILENT_MODE", False)
        self.language = self._get_config("LANGUAGE", "en")
        self.verbose = self._get_config("CLI_VERBOSE", False)
        self.log_dir = self._get_config("CLI_LOG_DIR", "") or os.path.join(self.config_dir, "logs")

    def _load_config_from_file(self) -> dict:
        """Loads configuration from the TOML file."""
        if not os.path.exists(self.config_file):
            self._create_default_config()
        try:
            return read_config_file(self.config_file)
        except IOError as e:
            logger.warning(f"Could not read config file at {self.config_file}. Error: {e}")
            return {}

    def _create_default_config(self):
        """Creates a default configuration file."""
        default_config = {
            "api": {
                "GEMINI_API_KEY": "",
                "GEMINI_MODEL": DEFAULT_MODEL,
            },
            "behavior": {
                "SILENT_MODE": False,
                "LANGUAGE": "en",
                "CLI_VERBOSE": False,
            },
        }
        try:
            write_config_file(self.config_file, default_config)
            logger.info(f"Created default config file at: {self.config_file}")
        except IOError as e:
            logger.warning(f"Error creating default config file: {e}")

    def _get_config(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Get a configuration value, prioritizing environment variables,
        then the config file, and finally a default value.
        """
        # 1. Check environment variable
        value = os.environ.get(ENV_VARS.get(key, key))
        if value is not None:
            return parse_value(key, value)

        # 2. Check config file
        for section in self._file_config.values():
            if isinstance(section, dict) and key in section:
                return parse_value(key, section[key])

        # 3. Return default
        return default

    def validate(self):
        """
        Validate the configuration.

        Raises:
            ConfigurationError: If the API key is not set.
        """
        parse_assert(
            "GEMINI_API_KEY",
            self.api_key,
            "Please set your Gemini API key via `gshell config set GEMINI_API_KEY=<your key>` "
            "(get one from https://aistudio.google.com/app/apikey)",
        )

    def __str__(self) -> str:
        """Return string representation of the configuration."""
        config_dict = self.__dict__.copy()
        if self.api_key:
            config_dict['api_key'] = f"{self.api_key[:4]}...{self.api_key[-4:]}" if len(self.api_key) > 8 else "****"
        del config_dict['_file_config'] # Don't print the raw file contents
        return str(config_dict)


def read_config_file(config_file: str) -> dict:
    """Reads the TOML config file, returning an empty dict if it does not exist."""
    if not os.path.exists(config_file):
        return {}
    with open(config_file, 'r') as f:
        try:
            return toml.load(f)
        except toml.TomlDecodeError as e:
            raise ConfigurationError(f"Could not parse config file {config_file}: {e}") from e


def write_config_file(config_file: str, data: dict):
    os.makedirs(os.path.dirname(config_file) or ".", exist_ok=True)
    with open(config_file, 'w') as f:
        toml.dump(data, f)


def get_config_values(keys: List[str], config_file: Optional[str] = None) -> Dict[str, Any]:
    """Returns the stored values for the given keys, as written in the config file."""
    file_config = read_config_file(config_file or os.path.join(CONFIG_DIR, "config.toml"))
    values = {}
    for key in keys:
        parse_assert(key, key in PARSERS, "Unknown config property")
        section = file_config.get(KEY_SECTIONS[key], {})
        values[key] = section.get(key)
    return values


def set_config_values(pairs: Dict[str, str], config_file: Optional[str] = None):
    """
    Validates and stores configuration values in the config file.

    Args:
        pairs: Mapping of property names to raw string values.
        config_file: Path to the TOML file, defaults to the user's config file.

    Raises:
        ConfigurationError: If a key is unknown or a value is malformed.
    """
    config_file = config_file or os.path.join(CONFIG_DIR, "config.toml")
    file_config = read_config_file(config_file)
    for key, value in pairs.items():
        parsed = parse_value(key, value)
        file_config.setdefault(KEY_SECTIONS[key], {})[key] = parsed
    write_config_file(config_file, file_config)
    logger.info(f"Updated {', '.join(pairs)} in {config_file}")


# Singleton instance holder
_config_instance: Optional[Config] = None

def get_config() -> Config:
    """Returns the singleton Config instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance
