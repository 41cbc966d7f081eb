from wordcount.report import STYLES
from wordcount.tokenizer import DEFAULT_CHUNK_SIZE


class ConfigError(ValueError):
    """A config.ini value that can't be used."""


class Config(object):
    """
    Settings read from a ConfigParser.

    Every key is optional, so a missing config.ini (ConfigParser.read
    ignores missing files) gives the defaults.
    """

    def __init__(self, config):
        self.chunk_size = _positive_int(
            config.get("INPUT", "CHUNKSIZE", fallback=str(DEFAULT_CHUNK_SIZE)),
            "INPUT.CHUNKSIZE")
        try:
            self.markup = config.getboolean("INPUT", "MARKUP", fallback=False)
        except ValueError as e:
            raise ConfigError(f"INPUT.MARKUP: {e}") from e

        self.output_format = config.get(
            "OUTPUT", "FORMAT", fallback="tab").strip().lower()
        if self.output_format not in STYLES:
            raise ConfigError(
                f"OUTPUT.FORMAT must be one of {', '.join(STYLES)}, "
                f"got {self.output_format!r}")
        self.top = _non_negative_int(
            config.get("OUTPUT", "TOP", fallback="0"), "OUTPUT.TOP")

        self.log_dir = config.get("LOGGING", "LOGDIR", fallback="").strip() or None


def _non_negative_int(raw, key):
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{key} must not be negative, got {value}")
    return value


def _positive_int(raw, key):
    value = _non_negative_int(raw, key)
    if value == 0:
        raise ConfigError(f"{key} must be positive")
    return value
