class ScytheError(Exception):
    """Base class for every error raised by scythe"""

    pass


class ConfigError(ScytheError):
    """Configuration is missing or unreadable"""

    pass


class DateParseError(ScytheError):
    """A date typed at the console could not be parsed"""

    pass


class NetworkError(ScytheError):
    """A call to Harvest or Google Sheets failed"""

    pass


class DecodeError(ScytheError):
    """A response body did not have the expected shape"""

    pass


class BalanceParseError(ScytheError):
    """The carried over/under cell is not a number"""

    pass
