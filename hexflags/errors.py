from __future__ import annotations


class HexflagsError(Exception):
    pass


class ConfigError(HexflagsError):
    """Home/profile directory cannot be determined."""


class NotFoundError(HexflagsError):
    """Requested type's table file is absent."""


class ParseError(HexflagsError):
    """Table file is malformed, or a stored scalar is not valid hex."""


class ArgumentError(HexflagsError):
    """Missing or invalid command-line argument."""


class StorageError(HexflagsError):
    pass
