"""VME data decoder exception definitions"""


class VmeDecoderError(Exception):
    """Base exception for the VME data decoder"""

    pass


class WordParseError(VmeDecoderError):
    """Input token is not a valid unsigned 32-bit word"""

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class ConfigError(VmeDecoderError):
    """Configuration file missing, unreadable or invalid"""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
