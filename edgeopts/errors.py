from selenium.common.exceptions import WebDriverException

__all__ = ["EdgeOptionsError", "ReservedNameError", "InvalidArgumentError",
           "MissingResourceError", "EncodingError"]


class EdgeOptionsError(Exception):
    """
    Base class for the errors raised while accumulating or rendering
    Edge options.
    """


class ReservedNameError(EdgeOptionsError, ValueError):
    """
    An additional capability was given a name that is empty or that is
    already owned by a typed option.
    """

    def __init__(self, message, name=None, owner=None):
        super(ReservedNameError, self).__init__(message)
        self.name = name
        self.owner = owner


class InvalidArgumentError(EdgeOptionsError, ValueError):
    pass


class MissingResourceError(EdgeOptionsError, FileNotFoundError):
    """
    An extension file could not be found, either when it was added or
    when its bytes were read at render time.
    """


class EncodingError(EdgeOptionsError, WebDriverException):
    """
    A string that should have been base64 could not be decoded. The
    decoder's error is available as ``__cause__``.
    """
