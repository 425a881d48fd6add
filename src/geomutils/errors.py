"""
Errors raised by geomutils.
"""


class Error(Exception):
    """
    Base error. Carries a message and an exit code,
    the latter is what command line front-end returns.
    """
    def __init__(self, message: str, exitcode: int = 1):
        super().__init__(message)
        self.message = message
        self.exitcode = exitcode


class InvalidArgument(Error, ValueError):
    """
    Value is out of its enumeration, or can't be converted
    to requested representation. Always a programming error.
    """
    def __init__(self, message: str):
        super().__init__(message, exitcode=2)


class ConfigError(Error):
    pass
