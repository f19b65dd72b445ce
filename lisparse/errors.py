"""Error taxonomy and the reporting channel.

Errors are raised where they are detected and caught by the evaluator at the
failing form, which reports them and continues with Nil in its place.
"""
import logging

from lisparse.types.nil import Nil

logger = logging.getLogger("lisparse")


class LispError(Exception):
    """ Base class for all lisparse errors"""
    pass

class LispInvalidSymbol(LispError):
    """ Raised when something other than a symbol is used as a name"""
    pass

class LispUnboundSymbol(LispError):
    """ Raised when a symbol is used before it is bound"""
    pass

class LispRedefinitionError(LispError):
    """ Raised when define targets a name already bound in the local frame"""

class LispUnboundAssignment(LispError):
    """ Raised when set! targets a name bound nowhere in the chain"""

class LispShapeError(LispError):
    """ Raised when a special form is malformed"""

class LispArityError(LispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class LispTypeError(LispError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class LispZeroDivision(LispError):
    """ Raised on division by zero"""

class LispOverflowError(LispError):
    """ Raised when an integer is too large to widen to a float"""


def report(error: LispError):
    """Send `error` to the user-visible channel and return the Nil sentinel."""
    logger.warning("%s: %s", type(error).__name__, error)
    return Nil
