"""Option and Result types for values that may be absent or may fail."""

from fallible.option import NOTHING, Nothing, Option, Some
from fallible.result import Err, Ok, Result

__all__ = ["NOTHING", "Err", "Nothing", "Ok", "Option", "Result", "Some"]

__version__ = "0.1.0"
