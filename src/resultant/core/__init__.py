"""Core value types: Error, Result and ValueResult."""

from .error import DEFAULT_ERROR, Error, exception_code
from .result import Result
from .value_result import ValueResult

__all__ = ["DEFAULT_ERROR", "Error", "Result", "ValueResult", "exception_code"]
