"""scryfall-sdk — typed sync and async client for the Scryfall API."""

from .async_client import AsyncScryfall
from .client import Scryfall
from .config import VERSION
from .models.errors import ErrorBody
from .result import Result, ScryfallError

__all__ = ["AsyncScryfall", "ErrorBody", "Result", "Scryfall", "ScryfallError"]
__version__ = VERSION
