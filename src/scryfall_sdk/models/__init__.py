"""Pydantic models for Scryfall API objects."""

from .bulk_data import BulkData, BulkDataList
from .card_sets import CardSet, CardSetList
from .card_symbols import CardSymbol, CardSymbolList, ManaCost
from .cards import Card, CardCollection, CardFace, CardList
from .catalog import Catalog
from .common import Color, ScryfallList, ScryfallObject
from .errors import ErrorBody
from .rulings import Ruling, RulingList
from .submodels import (
    CardIdentifier,
    ImageUris,
    Legalities,
    Legality,
    Prices,
    PurchaseUris,
    RelatedUris,
)

__all__ = [
    "BulkData",
    "BulkDataList",
    "Card",
    "CardCollection",
    "CardFace",
    "CardIdentifier",
    "CardList",
    "CardSet",
    "CardSetList",
    "CardSymbol",
    "CardSymbolList",
    "Catalog",
    "Color",
    "ErrorBody",
    "ImageUris",
    "Legalities",
    "Legality",
    "ManaCost",
    "Prices",
    "PurchaseUris",
    "RelatedUris",
    "Ruling",
    "RulingList",
    "ScryfallList",
    "ScryfallObject",
]
