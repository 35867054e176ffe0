"""Resource descriptors, one per Scryfall endpoint.

Pass any of these to :meth:`Scryfall.request` or
:meth:`AsyncScryfall.request`; the descriptor decides the URL and the
model the response decodes into.
"""

from .base import HttpResource
from .bulk_data import AllBulkData, BulkDataById
from .card_sets import AllSets, SetByCode, SetByTcgplayerId
from .card_symbols import AllCardSymbols, ParseManaCost
from .cards import (
    CardAutocomplete,
    CardByArenaId,
    CardByCardmarketId,
    CardByCode,
    CardById,
    CardByMtgoId,
    CardByMultiverseId,
    CardByTcgplayerId,
    CardCollectionLookup,
    CardNamed,
    CardRandom,
    CardSearch,
)
from .catalog import CATALOG_NAMES, CatalogByName
from .rulings import (
    RulingsByArenaId,
    RulingsByCardId,
    RulingsByCode,
    RulingsByMtgoId,
    RulingsByMultiverseId,
)

__all__ = [
    "CATALOG_NAMES",
    "AllBulkData",
    "AllCardSymbols",
    "AllSets",
    "BulkDataById",
    "CardAutocomplete",
    "CardByArenaId",
    "CardByCardmarketId",
    "CardByCode",
    "CardById",
    "CardByMtgoId",
    "CardByMultiverseId",
    "CardByTcgplayerId",
    "CardCollectionLookup",
    "CardNamed",
    "CardRandom",
    "CardSearch",
    "CatalogByName",
    "HttpResource",
    "ParseManaCost",
    "RulingsByArenaId",
    "RulingsByCardId",
    "RulingsByCode",
    "RulingsByMtgoId",
    "RulingsByMultiverseId",
    "SetByCode",
    "SetByTcgplayerId",
]
