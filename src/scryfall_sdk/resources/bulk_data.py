"""Endpoints under ``/bulk-data``.

See https://scryfall.com/docs/api/bulk-data.
"""

from __future__ import annotations

from .._request import RequestBuilder
from ..models.bulk_data import BulkData, BulkDataList
from .base import HttpResource


class AllBulkData(HttpResource[BulkDataList]):
    """``GET /bulk-data``"""

    response_model = BulkDataList

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("bulk-data")


class BulkDataById(HttpResource[BulkData]):
    """``GET /bulk-data/:id`` or ``GET /bulk-data/:type``.

    Scryfall serves both lookups from the same path, so one descriptor
    covers an id (``"27bf3214-..."``) and a type (``"oracle_cards"``).
    """

    response_model = BulkData

    id: str

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("bulk-data").segment(self.id)
