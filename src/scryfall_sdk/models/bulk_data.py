"""Scryfall bulk data models."""

from __future__ import annotations

import datetime
from typing import Literal

from pydantic import Field

from .common import ScryfallList, ScryfallObject


class BulkData(ScryfallObject):
    """Descriptor of one downloadable bulk data file."""

    kind: Literal["bulk_data"] = Field(alias="object")
    id: str
    entry_type: str = Field(alias="type")
    updated_at: datetime.datetime
    uri: str
    name: str
    description: str
    size: int | None = None
    compressed_size: int | None = None
    download_uri: str
    content_type: str
    content_encoding: str


class BulkDataList(ScryfallList[BulkData]):
    """All bulk data files currently published."""
