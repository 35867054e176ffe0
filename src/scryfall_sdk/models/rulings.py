"""Scryfall ruling models."""

from __future__ import annotations

import datetime
from typing import Literal

from pydantic import Field

from .common import ScryfallList, ScryfallObject


class Ruling(ScryfallObject):
    kind: Literal["ruling"] = Field(alias="object")
    oracle_id: str
    source: str
    published_at: datetime.date
    comment: str


class RulingList(ScryfallList[Ruling]):
    """Rulings for one card, oldest first."""
