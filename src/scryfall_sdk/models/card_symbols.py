"""Scryfall card symbol and mana cost models."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .common import Color, ScryfallList, ScryfallObject


class CardSymbol(ScryfallObject):
    """A symbol that can appear in mana costs or rules text (``{T}``, ``{W/U}``...)."""

    kind: Literal["card_symbol"] = Field(alias="object")
    symbol: str
    svg_uri: str | None = None
    loose_variant: str | None = None
    english: str
    transposable: bool = False
    represents_mana: bool = False
    appears_in_mana_costs: bool = False
    mana_value: float | None = None
    cmc: float | None = None
    funny: bool = False
    colors: list[Color] = Field(default_factory=list)
    hybrid: bool | None = None
    phyrexian: bool | None = None
    gatherer_alternates: list[str] | None = None


class CardSymbolList(ScryfallList[CardSymbol]):
    """Every card symbol Scryfall knows about."""


class ManaCost(ScryfallObject):
    """A parsed mana cost, normalised by Scryfall."""

    kind: Literal["mana_cost"] = Field(alias="object")
    cost: str
    colors: list[Color] = Field(default_factory=list)
    cmc: float
    colorless: bool
    monocolored: bool
    multicolored: bool
