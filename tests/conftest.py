"""Shared fixtures: sample Scryfall payloads and mock-backed clients."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable

import httpx
import pytest

from scryfall_sdk import AsyncScryfall, Scryfall

BASE_URL = "https://mock.scryfall.test"

SAMPLE_CARD = {
    "object": "card",
    "id": "f295b713-1d6a-43fd-910d-fb35414bf58a",
    "oracle_id": "7bc3f92f-68a2-4934-afc4-89f6d0e8cf98",
    "multiverse_ids": [567508],
    "tcgplayer_id": 273737,
    "name": "Dusk // Dawn",
    "lang": "en",
    "released_at": "2022-06-10",
    "uri": "http://some.url",
    "scryfall_uri": "http://some.url",
    "layout": "split",
    "highres_image": False,
    "image_status": "lowres",
    "image_uris": {
        "small": "http://some.url",
        "normal": "http://some.url",
        "large": "http://some.url",
        "png": "http://some.url",
        "art_crop": "http://some.url",
        "border_crop": "http://some.url",
    },
    "mana_cost": "{2}{W}{W} // {3}{W}{W}",
    "cmc": 9.0,
    "type_line": "Sorcery // Sorcery",
    "colors": ["W"],
    "color_identity": ["W"],
    "keywords": ["Aftermath"],
    "card_faces": [
        {
            "object": "card_face",
            "name": "Dusk",
            "mana_cost": "{2}{W}{W}",
            "type_line": "Sorcery",
            "oracle_text": "Destroy all creatures with power 3 or greater.",
            "artist": "Kasia 'Kafis' Zielińska",
            "artist_id": "a662cb71-4770-4b49-8b03-2cf8497049a7",
            "illustration_id": "3134f77c-7a7d-48e0-99a6-4f323868e1ef",
        }
    ],
    "legalities": {
        "standard": "not_legal",
        "future": "not_legal",
        "historic": "legal",
        "gladiator": "legal",
        "pioneer": "legal",
        "explorer": "legal",
        "modern": "legal",
        "legacy": "legal",
        "pauper": "not_legal",
        "vintage": "legal",
        "penny": "legal",
        "commander": "legal",
        "brawl": "not_legal",
        "historicbrawl": "legal",
        "alchemy": "not_legal",
        "paupercommander": "not_legal",
        "duel": "legal",
        "oldschool": "not_legal",
        "premodern": "not_legal",
    },
    "games": ["paper"],
    "reserved": False,
    "foil": False,
    "nonfoil": True,
    "finishes": ["nonfoil"],
    "oversized": False,
    "promo": False,
    "reprint": True,
    "variation": False,
    "set_id": "5e4c3fe8-fd57-4b20-ad56-c03790a16cea",
    "set": "clb",
    "set_name": "Commander Legends: Battle for Baldur's Gate",
    "set_type": "draft_innovation",
    "set_uri": "http://some.url",
    "set_search_uri": "http://some.url",
    "scryfall_set_uri": "http://some.url",
    "rulings_uri": "http://some.url",
    "prints_search_uri": "http://some.url",
    "collector_number": "691",
    "digital": False,
    "rarity": "rare",
    "card_back_id": "0aeebaf5-8c7d-4636-9e82-8c27447861f7",
    "artist": "Kasia 'Kafis' Zielińska",
    "artist_ids": ["a662cb71-4770-4b49-8b03-2cf8497049a7"],
    "illustration_id": "3134f77c-7a7d-48e0-99a6-4f323868e1ef",
    "border_color": "black",
    "frame": "2015",
    "security_stamp": "oval",
    "full_art": False,
    "textless": False,
    "booster": False,
    "story_spotlight": False,
    "edhrec_rank": 904,
    "penny_rank": 2681,
    "prices": {
        "usd": "0.13",
        "usd_foil": None,
        "usd_etched": None,
        "eur": None,
        "eur_foil": None,
        "tix": None,
    },
    "related_uris": {
        "gatherer": "http://some.url",
        "tcgplayer_infinite_articles": "http://some.url",
        "tcgplayer_infinite_decks": "http://some.url",
        "edhrec": "http://some.url",
    },
    "purchase_uris": {
        "tcgplayer": "http://some.url",
        "cardmarket": "http://some.url",
        "cardhoarder": "http://some.url",
    },
}

SAMPLE_CARD_PAGE = {
    "object": "list",
    "total_cards": 412,
    "has_more": True,
    "next_page": f"{BASE_URL}/cards/search?page=2&q=c%3Ared+pow%3D3",
    "data": [SAMPLE_CARD],
}

SAMPLE_CATALOG = {
    "object": "catalog",
    "uri": "https://some-url.com",
    "total_values": 3,
    "data": ["SomeValue", "SomeValue", "SomeValue"],
}

SAMPLE_BULK_DATA = {
    "object": "bulk_data",
    "id": "27bf3214-1271-490b-bdfe-c0be6c23d02e",
    "type": "oracle_cards",
    "updated_at": "2022-07-25T09:02:53.093+00:00",
    "uri": "https://api.scryfall.com/bulk-data/27bf3214-1271-490b-bdfe-c0be6c23d02e",
    "name": "Oracle Cards",
    "description": "A JSON file containing one Scryfall card object for each Oracle ID.",
    "compressed_size": 15119218,
    "download_uri": "https://data.scryfall.io/oracle-cards/oracle-cards-20220725090253.json",
    "content_type": "application/json",
    "content_encoding": "gzip",
}

SAMPLE_BULK_DATA_LIST = {
    "object": "list",
    "has_more": False,
    "data": [SAMPLE_BULK_DATA],
}

SAMPLE_SET = {
    "object": "set",
    "id": "5e4c3fe8-fd57-4b20-ad56-c03790a16cea",
    "code": "clb",
    "mtgo_code": None,
    "arena_code": None,
    "tcgplayer_id": 2950,
    "name": "Commander Legends: Battle for Baldur's Gate",
    "uri": "http://some.url",
    "scryfall_uri": "http://some.url",
    "search_uri": "http://some.url",
    "released_at": "2022-06-10",
    "set_type": "draft_innovation",
    "card_count": 936,
    "digital": False,
    "nonfoil_only": False,
    "foil_only": False,
    "icon_svg_uri": "http://some.url",
}

SAMPLE_SET_LIST = {
    "object": "list",
    "has_more": False,
    "data": [SAMPLE_SET],
}

SAMPLE_SYMBOL = {
    "object": "card_symbol",
    "symbol": "{W/U}",
    "svg_uri": "https://svgs.scryfall.io/card-symbols/WU.svg",
    "loose_variant": None,
    "english": "one white or blue mana",
    "transposable": False,
    "represents_mana": True,
    "appears_in_mana_costs": True,
    "cmc": 1.0,
    "funny": False,
    "colors": ["W", "U"],
    "gatherer_alternates": ["(w/u)"],
}

SAMPLE_SYMBOL_LIST = {
    "object": "list",
    "has_more": False,
    "data": [SAMPLE_SYMBOL],
}

SAMPLE_MANA_COST = {
    "object": "mana_cost",
    "cost": "{X}{R}{U}",
    "colors": ["U", "R"],
    "cmc": 2.0,
    "colorless": False,
    "monocolored": False,
    "multicolored": True,
}

SAMPLE_RULING = {
    "object": "ruling",
    "oracle_id": "7bc3f92f-68a2-4934-afc4-89f6d0e8cf98",
    "source": "wotc",
    "published_at": "2017-04-18",
    "comment": "Cast Dawn only from your graveyard.",
}

SAMPLE_RULING_LIST = {
    "object": "list",
    "has_more": False,
    "data": [SAMPLE_RULING],
}

SAMPLE_NOT_FOUND = {
    "object": "error",
    "code": "not_found",
    "status": 404,
    "details": "No card found with the given ID or set code and collector number.",
}


@pytest.fixture
def card_payload() -> dict:
    return copy.deepcopy(SAMPLE_CARD)


def json_handler(
    payload: object, status: int = 200
) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with *payload* as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=json.dumps(payload).encode("utf-8"))

    return handler


class Recorder:
    """Mock transport handler that records requests and replays one response."""

    def __init__(self, status: int = 200, payload: object = None, body: bytes | None = None):
        self.status = status
        self.body = body if body is not None else json.dumps(payload).encode("utf-8")
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_client():
    """Factory: ``make_client(recorder)`` -> Scryfall backed by a MockTransport."""
    clients: list[Scryfall] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> Scryfall:
        client = Scryfall(BASE_URL, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def make_async_client():
    """Factory: ``make_async_client(recorder)`` -> AsyncScryfall on a MockTransport.

    Close it with ``async with`` or ``await client.close()`` in the test.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> AsyncScryfall:
        return AsyncScryfall(BASE_URL, transport=httpx.MockTransport(handler))

    return factory
