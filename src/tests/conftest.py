"""Shared fixtures: a scripted stand-in for requests.Session."""

import pytest
import requests


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise requests.exceptions.JSONDecodeError(
                "Expecting value", self._text or "", 0
            )
        return self._payload


class FakeSession:
    """Returns queued responses in order and records requested URLs."""

    def __init__(self, responses=()):
        self.headers = {}
        self.responses = list(responses)
        self.requested = []
        self.closed = False

    def get(self, url, timeout=None):
        self.requested.append(url)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


def card(name, type_line="Creature — Goblin", **fields):
    data = {
        "object": "card",
        "name": name,
        "color_identity": ["R"],
        "cmc": 1.0,
        "type_line": type_line,
        "rarity": "common",
        "keywords": [],
    }
    data.update(fields)
    return data


def page(cards, next_page=None):
    payload = {"object": "list", "total_cards": len(cards), "data": cards}
    payload["has_more"] = next_page is not None
    if next_page:
        payload["next_page"] = next_page
    return FakeResponse(200, payload)


@pytest.fixture
def no_sleep(monkeypatch):
    """Record request delays instead of sleeping."""
    import scryfall_stats.net.scryfall as scryfall_module

    delays = []
    monkeypatch.setattr(scryfall_module.time, "sleep", delays.append)
    return delays
