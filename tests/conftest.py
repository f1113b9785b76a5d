import json

import pytest
import requests

from mtgdb.client import MtgDbClient

BASE = "http://mtgdb.test"


def make_response(url, status=200, body=None, raw=None):
    """Build a real requests.Response carrying ``body`` as JSON."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    if raw is not None:
        resp._content = raw if isinstance(raw, bytes) else raw.encode("utf-8")
    else:
        resp._content = json.dumps(body).encode("utf-8")
    return resp


class FakeSession:
    """Stands in for requests.Session; answers GETs from a url -> reply map.

    A reply is ``(status, body)``, raw bytes/str via ``("raw", ...)``, or an
    exception instance to raise.  Unknown URLs get a 404.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def add(self, url, body=None, status=200):
        self.routes[url] = (status, body)

    def get(self, url, timeout=None, **kwargs):
        self.calls.append((url, timeout))
        reply = self.routes.get(url)
        if reply is None:
            return make_response(url, status=404, raw=b"")
        if isinstance(reply, Exception):
            raise reply
        status, body = reply
        if status == "raw":
            return make_response(url, raw=body)
        return make_response(url, status=status, body=body)

    def close(self):
        self.closed = True

    @property
    def urls(self):
        return [url for url, _ in self.calls]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return MtgDbClient(BASE, session=session)


def card_json(multiverse_id=14456, **extra):
    data = {
        "id": multiverse_id,
        "relatedCardId": 0,
        "setNumber": 1,
        "name": "Ankh of Mishra",
        "searchName": "ankhofmishra",
        "description": "Whenever a land enters the battlefield, Ankh of Mishra deals 2 damage to that land's controller.",
        "flavor": "",
        "colors": ["None"],
        "manaCost": "2",
        "convertedManaCost": 2,
        "cardSetName": "Limited Edition Alpha",
        "type": "Artifact",
        "subType": None,
        "power": 0,
        "toughness": 0,
        "loyalty": 0,
        "rarity": "Rare",
        "artist": "Amy Weber",
        "cardSetId": "LEA",
        "token": False,
        "promo": False,
        "rulings": [{"releasedAt": "2004-10-04T00:00:00", "rule": "This is not optional."}],
        "formats": [{"name": "Vintage", "legality": "Legal"}],
        "releasedAt": "1993-08-05T00:00:00",
    }
    data.update(extra)
    return data


def set_json(set_id="10E", **extra):
    data = {
        "id": set_id,
        "name": "Tenth Edition",
        "type": "Core",
        "block": "Core Set",
        "description": "",
        "common": 121,
        "uncommon": 121,
        "rare": 121,
        "mythicRare": 0,
        "basicLand": 20,
        "total": 383,
        "releasedAt": "2007-07-13T00:00:00",
        "cardIds": [129458, 135206],
    }
    data.update(extra)
    return data
