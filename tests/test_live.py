"""Checks against a running mtgdb.info API.

Skipped unless MTGDB_LIVE_URL points at an instance, e.g.
``MTGDB_LIVE_URL=http://127.0.0.1:8082 pytest tests/test_live.py``.
"""
import os

import pytest

from mtgdb import MtgDbClient

LIVE_URL = os.getenv("MTGDB_LIVE_URL")

pytestmark = pytest.mark.skipif(not LIVE_URL, reason="MTGDB_LIVE_URL not set")


@pytest.fixture(scope="module")
def db():
    with MtgDbClient(LIVE_URL) as client:
        yield client


def test_search_complex(db):
    cards = db.search(
        "color eq blue and type m 'Creature' and description m 'flying' "
        "and convertedmanacost lt 3 and name m 'Cloud'",
        is_complex=True,
    )
    assert len(cards) >= 1


def test_search_cards(db):
    assert len(db.search("giant")) >= 1


def test_get_random_card(db):
    assert db.get_random_card() is not None


def test_get_random_card_in_set(db):
    assert db.get_random_card_in_set("lea") is not None


def test_get_card(db):
    assert db.get_card(14456).id == 14456


def test_get_cards_by_name(db):
    assert len(db.get_cards("ankh of mishra")) >= 1


def test_get_cards_by_multiverse_ids(db):
    assert len(db.get_cards([1, 2])) >= 1


def test_get_set(db):
    assert db.get_set("10E").id == "10E"


def test_get_card_in_set(db):
    card = db.get_card_in_set("10E", 1)
    assert card.set_number == 1
    assert card.card_set_id == "10E"


def test_get_card_in_set_not_found(db):
    assert db.get_card_in_set("10E", 1000) is None


def test_get_set_cards(db):
    assert len(db.get_set_cards("10E")) >= 1


def test_get_set_cards_with_range(db):
    assert len(db.get_set_cards("10E", 1, 10)) == 10


def test_get_sets(db):
    assert len(db.get_sets()) >= 1


def test_get_multiple_sets(db):
    assert len(db.get_sets(["10e", "all", "ths"])) == 3
