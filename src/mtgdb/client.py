"""mtgdb.client

`MtgDbClient`, the public client for the mtgdb.info REST API.

Every method issues exactly one GET, waits for the whole body and decodes it
into :mod:`mtgdb.models` records.  URLs are plain string templates filled with
the base URL and positional arguments; only complex search percent-encodes
its text, so path arguments (card names, simple search text) go through
:func:`mtgdb.utils.sanitize` first.

Example Usage:
    from mtgdb import MtgDbClient

    with MtgDbClient() as db:
        card = db.get_card(14456)
        tenth = db.get_set("10E")
        giants = db.search("giant", limit=20)
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Type, TypeVar, Union

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import ClientSettings
from .errors import DecodeError, InvalidArgumentError, TransportError
from .models import Card, CardSet
from .utils import encode_query_text, join_ids, sanitize

__all__ = ["MtgDbClient"]

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

_STRING_LIST = TypeAdapter(List[str])
_LIST_ADAPTERS = {
    Card: TypeAdapter(List[Card]),
    CardSet: TypeAdapter(List[CardSet]),
}


_ALL = object()


def _require(value: Optional[str], argument: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidArgumentError(argument)
    return value


def _require_non_negative(value: int, argument: str) -> int:
    if value < 0:
        raise InvalidArgumentError(argument, f"must be >= 0, got {value}")
    return value


class MtgDbClient:
    """Client for the mtgdb.info card database.

    ``base_url`` overrides the public endpoint, e.g. to point at a local copy
    of the API.  A caller-supplied ``session`` is used as-is and is left open
    by :meth:`close`.
    """

    # ── endpoints; {0} is always the base URL ──────────────────────
    CARD_RARITY = "{0}/cards/rarity"
    CARD_TYPES = "{0}/cards/types"
    CARD_SUBTYPES = "{0}/cards/subtypes"
    CARD = "{0}/cards/{1}"
    CARD_RANDOM = "{0}/cards/random"
    CARDS = "{0}/cards/"
    CARDS_FILTER = "{0}/cards/?{1}={2}"
    SET_CARD_RANDOM = "{0}/sets/{1}/cards/random"
    SET_CARDS = "{0}/sets/{1}/cards/"
    SET_CARDS_RANGE = "{0}/sets/{1}/cards/?start={2}&end={3}"
    SET_CARD = "{0}/sets/{1}/cards/{2}"
    SET = "{0}/sets/{1}"
    SETS = "{0}/sets/"
    SEARCH = "{0}/search/{1}?start={2}&limit={3}"
    SEARCH_COMPLEX = "{0}/search/?q={1}&start={2}&limit={3}"

    sanitize = staticmethod(sanitize)

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        settings: Optional[ClientSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = settings or ClientSettings()
        if base_url is not None:
            settings = settings.model_copy(update={"base_url": ClientSettings(base_url=base_url).base_url})
        self._settings = settings
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "MtgDbClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    # ── transport ──────────────────────────────────────────────────
    def _get_json(self, uri_format: str, *args: Any) -> Any:
        """GET the formatted URL and return the decoded JSON body.

        Returns None for a 404 or an empty/``null`` body.  Anything else that
        is not a success raises TransportError; a non-JSON body raises
        DecodeError.
        """
        url = uri_format.format(self.base_url, *args)
        logger.debug(f"GET {url}")
        try:
            response = self._session.get(url, timeout=self._settings.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(url, f"Request failed: {e}") from e

        if response.status_code == 404:
            logger.debug(f"Not found: {url}")
            return None
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.warning(f"{url} returned HTTP {response.status_code}")
            raise TransportError(
                url, f"HTTP {response.status_code}", status_code=response.status_code
            ) from e

        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"{url} returned a body that is not JSON")
            raise DecodeError(url, f"Response is not valid JSON: {e}") from e

    def _call_one(self, model: Type[R], uri_format: str, *args: Any) -> Optional[R]:
        data = self._get_json(uri_format, *args)
        if data is None or data == {} or data == []:
            return None
        try:
            return model.model_validate(data)
        except ValidationError as e:
            url = uri_format.format(self.base_url, *args)
            raise DecodeError(url, f"Expected a single {model.__name__}: {e}") from e

    def _call_many(self, model: Type[R], uri_format: str, *args: Any) -> List[R]:
        data = self._get_json(uri_format, *args)
        if data is None:
            return []
        try:
            return _LIST_ADAPTERS[model].validate_python(data)
        except ValidationError as e:
            url = uri_format.format(self.base_url, *args)
            raise DecodeError(url, f"Expected a list of {model.__name__}: {e}") from e

    def _call_strings(self, uri_format: str) -> List[str]:
        data = self._get_json(uri_format)
        if data is None:
            return []
        try:
            return _STRING_LIST.validate_python(data)
        except ValidationError as e:
            raise DecodeError(uri_format.format(self.base_url), f"Expected a list of strings: {e}") from e

    def _call_joined(self, model: Type[R], uri_format: str, ids: List[Any]) -> List[R]:
        """Fetch several records in one request.

        With a single id the endpoint answers with one object rather than a
        list, so it is decoded alone and wrapped.
        """
        combined = join_ids(ids)
        if len(ids) == 1:
            record = self._call_one(model, uri_format, combined)
            return [record] if record is not None else []
        return self._call_many(model, uri_format, combined)

    # ── enumerations ───────────────────────────────────────────────
    def get_card_rarity_types(self) -> List[str]:
        return self._call_strings(self.CARD_RARITY)

    def get_card_types(self) -> List[str]:
        return self._call_strings(self.CARD_TYPES)

    def get_card_sub_types(self) -> List[str]:
        return self._call_strings(self.CARD_SUBTYPES)

    # ── cards ──────────────────────────────────────────────────────
    def get_card(self, multiverse_id: int) -> Optional[Card]:
        """Get a card by multiverse id, or None if there is no such card."""
        return self._call_one(Card, self.CARD, int(multiverse_id))

    def get_random_card(self) -> Optional[Card]:
        return self._call_one(Card, self.CARD_RANDOM)

    def get_random_card_in_set(self, set_id: str) -> Optional[Card]:
        return self._call_one(Card, self.SET_CARD_RANDOM, _require(set_id, "set_id"))

    def get_cards(self, query: Union[str, int, Iterable[int]] = _ALL) -> List[Card]:
        """Get cards by name, by multiverse ids, or the whole database.

        - ``get_cards()``: every card (large, no pagination)
        - ``get_cards("ankh of mishra")``: all printings of a card name
        - ``get_cards([1, 2])``: the given multiverse ids

        An explicit None is treated as a missing name and rejected.
        """
        if query is _ALL:
            return self.get_all_cards()
        if query is None or isinstance(query, str):
            return self.get_cards_by_name(query)
        if isinstance(query, int):
            return self.get_cards_by_ids([query])
        return self.get_cards_by_ids(query)

    def get_cards_by_name(self, name: str) -> List[Card]:
        """Return all printings of a card.  The name is sanitized first."""
        _require(name, "name")
        cleaned = sanitize(name)
        if not cleaned.strip():
            raise InvalidArgumentError("name", f"no searchable characters in {name!r}")
        return self._call_many(Card, self.CARD, cleaned)

    def get_cards_by_ids(self, multiverse_ids: Iterable[int]) -> List[Card]:
        ids = list(multiverse_ids)
        if not ids:
            raise InvalidArgumentError("multiverse_ids", "at least one id is required")
        for i in ids:
            if isinstance(i, bool) or not isinstance(i, int):
                raise InvalidArgumentError("multiverse_ids", f"not an integer id: {i!r}")
        return self._call_joined(Card, self.CARD, ids)

    def get_all_cards(self) -> List[Card]:
        """Get the entire card database.  This may take some time."""
        return self._call_many(Card, self.CARDS)

    def filter_cards(self, prop: str, value: Any) -> List[Card]:
        """Cards whose field ``prop`` matches ``value`` (``/cards/?prop=value``)."""
        return self._call_many(Card, self.CARDS_FILTER, prop, value)

    def get_set_cards(self, set_id: str, start: int = 0, end: int = 0) -> List[Card]:
        """Cards in a set, optionally limited to set numbers ``start``..``end``.

        Both bounds are 1-based and inclusive.  With both at 0 the whole set
        is requested.
        """
        _require(set_id, "set_id")
        _require_non_negative(start, "start")
        _require_non_negative(end, "end")
        if start > 0 or end > 0:
            if end and start > end:
                raise InvalidArgumentError("start", f"start ({start}) is past end ({end})")
            return self._call_many(Card, self.SET_CARDS_RANGE, set_id, start, end)
        return self._call_many(Card, self.SET_CARDS, set_id)

    def get_card_in_set(self, set_id: str, number: int) -> Optional[Card]:
        """Card number ``number`` of a set, or None if the set is shorter."""
        return self._call_one(Card, self.SET_CARD, _require(set_id, "set_id"), int(number))

    # ── sets ───────────────────────────────────────────────────────
    def get_set(self, set_id: str) -> Optional[CardSet]:
        return self._call_one(CardSet, self.SET, _require(set_id, "set_id"))

    def get_sets(self, set_ids: Union[None, str, Iterable[str]] = None) -> List[CardSet]:
        """Get the given sets, or every set when no ids are passed."""
        if set_ids is None:
            return self.get_all_sets()
        ids = [set_ids] if isinstance(set_ids, str) else list(set_ids)
        if not ids:
            raise InvalidArgumentError("set_ids", "at least one set code is required")
        for set_id in ids:
            _require(set_id, "set_ids")
        return self._call_joined(CardSet, self.SET, ids)

    def get_all_sets(self) -> List[CardSet]:
        return self._call_many(CardSet, self.SETS)

    # ── search ─────────────────────────────────────────────────────
    def search(self, text: str, start: int = 0, limit: int = 0, is_complex: bool = False) -> List[Card]:
        """Search cards.

        Simple mode strips ``text`` down to letters, digits, whitespace and
        hyphens and puts it in the path.  Complex mode sends the raw query
        language (e.g. ``"color eq blue and name m 'Cloud'"``) percent-encoded
        as ``q=``.
        """
        _require(text, "text")
        _require_non_negative(start, "start")
        _require_non_negative(limit, "limit")
        if is_complex:
            return self._call_many(Card, self.SEARCH_COMPLEX, encode_query_text(text), start, limit)
        cleaned = sanitize(text)
        if not cleaned.strip():
            raise InvalidArgumentError("text", f"no searchable characters in {text!r}")
        return self._call_many(Card, self.SEARCH, cleaned, start, limit)
