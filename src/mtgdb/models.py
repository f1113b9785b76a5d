"""mtgdb.models

Records returned by the mtgdb.info API.  The API speaks camelCase; fields are
exposed in snake_case through aliases.  Keys the models do not name are kept
as extra attributes.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "Ruling",
    "Format",
    "Card",
    "CardSet",
]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


class Ruling(_Record):
    """An official ruling attached to a card."""

    released_at: Optional[datetime] = Field(default=None, alias="releasedAt")
    rule: Optional[str] = None


class Format(_Record):
    """Legality of a card in one play format."""

    name: Optional[str] = None
    legality: Optional[str] = None


class Card(_Record):
    """A single card printing, keyed by multiverse id."""

    id: int
    related_card_id: Optional[int] = Field(default=None, alias="relatedCardId")
    set_number: Optional[int] = Field(default=None, alias="setNumber")
    name: Optional[str] = None
    search_name: Optional[str] = Field(default=None, alias="searchName")
    description: Optional[str] = None
    flavor: Optional[str] = None
    colors: List[str] = Field(default_factory=list)
    mana_cost: Optional[str] = Field(default=None, alias="manaCost")
    converted_mana_cost: Optional[int] = Field(default=None, alias="convertedManaCost")
    card_set_name: Optional[str] = Field(default=None, alias="cardSetName")
    type: Optional[str] = None
    sub_type: Optional[str] = Field(default=None, alias="subType")
    power: Optional[Union[int, str]] = None
    toughness: Optional[Union[int, str]] = None
    loyalty: Optional[Union[int, str]] = None
    rarity: Optional[str] = None
    artist: Optional[str] = None
    card_set_id: Optional[str] = Field(default=None, alias="cardSetId")  # set code, joins to CardSet.id
    token: Optional[bool] = None
    promo: Optional[bool] = None
    rulings: List[Ruling] = Field(default_factory=list)
    formats: List[Format] = Field(default_factory=list)
    released_at: Optional[datetime] = Field(default=None, alias="releasedAt")

    @field_validator("colors", "rulings", "formats", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return [] if v is None else v


class CardSet(_Record):
    """A card set, keyed by its short code (e.g. ``10E``)."""

    id: str
    name: Optional[str] = None
    type: Optional[str] = None
    block: Optional[str] = None
    description: Optional[str] = None
    common: Optional[int] = None
    uncommon: Optional[int] = None
    rare: Optional[int] = None
    mythic_rare: Optional[int] = Field(default=None, alias="mythicRare")
    basic_land: Optional[int] = Field(default=None, alias="basicLand")
    total: Optional[int] = None
    released_at: Optional[datetime] = Field(default=None, alias="releasedAt")
    card_ids: List[int] = Field(default_factory=list, alias="cardIds")

    @field_validator("card_ids", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return [] if v is None else v
