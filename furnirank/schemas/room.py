"""
Pydantic schemas describing the room a recommendation is made for
"""
from datetime import timedelta
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from furnirank.schemas.furniture import FurnitureItem, RoomStyle


class LightingCondition(str, Enum):
    NATURAL = "natural"
    ARTIFICIAL = "artificial"
    MIXED = "mixed"
    LOW = "low"


class RoomUsage(str, Enum):
    GENERAL = "general"
    ENTERTAINING = "entertaining"
    WORK = "work"
    RELAXATION = "relaxation"
    DINING = "dining"
    SLEEPING = "sleeping"


class TrendingTimeframe(str, Enum):
    """Look-back windows for trending items"""

    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @property
    def days(self) -> int:
        return TIMEFRAME_DAYS[self]

    @property
    def seconds(self) -> float:
        return float(self.days * 24 * 60 * 60)

    @property
    def delta(self) -> timedelta:
        return timedelta(days=self.days)


TIMEFRAME_DAYS = {
    TrendingTimeframe.WEEK: 7,
    TrendingTimeframe.MONTH: 30,
    TrendingTimeframe.QUARTER: 90,
    TrendingTimeframe.YEAR: 365,
}


class RoomDimensions(BaseModel):
    """Width (x), depth (y) and height (z) of a room in meters.

    Values are not constrained here; the engine rejects non-positive
    dimensions with InvalidRoomDimensions before scoring.
    """

    width: float
    depth: float
    height: float

    class Config:
        frozen = True

    @property
    def volume(self) -> float:
        return self.width * self.depth * self.height


class RoomContext(BaseModel):
    """Physical and stylistic context of a scanned room"""

    area: float  # square meters
    dimensions: RoomDimensions
    style: Optional[RoomStyle] = None
    existing_items: List[FurnitureItem] = Field(default_factory=list)
    lighting: LightingCondition = LightingCondition.NATURAL
    usage: RoomUsage = RoomUsage.GENERAL

    class Config:
        frozen = True
