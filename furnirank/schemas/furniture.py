"""
Pydantic schemas for furniture catalog items
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Set
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator, model_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FurnitureCategory(str, Enum):
    """Top-level catalog categories"""

    SEATING = "seating"
    TABLES = "tables"
    STORAGE = "storage"
    BEDROOM = "bedroom"
    LIGHTING = "lighting"
    DECOR = "decor"
    OUTDOOR = "outdoor"
    OFFICE = "office"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def subcategories(self) -> List["FurnitureSubcategory"]:
        return CATEGORY_SUBCATEGORIES[self]


class FurnitureSubcategory(str, Enum):
    """Subcategories, grouped by their parent category"""

    # Seating
    SOFA = "sofa"
    CHAIR = "chair"
    ARMCHAIR = "armchair"
    STOOL = "stool"
    BENCH = "bench"
    OTTOMAN = "ottoman"

    # Tables
    DINING_TABLE = "dining_table"
    COFFEE_TABLE = "coffee_table"
    SIDE_TABLE = "side_table"
    DESK = "desk"
    CONSOLE = "console"

    # Storage
    WARDROBE = "wardrobe"
    DRESSER = "dresser"
    BOOKSHELF = "bookshelf"
    CABINET = "cabinet"
    CHEST = "chest"

    # Bedroom
    BED = "bed"
    NIGHTSTAND = "nightstand"
    MATTRESS = "mattress"
    HEADBOARD = "headboard"

    # Lighting
    FLOOR_LAMP = "floor_lamp"
    TABLE_LAMP = "table_lamp"
    CEILING_LIGHT = "ceiling_light"
    CHANDELIER = "chandelier"

    # Decor
    ARTWORK = "artwork"
    MIRROR = "mirror"
    PLANT = "plant"
    VASE = "vase"
    SCULPTURE = "sculpture"

    # Outdoor
    OUTDOOR_SEATING = "outdoor_seating"
    OUTDOOR_TABLE = "outdoor_table"
    UMBRELLAS = "umbrellas"
    PLANTERS = "planters"

    # Office
    OFFICE_CHAIR = "office_chair"
    OFFICE_DESK = "office_desk"
    FILING = "filing"
    CONFERENCE = "conference"

    # Kitchen
    KITCHEN_TABLE = "kitchen_table"
    KITCHEN_CHAIR = "kitchen_chair"
    ISLAND = "island"
    APPLIANCES = "appliances"

    # Bathroom
    VANITY = "vanity"
    STORAGE = "storage"
    ACCESSORIES = "accessories"
    FIXTURES = "fixtures"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


CATEGORY_SUBCATEGORIES: Dict[FurnitureCategory, List[FurnitureSubcategory]] = {
    FurnitureCategory.SEATING: [
        FurnitureSubcategory.SOFA,
        FurnitureSubcategory.CHAIR,
        FurnitureSubcategory.ARMCHAIR,
        FurnitureSubcategory.STOOL,
        FurnitureSubcategory.BENCH,
        FurnitureSubcategory.OTTOMAN,
    ],
    FurnitureCategory.TABLES: [
        FurnitureSubcategory.DINING_TABLE,
        FurnitureSubcategory.COFFEE_TABLE,
        FurnitureSubcategory.SIDE_TABLE,
        FurnitureSubcategory.DESK,
        FurnitureSubcategory.CONSOLE,
    ],
    FurnitureCategory.STORAGE: [
        FurnitureSubcategory.WARDROBE,
        FurnitureSubcategory.DRESSER,
        FurnitureSubcategory.BOOKSHELF,
        FurnitureSubcategory.CABINET,
        FurnitureSubcategory.CHEST,
    ],
    FurnitureCategory.BEDROOM: [
        FurnitureSubcategory.BED,
        FurnitureSubcategory.NIGHTSTAND,
        FurnitureSubcategory.MATTRESS,
        FurnitureSubcategory.HEADBOARD,
    ],
    FurnitureCategory.LIGHTING: [
        FurnitureSubcategory.FLOOR_LAMP,
        FurnitureSubcategory.TABLE_LAMP,
        FurnitureSubcategory.CEILING_LIGHT,
        FurnitureSubcategory.CHANDELIER,
    ],
    FurnitureCategory.DECOR: [
        FurnitureSubcategory.ARTWORK,
        FurnitureSubcategory.MIRROR,
        FurnitureSubcategory.PLANT,
        FurnitureSubcategory.VASE,
        FurnitureSubcategory.SCULPTURE,
    ],
    FurnitureCategory.OUTDOOR: [
        FurnitureSubcategory.OUTDOOR_SEATING,
        FurnitureSubcategory.OUTDOOR_TABLE,
        FurnitureSubcategory.UMBRELLAS,
        FurnitureSubcategory.PLANTERS,
    ],
    FurnitureCategory.OFFICE: [
        FurnitureSubcategory.OFFICE_CHAIR,
        FurnitureSubcategory.OFFICE_DESK,
        FurnitureSubcategory.FILING,
        FurnitureSubcategory.CONFERENCE,
    ],
    FurnitureCategory.KITCHEN: [
        FurnitureSubcategory.KITCHEN_TABLE,
        FurnitureSubcategory.KITCHEN_CHAIR,
        FurnitureSubcategory.ISLAND,
        FurnitureSubcategory.APPLIANCES,
    ],
    FurnitureCategory.BATHROOM: [
        FurnitureSubcategory.VANITY,
        FurnitureSubcategory.STORAGE,
        FurnitureSubcategory.ACCESSORIES,
        FurnitureSubcategory.FIXTURES,
    ],
}


class FurnitureMaterial(str, Enum):
    WOOD = "wood"
    METAL = "metal"
    FABRIC = "fabric"
    LEATHER = "leather"
    PLASTIC = "plastic"
    GLASS = "glass"
    MARBLE = "marble"
    CERAMIC = "ceramic"
    RATTAN = "rattan"
    BAMBOO = "bamboo"
    STONE = "stone"
    COMPOSITE = "composite"


class ColorFamily(str, Enum):
    """Color families used for harmony matching"""

    NEUTRAL = "neutral"
    WARM = "warm"
    COOL = "cool"
    EARTH = "earth"
    BOLD = "bold"
    PASTEL = "pastel"


class ColorFinish(str, Enum):
    MATTE = "matte"
    GLOSSY = "glossy"
    SATIN = "satin"
    TEXTURED = "textured"
    METALLIC = "metallic"
    DISTRESSED = "distressed"


class FurnitureStyle(str, Enum):
    """Design styles an item is made in"""

    MODERN = "modern"
    CONTEMPORARY = "contemporary"
    TRADITIONAL = "traditional"
    RUSTIC = "rustic"
    INDUSTRIAL = "industrial"
    SCANDINAVIAN = "scandinavian"
    MID_CENTURY = "mid_century"
    BOHEMIAN = "bohemian"
    MINIMALIST = "minimalist"
    ART_DECO = "art_deco"
    FARMHOUSE = "farmhouse"
    TRANSITIONAL = "transitional"

    @property
    def display_name(self) -> str:
        if self is FurnitureStyle.MID_CENTURY:
            return "Mid-Century"
        return self.value.replace("_", " ").title()


class RoomStyle(str, Enum):
    """Target style of a room; keys of an item's style compatibility map"""

    MODERN = "modern"
    TRADITIONAL = "traditional"
    CONTEMPORARY = "contemporary"
    RUSTIC = "rustic"
    INDUSTRIAL = "industrial"
    SCANDINAVIAN = "scandinavian"
    BOHEMIAN = "bohemian"
    MINIMALIST = "minimalist"
    ECLECTIC = "eclectic"


class FunctionalFeature(str, Enum):
    STORAGE = "storage"
    RECLINING = "reclining"
    CONVERTIBLE = "convertible"
    SWIVEL = "swivel"
    ADJUSTABLE_HEIGHT = "adjustable_height"
    EXTENDABLE = "extendable"
    FOLDABLE = "foldable"
    MODULAR = "modular"
    BUILTIN_USB = "builtin_usb"
    BUILTIN_LIGHTING = "builtin_lighting"
    WIRELESS_CHARGING = "wireless_charging"
    ERGONOMIC = "ergonomic"


class PriceRange(str, Enum):
    """Price tiers (USD)"""

    BUDGET = "budget"  # < $200
    LOW = "low"  # $200-500
    MEDIUM = "medium"  # $500-1500
    HIGH = "high"  # $1500-3000
    LUXURY = "luxury"  # > $3000

    @classmethod
    def for_amount(cls, amount: float) -> "PriceRange":
        """Bucket a price; lower bounds are inclusive."""
        for price_range, (low, high) in PRICE_RANGE_BOUNDS.items():
            if low <= amount < high:
                return price_range
        # Negative amounts have no tier of their own
        return cls.BUDGET


PRICE_RANGE_BOUNDS = {
    PriceRange.BUDGET: (0.0, 200.0),
    PriceRange.LOW: (200.0, 500.0),
    PriceRange.MEDIUM: (500.0, 1500.0),
    PriceRange.HIGH: (1500.0, 3000.0),
    PriceRange.LUXURY: (3000.0, float("inf")),
}


class StockLevel(str, Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    PRE_ORDER = "pre_order"
    DISCONTINUED = "discontinued"


class WarrantyType(str, Enum):
    MANUFACTURER = "manufacturer"
    EXTENDED = "extended"
    LIFETIME = "lifetime"
    LIMITED = "limited"


class SustainabilityCertification(str, Enum):
    FSC = "fsc"
    GREENGUARD = "greenguard"
    CRADLE2CRADLE = "cradle2cradle"
    ENERGY_STAR = "energy_star"
    RECYCLED = "recycled"


class FurnitureDimensions(BaseModel):
    """Physical size in meters"""

    width: float
    depth: float
    height: float
    seat_height: Optional[float] = None
    arm_height: Optional[float] = None

    class Config:
        frozen = True

    @property
    def footprint(self) -> float:
        return self.width * self.depth

    @property
    def volume(self) -> float:
        return self.width * self.depth * self.height

    def fits_within(self, width: float, depth: float, height: float) -> bool:
        return self.width <= width and self.depth <= depth and self.height <= height


class FurnitureColor(BaseModel):
    name: str
    hex_value: str = ""
    color_family: ColorFamily
    finish: ColorFinish = ColorFinish.MATTE

    class Config:
        frozen = True


class FurnitureWarranty(BaseModel):
    duration_years: int = Field(..., ge=0)
    warranty_type: WarrantyType = WarrantyType.MANUFACTURER
    coverage: str = ""
    provider: str = ""
    transferable: bool = False

    class Config:
        frozen = True


class SustainabilityInfo(BaseModel):
    eco_friendly: bool
    certifications: List[SustainabilityCertification] = Field(default_factory=list)
    recycled_content: float = Field(0.0, ge=0.0, le=1.0)

    class Config:
        frozen = True


class FurniturePricing(BaseModel):
    """Price information; ``price_range`` is derived from the price when omitted"""

    retail_price: Optional[float] = None
    sale_price: Optional[float] = None
    currency: str = "USD"
    price_range: PriceRange = PriceRange.MEDIUM
    is_on_sale: bool = False

    class Config:
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def derive_price_range(cls, data):
        if not isinstance(data, dict) or data.get("price_range") is not None:
            return data

        price = data.get("sale_price") if data.get("is_on_sale") else data.get("retail_price")
        if price is not None:
            data = {**data, "price_range": PriceRange.for_amount(float(price))}
        else:
            data = {k: v for k, v in data.items() if k != "price_range"}
        return data

    @property
    def current_price(self) -> Optional[float]:
        return self.sale_price if self.is_on_sale else self.retail_price

    @property
    def discount_percentage(self) -> Optional[float]:
        if self.retail_price is None or self.sale_price is None or self.retail_price <= 0:
            return None
        return (self.retail_price - self.sale_price) / self.retail_price * 100


class FurnitureAvailability(BaseModel):
    in_stock: bool = True
    stock_level: StockLevel = StockLevel.IN_STOCK
    regions: List[str] = Field(default_factory=lambda: ["US", "CA"])

    class Config:
        frozen = True


class FurnitureItem(BaseModel):
    """Complete, immutable catalog item"""

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    description: str = ""
    category: FurnitureCategory
    subcategory: FurnitureSubcategory
    brand: Optional[str] = None

    # Physical metadata
    dimensions: FurnitureDimensions
    weight: float = 0.0  # kg
    materials: List[FurnitureMaterial] = Field(default_factory=list)
    colors: List[FurnitureColor] = Field(default_factory=list)
    styles: List[FurnitureStyle] = Field(default_factory=list)
    assembly_required: bool = False
    warranty: Optional[FurnitureWarranty] = None
    sustainability: Optional[SustainabilityInfo] = None
    style_compatibility: Dict[RoomStyle, float] = Field(default_factory=dict)
    functional_features: List[FunctionalFeature] = Field(default_factory=list)

    # Commerce
    pricing: FurniturePricing = Field(default_factory=FurniturePricing)
    availability: FurnitureAvailability = Field(default_factory=FurnitureAvailability)

    # Catalog metadata
    tags: List[str] = Field(default_factory=list)
    date_added: datetime = Field(default_factory=utcnow)
    last_updated: datetime = Field(default_factory=utcnow)
    is_featured: bool = False
    is_custom: bool = False
    user_rating: float = Field(0.0, ge=0.0, le=5.0)
    popularity_score: float = Field(0.0, ge=0.0, le=1.0)

    class Config:
        frozen = True

    @field_validator("materials", "colors", "styles", "functional_features")
    @classmethod
    def drop_duplicates(cls, v: List) -> List:
        """These lists are sets; repeated entries are dropped, first occurrence wins."""
        unique = []
        for value in v:
            if value not in unique:
                unique.append(value)
        return unique

    @field_validator("date_added", "last_updated")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken as UTC so they compare with aware ones."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def __eq__(self, other) -> bool:
        if isinstance(other, FurnitureItem):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def footprint(self) -> float:
        return self.dimensions.footprint

    @property
    def volume(self) -> float:
        return self.dimensions.volume

    @property
    def in_stock(self) -> bool:
        return self.availability.in_stock

    @property
    def price_range(self) -> PriceRange:
        return self.pricing.price_range

    @property
    def current_price(self) -> Optional[float]:
        return self.pricing.current_price

    @property
    def color_families(self) -> Set[ColorFamily]:
        return {color.color_family for color in self.colors}

    def compatibility_score(self, room_style: RoomStyle) -> float:
        """Affinity of this item with a room style, 0.0 when not authored."""
        return self.style_compatibility.get(room_style, 0.0)

    def fits_in_space(self, width: float, depth: float, height: float) -> bool:
        return self.dimensions.fits_within(width, depth, height)
