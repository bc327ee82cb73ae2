from __future__ import annotations

import hashlib
import logging
import random

from pydantic import BaseModel, Field

from ..recommendations.models import DietaryOption, GeoPoint, RestaurantRecord
from .inference import InferredAttributes, infer

logger = logging.getLogger(__name__)

GENERATED_FIELDS = [
    "rating", "price_level", "cuisines", "opening_hours", "reviews", "dietary_options",
    "menu", "ambiance", "special_features", "popular_dishes", "reservation_policy",
    "parking_info", "accessibility_features",
]

# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

# (tag, available, note) before cuisine adjustments
_BASE_DIETARY_OPTIONS: list[tuple[str, bool, str | None]] = [
    ("vegetarian", True, "Multiple vegetarian options available"),
    ("vegan", False, None),
    ("gluten-free", False, None),
    ("dairy-free", False, None),
    ("nut-free", True, "Can accommodate nut allergies with notice"),
    ("shellfish-free", True, "No shellfish in most dishes"),
    ("halal", False, None),
    ("kosher", False, None),
    ("keto", False, None),
    ("paleo", False, None),
    ("low-carb", False, None),
    ("diabetic-friendly", True, "Several lighter options available"),
]

# primary cuisines -> accommodations they switch on
_CUISINE_DIETARY_ADJUSTMENTS: list[tuple[tuple[str, ...], dict[str, str]]] = [
    (("indian", "mediterranean"), {
        "vegetarian": "Extensive vegetarian menu",
        "vegan": "Several vegan dishes available",
    }),
    (("japanese", "thai"), {
        "gluten-free": "Rice-based dishes available",
        "dairy-free": "Many dishes naturally dairy-free",
    }),
    (("mexican", "mediterranean"), {
        "halal": "Halal meat options available",
    }),
]

_POPULAR_DISHES: dict[str, list[str]] = {
    "italian": ["Chicken Parmigiana", "Fettuccine Alfredo", "Tiramisu"],
    "chinese": ["Orange Chicken", "Beef and Broccoli", "Fried Rice"],
    "mexican": ["Fish Tacos", "Enchiladas", "Churros"],
    "japanese": ["Chicken Teriyaki", "California Roll", "Miso Soup"],
    "american": ["BBQ Ribs", "Mac and Cheese", "Apple Pie"],
}

# (name, price offset, description, dietary tags)
_MENU_TEMPLATES: dict[str, dict[str, list[tuple[str, float, str, list[str]]]]] = {
    "italian": {
        "Appetizers": [
            ("Bruschetta", 2, "Toasted bread with tomatoes, basil, and garlic", ["vegetarian"]),
            ("Antipasto Platter", 8, "Selection of cured meats, cheeses, and olives", []),
        ],
        "Main Courses": [
            ("Spaghetti Carbonara", 6, "Classic pasta with eggs, cheese, and pancetta", []),
            ("Margherita Pizza", 4, "Fresh mozzarella, tomato sauce, and basil", ["vegetarian"]),
        ],
    },
    "chinese": {
        "Appetizers": [
            ("Spring Rolls", 1, "Crispy vegetable spring rolls with sweet and sour sauce", ["vegetarian"]),
            ("Pot Stickers", 3, "Pan-fried dumplings filled with pork and vegetables", []),
        ],
        "Main Courses": [
            ("General Tso's Chicken", 5, "Sweet and spicy battered chicken", []),
            ("Ma Po Tofu", 4, "Spicy tofu in Szechuan peppercorn sauce", ["vegetarian"]),
        ],
    },
    "mexican": {
        "Appetizers": [
            ("Guacamole & Chips", 2, "Fresh made guacamole with tortilla chips", ["vegetarian", "vegan"]),
            ("Queso Fundido", 4, "Melted cheese with chorizo and peppers", []),
        ],
        "Main Courses": [
            ("Carnitas Tacos", 6, "Slow-cooked pork with onions and cilantro", []),
            ("Vegetarian Burrito Bowl", 5, "Rice, beans, peppers, and fresh salsa", ["vegetarian"]),
        ],
    },
    "american": {
        "Appetizers": [
            ("Buffalo Wings", 5, "Spicy chicken wings with blue cheese dip", []),
            ("Loaded Nachos", 6, "Tortilla chips with cheese, jalapenos, and sour cream", ["vegetarian"]),
        ],
        "Main Courses": [
            ("Classic Cheeseburger", 8, "Beef patty with cheese, lettuce, tomato, and fries", []),
            ("Grilled Chicken Caesar", 7, "Romaine lettuce with chicken, parmesan, and croutons", []),
        ],
    },
}

_BEVERAGES = [
    ("Soft Drinks", 3.50, "Assorted sodas", []),
    ("Fresh Lemonade", 4.00, "House-made fresh lemonade", ["vegetarian", "vegan"]),
]

_WAIT_MINUTES = {
    "fine_dining": 45,
    "casual_dining": 25,
    "fast_casual": 10,
    "cafe": 15,
    "bar_restaurant": 20,
}

# restaurant_type -> (open, close, friday/saturday close), "HHMM"
_SCHEDULES = {
    "fine_dining": ("1700", "2200", "2300"),
    "casual_dining": ("1100", "2200", "2300"),
    "fast_casual": ("1000", "2100", "2200"),
    "cafe": ("0700", "2000", "2100"),
    "bar_restaurant": ("1600", "0200", "0300"),
}

# (day name, day index with Sunday = 0), Monday first
_WEEK = [
    ("Monday", 1), ("Tuesday", 2), ("Wednesday", 3), ("Thursday", 4),
    ("Friday", 5), ("Saturday", 6), ("Sunday", 0),
]
_LATE_DAYS = {5, 6}

# (author, quality offset, max days ago, text template)
_REVIEW_TEMPLATES = [
    ("Sarah M.", 0.0, 30,
     "Great experience at {name}! The {cuisine} food was delicious and the service "
     "was friendly. Will definitely be back."),
    ("Mike R.", -0.5, 60,
     "Good {cuisine} restaurant. Food was tasty though service was a bit slow. "
     "Nice atmosphere overall."),
]

_AMBIANCE = {
    "fine_dining": {
        "style": "Fine Dining",
        "atmosphere": "Elegant and sophisticated with dim lighting and quiet conversation",
        "seating": "Comfortable upholstered chairs and spacious tables",
        "music_style": "Soft jazz or classical",
        "lighting": "Dim ambient lighting with table candles",
        "dress_code": "Business casual to formal",
    },
    "casual_dining": {
        "style": "Casual Dining",
        "atmosphere": "Relaxed and family-friendly with warm, inviting decor",
        "seating": "Mix of booths and tables accommodating groups of all sizes",
        "music_style": "Contemporary background music",
        "lighting": "Warm, comfortable lighting throughout",
        "dress_code": "Casual",
    },
    "fast_casual": {
        "style": "Fast Casual",
        "atmosphere": "Modern and efficient with a friendly, energetic vibe",
        "seating": "Counter seating and small tables for quick dining",
        "music_style": "Upbeat contemporary music",
        "lighting": "Bright and welcoming",
        "dress_code": "Very casual",
    },
}

ACCESSIBILITY_FEATURES = ["wheelchair accessible", "accessible restrooms"]


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class MenuItem(BaseModel):
    name: str
    price: float = Field(..., ge=0.0)
    description: str = ""
    dietary_tags: list[str] = Field(default_factory=list)


class MenuCategory(BaseModel):
    category: str
    items: list[MenuItem]


class OpeningPeriod(BaseModel):
    day: int = Field(..., ge=0, le=6)
    open: str
    close: str


class OpeningHours(BaseModel):
    periods: list[OpeningPeriod]
    weekday_text: list[str]


class Review(BaseModel):
    author: str
    rating: float = Field(..., ge=0.0, le=5.0)
    text: str
    days_ago: int = Field(..., ge=0)


class Ambiance(BaseModel):
    style: str
    atmosphere: str
    seating: str
    music_style: str
    lighting: str
    dress_code: str


class GeneratedRestaurant(BaseModel):
    record: RestaurantRecord
    attributes: InferredAttributes
    opening_hours: OpeningHours
    reviews: list[Review]
    ambiance: Ambiance
    accessibility_features: list[str] = Field(
        default_factory=lambda: list(ACCESSIBILITY_FEATURES)
    )
    menu: list[MenuCategory]
    average_wait_minutes: int
    reservation_policy: str
    parking_info: str
    generated_fields: list[str] = Field(default_factory=lambda: list(GENERATED_FIELDS))
    confidence: int = Field(..., ge=0, le=100)
    notes: str = ""


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _default_seed(name: str, address: str) -> int:
    digest = hashlib.sha256(f"{name}|{address}".encode()).hexdigest()
    return int(digest[:12], 16)


def build_dietary_options(cuisines: list[str]) -> list[DietaryOption]:
    options = {tag: (available, note) for tag, available, note in _BASE_DIETARY_OPTIONS}
    primary = cuisines[0] if cuisines else None

    for primaries, enabled in _CUISINE_DIETARY_ADJUSTMENTS:
        if primary in primaries:
            for tag, note in enabled.items():
                options[tag] = (True, note)

    return [
        DietaryOption(tag=tag, available=available, note=note)
        for tag, (available, note) in options.items()
    ]


def build_menu(attributes: InferredAttributes) -> list[MenuCategory]:
    """Menu prices scale with the price tier and the location multiplier."""
    base_price = attributes.price_level_base * 5 * attributes.price_multiplier
    template = _MENU_TEMPLATES.get(attributes.cuisines[0], _MENU_TEMPLATES["american"])

    menu = [
        MenuCategory(
            category=category,
            items=[
                MenuItem(
                    name=name,
                    price=round(base_price + offset, 2),
                    description=description,
                    dietary_tags=tags,
                )
                for name, offset, description, tags in items
            ],
        )
        for category, items in template.items()
    ]
    menu.append(MenuCategory(
        category="Beverages",
        items=[
            MenuItem(name=name, price=price, description=description, dietary_tags=tags)
            for name, price, description, tags in _BEVERAGES
        ],
    ))
    return menu


def build_special_features(attributes: InferredAttributes) -> list[str]:
    features = ["takeout available", "delivery available"]

    if attributes.restaurant_type == "fine_dining":
        features += ["private dining rooms", "wine list", "reservations recommended"]
    elif attributes.restaurant_type == "casual_dining":
        features += ["family-friendly", "group dining", "catering available"]

    if attributes.location_style == "urban":
        features += ["street parking", "public transit accessible"]
    else:
        features += ["free parking", "outdoor seating"]

    return features


def build_popular_dishes(attributes: InferredAttributes) -> list[str]:
    return list(_POPULAR_DISHES.get(attributes.cuisines[0], _POPULAR_DISHES["american"]))


def format_time(military: str) -> str:
    """``"1730"`` -> ``"5:30 PM"``; ``"0000"`` -> ``"12:00 AM"``."""
    hours = int(military[:2])
    minutes = military[2:]
    period = "PM" if hours >= 12 else "AM"
    display = 12 if hours == 0 else hours - 12 if hours > 12 else hours
    return f"{display}:{minutes} {period}"


def build_opening_hours(restaurant_type: str) -> OpeningHours:
    opens, closes, late_close = _SCHEDULES.get(restaurant_type, _SCHEDULES["casual_dining"])
    periods: list[OpeningPeriod] = []
    weekday_text: list[str] = []

    for day_name, day in _WEEK:
        close = late_close if day in _LATE_DAYS else closes
        periods.append(OpeningPeriod(day=day, open=opens, close=close))
        weekday_text.append(f"{day_name}: {format_time(opens)} - {format_time(close)}")

    return OpeningHours(periods=periods, weekday_text=weekday_text)


def build_reviews(name: str, attributes: InferredAttributes, rng: random.Random) -> list[Review]:
    cuisine = attributes.cuisines[0]
    reviews = []
    for author, offset, max_days, template in _REVIEW_TEMPLATES:
        rating = attributes.expected_quality + offset + (rng.random() - 0.5) * 0.5
        reviews.append(Review(
            author=author,
            rating=max(3.0, min(5.0, round(rating, 1))),
            text=template.format(name=name, cuisine=cuisine),
            days_ago=rng.randint(0, max_days),
        ))
    return reviews


def build_ambiance(restaurant_type: str) -> Ambiance:
    return Ambiance(**_AMBIANCE.get(restaurant_type, _AMBIANCE["casual_dining"]))


def _reservation_policy(restaurant_type: str) -> str:
    if restaurant_type == "fine_dining":
        return "Reservations strongly recommended, especially for dinner service and weekends"
    if restaurant_type == "casual_dining":
        return "Reservations accepted for parties of 6 or more"
    return "Walk-ins welcome, no reservations needed"


def _parking_info(location_style: str) -> str:
    if location_style == "urban":
        return "Street parking and nearby parking garages available"
    if location_style == "upscale":
        return "Free valet parking available"
    return "Free parking lot available"


def generate_restaurant(name: str, address: str, seed: int | None = None) -> GeneratedRestaurant:
    """
    Build a synthetic catalog entry from a name and an address.

    Output is deterministic for a given seed; without one the seed is derived
    from the name and address. Coordinates are placeholders, not geocoded.
    """
    rng = random.Random(_default_seed(name, address) if seed is None else seed)
    attributes = infer(name, address)

    rating = attributes.expected_quality + (rng.random() - 0.5) * 0.8
    rating = max(3.0, min(5.0, round(rating, 1)))
    location = GeoPoint(
        lat=round(40.7128 + (rng.random() - 0.5) * 10, 6),
        lng=round(-74.0060 + (rng.random() - 0.5) * 50, 6),
    )

    record = RestaurantRecord(
        id=f"generated_{rng.getrandbits(40):010x}",
        name=name,
        address=address,
        location=location,
        rating=rating,
        price_level=attributes.price_level_base,
        cuisines=attributes.cuisines,
        dietary_options=build_dietary_options(attributes.cuisines),
        popular_dishes=build_popular_dishes(attributes),
        features=build_special_features(attributes),
    )

    generated = GeneratedRestaurant(
        record=record,
        attributes=attributes,
        opening_hours=build_opening_hours(attributes.restaurant_type),
        reviews=build_reviews(name, attributes, rng),
        ambiance=build_ambiance(attributes.restaurant_type),
        menu=build_menu(attributes),
        average_wait_minutes=_WAIT_MINUTES.get(attributes.restaurant_type, 25),
        reservation_policy=_reservation_policy(attributes.restaurant_type),
        parking_info=_parking_info(attributes.location_style),
        confidence=attributes.confidence,
        notes=(
            f"Generated from name analysis. Cuisine: {', '.join(attributes.cuisines)}. "
            f"Style: {attributes.restaurant_type}. Confidence: {attributes.confidence}%"
        ),
    )
    logger.info("Generated restaurant %s (%s)", record.name, record.id)
    return generated
