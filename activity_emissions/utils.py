# activity_emissions/utils.py
"""Rule-based CO2e estimators for logged activities.

Each ``calc_*`` function returns pounds of CO2e for one category; the public
entry point :func:`calculate_emissions` dispatches on the category tag and
converts the result to kilograms. Nothing here raises for well-typed input:
unknown categories, units and labels all fall through to a default factor.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from . import factors as F
from .rules import Rule, first_match, normalize_label

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

ZERO_EMISSION_RULES = [
    Rule(("walk", "walking"), "walking"),
    Rule(("bike", "bicycle", "cycling"), "cycling"),
    Rule(("skateboard",), "skateboard"),
    Rule(("scooter",), "kick scooter", excludes=("motor",)),
]


def _flight_factor(text):
    if "domestic" in text or "short" in text:
        return F.DOMESTIC_FLIGHT_PER_PASSENGER_MILE
    return F.LONG_FLIGHT_PER_PASSENGER_MILE


TRANSPORT_RULES = [
    # shadowed by the "bike" zero-emission rule above; kept in priority order
    Rule(("electric bike", "e-bike"), F.E_BIKE_PER_MILE),
    Rule(("bus", "public transport"), F.BUS_PER_PASSENGER_MILE),
    Rule(("train", "subway", "metro"), F.TRAIN_PER_PASSENGER_MILE),
    Rule(("light rail", "tram"), F.LIGHT_RAIL_PER_PASSENGER_MILE),
    Rule(("flight", "airplane", "plane"), _flight_factor),
    Rule(("electric car", "ev", "tesla"), F.ELECTRIC_CAR_PER_MILE),
    Rule(("hybrid",), F.per_mile_from_mpg(F.HYBRID_MPG)),
    Rule(("motorcycle", "motorbike"), F.per_mile_from_mpg(F.MOTORCYCLE_MPG)),
    Rule(("motor scooter", "moped"), F.per_mile_from_mpg(F.MOPED_MPG)),
    Rule(("suv", "truck", "pickup"), F.per_mile_from_mpg(F.SUV_MPG)),
    Rule(("van", "minivan"), F.per_mile_from_mpg(F.VAN_MPG)),
    Rule(("compact", "small car"), F.per_mile_from_mpg(F.COMPACT_MPG)),
    Rule(("luxury", "sports car"), F.per_mile_from_mpg(F.LUXURY_MPG)),
    Rule(("uber", "lyft", "taxi"), F.per_mile_from_mpg(F.DEFAULT_MPG) * F.RIDESHARE_EMPTY_MILES),
    Rule(("car", "drive", "driving"), F.per_mile_from_mpg(F.DEFAULT_MPG)),
    Rule(("delivery", "freight"), F.DELIVERY_PER_MILE),
]


def transport_factor(label: Optional[str]) -> Optional[float]:
    """Per-mile factor for a transport label, or None for zero-emission modes."""
    text = normalize_label(label)
    rule = first_match(ZERO_EMISSION_RULES, text)
    if rule:
        logger.debug("transport %r: zero-emission (%s)", text, rule.outcome)
        return None
    rule = first_match(TRANSPORT_RULES, text)
    if rule is None:
        return F.UNMATCHED_TRANSPORT_PER_MILE
    logger.debug("transport %r: matched %s", text, rule.keywords)
    return rule.outcome(text) if callable(rule.outcome) else rule.outcome


def calc_transport(amount: float, unit: str, label: Optional[str] = None) -> float:
    factor = transport_factor(label)
    if factor is None:
        return 0.0

    if unit == "miles":
        return amount * factor
    elif unit == "km":
        miles = amount * F.KM_TO_MILES
        return miles * factor
    elif unit == "gallons":
        # fuel burned, regardless of vehicle
        return amount * F.CO2_PER_GALLON * F.GREENHOUSE_GAS_MULTIPLIER
    elif unit == "liters":
        gallons = amount * F.LITERS_TO_GALLONS
        return gallons * F.CO2_PER_GALLON * F.GREENHOUSE_GAS_MULTIPLIER
    else:
        return amount * factor


# ---------------------------------------------------------------------------
# Energy
# ---------------------------------------------------------------------------

RENEWABLE_RULES = [
    Rule(("solar", "wind", "hydro"), F.SOLAR_WIND_HYDRO_PER_UNIT),
    Rule(("geothermal",), F.GEOTHERMAL_PER_UNIT),
    Rule(("nuclear",), F.NUCLEAR_PER_UNIT),
]


def _kwh_per_unit(kwh):
    def estimate(amount, unit, text):
        return amount * kwh * F.ELECTRICITY_PER_KWH
    return estimate


def _air_conditioning(amount, unit, text):
    if unit == "hours":
        return amount * F.AC_KWH_PER_HOUR * F.ELECTRICITY_PER_KWH
    return amount * F.ELECTRICITY_PER_KWH


def _space_heating(amount, unit, text):
    if "electric" in text:
        return amount * F.ELECTRIC_HEATING_KWH * F.ELECTRICITY_PER_KWH
    return amount * F.NATURAL_GAS_PER_THERM


def _water_heater(amount, unit, text):
    if "electric" in text:
        return amount * F.ELECTRIC_WATER_HEATER_KWH * F.ELECTRICITY_PER_KWH
    return amount * (F.NATURAL_GAS_PER_THERM * F.GAS_WATER_HEATER_THERM_SHARE)


APPLIANCE_RULES = [
    Rule(("air conditioning", "ac"), _air_conditioning),
    Rule(("heating",), _space_heating, excludes=("water",)),
    Rule(("water heater", "hot water"), _water_heater),
    Rule(("dryer", "clothes dryer"), _kwh_per_unit(F.DRYER_KWH_PER_LOAD)),
    Rule(("dishwasher",), _kwh_per_unit(F.DISHWASHER_KWH_PER_LOAD)),
    Rule(("refrigerator", "fridge"), _kwh_per_unit(F.FRIDGE_KWH_PER_DAY)),
    Rule(("tv", "television"), _kwh_per_unit(F.TV_KWH_PER_HOUR)),
    Rule(("computer", "laptop"), _kwh_per_unit(F.COMPUTER_KWH_PER_HOUR)),
]


def _electricity(amount, unit, text):
    if unit == "kWh":
        return amount * F.ELECTRICITY_PER_KWH
    elif unit == "dollars":
        kwh = amount / F.KWH_PRICE
        return kwh * F.ELECTRICITY_PER_KWH
    elif unit == "hours":
        kwh = amount * F.KWH_PER_USAGE_HOUR
        return kwh * F.ELECTRICITY_PER_KWH
    else:
        return amount * F.ELECTRICITY_PER_KWH


def _natural_gas(amount, unit, text):
    if unit == "therms":
        return amount * F.NATURAL_GAS_PER_THERM
    elif unit == "1000ft3":
        return amount * F.NATURAL_GAS_PER_1000_FT3
    elif unit == "dollars":
        thousand_ft3 = amount / F.GAS_PRICE_PER_1000_FT3
        return thousand_ft3 * F.NATURAL_GAS_PER_1000_FT3
    else:
        return amount * F.NATURAL_GAS_PER_THERM


def _fuel_oil(amount, unit, text):
    if unit == "dollars":
        gallons = amount / F.FUEL_OIL_PRICE_PER_GALLON
        return gallons * F.FUEL_OIL_PER_GALLON
    return amount * F.FUEL_OIL_PER_GALLON


def _propane(amount, unit, text):
    if unit == "dollars":
        gallons = amount / F.PROPANE_PRICE_PER_GALLON
        return gallons * F.PROPANE_PER_GALLON
    return amount * F.PROPANE_PER_GALLON


def _coal(amount, unit, text):
    return amount * F.COAL_PER_LB


ENERGY_SOURCE_RULES = [
    Rule(("electricity", "electric"), _electricity, units=("kWh",)),
    Rule(("gas", "natural gas"), _natural_gas),
    Rule(("oil", "fuel oil"), _fuel_oil),
    Rule(("propane",), _propane),
    Rule(("coal",), _coal),
]


def calc_energy(amount: float, unit: str, label: Optional[str] = None) -> float:
    text = normalize_label(label)

    rule = first_match(RENEWABLE_RULES, text)
    if rule:
        return amount * rule.outcome

    rule = first_match(APPLIANCE_RULES, text) or first_match(ENERGY_SOURCE_RULES, text, unit)
    if rule:
        logger.debug("energy %r (%s): matched %s", text, unit, rule.keywords)
        return rule.outcome(amount, unit, text)

    # treat as grid electricity
    return amount * F.ELECTRICITY_PER_KWH


# ---------------------------------------------------------------------------
# Food
# ---------------------------------------------------------------------------

def _fish_factor(text):
    if "farmed" in text:
        return F.FOOD_FACTORS["fish_farmed"]
    return F.FOOD_FACTORS["fish_wild"]


def _vegetable_factor(text):
    if "organic" in text:
        return F.FOOD_FACTORS["organic_vegetables"]
    return F.FOOD_FACTORS["conventional_vegetables"]


FOOD_RULES = [
    # meat
    Rule(("beef", "steak", "hamburger"), F.FOOD_FACTORS["beef"]),
    Rule(("lamb",), F.FOOD_FACTORS["lamb"]),
    Rule(("pork", "bacon", "ham"), F.FOOD_FACTORS["pork"]),
    Rule(("chicken", "poultry"), F.FOOD_FACTORS["chicken"]),
    Rule(("turkey",), F.FOOD_FACTORS["turkey"]),
    Rule(("fish", "salmon", "tuna"), _fish_factor),
    # dairy
    Rule(("cheese",), F.FOOD_FACTORS["cheese"]),
    Rule(("milk",), F.FOOD_FACTORS["milk"]),
    Rule(("yogurt",), F.FOOD_FACTORS["yogurt"]),
    Rule(("butter",), F.FOOD_FACTORS["butter"]),
    # plant protein
    Rule(("tofu", "soy"), F.FOOD_FACTORS["tofu"]),
    Rule(("beans", "legumes"), F.FOOD_FACTORS["beans"]),
    Rule(("lentils",), F.FOOD_FACTORS["lentils"]),
    Rule(("nuts", "almonds"), F.FOOD_FACTORS["nuts"]),
    # grains and starches
    Rule(("rice",), F.FOOD_FACTORS["rice"]),
    Rule(("wheat", "bread"), F.FOOD_FACTORS["bread"]),
    Rule(("pasta",), F.FOOD_FACTORS["pasta"]),
    Rule(("potato",), F.FOOD_FACTORS["potatoes"]),
    # vegetables
    Rule(("lettuce", "spinach", "kale"), F.FOOD_FACTORS["leafy_greens"]),
    Rule(("carrot", "beet"), F.FOOD_FACTORS["root_vegetables"]),
    Rule(("tomato",), F.FOOD_FACTORS["tomatoes"]),
    Rule(("onion",), F.FOOD_FACTORS["onions"]),
    Rule(("pepper",), F.FOOD_FACTORS["peppers"]),
    Rule(("vegetable",), _vegetable_factor),
    # fruit
    Rule(("apple",), F.FOOD_FACTORS["apples"]),
    Rule(("banana",), F.FOOD_FACTORS["bananas"]),
    Rule(("orange", "lemon", "citrus"), F.FOOD_FACTORS["citrus"]),
    Rule(("berry", "strawberry"), F.FOOD_FACTORS["berries"]),
    Rule(("fruit",), F.AVERAGE_FRUIT),
    # processed
    Rule(("fast food", "mcdonalds", "burger king"), F.FOOD_FACTORS["fast_food"]),
    Rule(("processed", "packaged"), F.FOOD_FACTORS["packaged_snacks"]),
    Rule(("soda", "soft drink"), F.FOOD_FACTORS["soft_drinks"]),
]


def food_factor(label: Optional[str]) -> float:
    """lbs CO2e per kg of the food named by ``label``."""
    text = normalize_label(label)
    rule = first_match(FOOD_RULES, text)
    if rule is None:
        return F.DEFAULT_FOOD_FACTOR
    logger.debug("food %r: matched %s", text, rule.keywords)
    return rule.outcome(text) if callable(rule.outcome) else rule.outcome


def calc_food(amount: float, unit: str, label: Optional[str] = None) -> float:
    factor = food_factor(label)

    if unit == "kg":
        return amount * factor * F.KG_TO_LBS
    elif unit == "g":
        return (amount / 1000) * factor * F.KG_TO_LBS
    elif unit == "lbs":
        return amount * factor
    elif unit == "servings":
        return amount * (factor * F.LBS_PER_SERVING)
    elif unit == "meals":
        return amount * (factor * F.LBS_PER_MEAL)
    else:
        return amount * factor


# ---------------------------------------------------------------------------
# Home & lifestyle
# ---------------------------------------------------------------------------

RECYCLING_RULES = [
    Rule(("aluminum", "can"), F.RECYCLING_CREDITS["aluminum"]),
    Rule(("plastic",), F.RECYCLING_CREDITS["plastic"]),
    Rule(("glass",), F.RECYCLING_CREDITS["glass"]),
    Rule(("newspaper",), F.RECYCLING_CREDITS["newspaper"]),
    Rule(("magazine",), F.RECYCLING_CREDITS["magazines"]),
    Rule(("cardboard",), F.RECYCLING_CREDITS["cardboard"]),
    Rule(("electronics",), F.RECYCLING_CREDITS["electronics"]),
]


def _waste(amount, unit, text):
    if unit == "people":
        return amount * F.WASTE_PER_PERSON_YEAR
    elif unit == "bags":
        return amount * F.WASTE_PER_BAG
    elif unit == "pounds":
        return amount * F.WASTE_PER_POUND
    else:
        return amount * F.WASTE_GENERIC


def _recycling(amount, unit, text):
    rule = first_match(RECYCLING_RULES, text)
    if rule is None:
        return amount * F.RECYCLING_GENERIC
    return amount * rule.outcome


def _compost(amount, unit, text):
    return amount * F.COMPOST_CREDIT


def _water(amount, unit, text):
    if unit == "gallons":
        return amount * F.WATER_PER_GALLON
    elif unit == "minutes":
        if "shower" in text:
            gallons = amount * F.SHOWER_GALLONS_PER_MINUTE
        else:
            gallons = amount * F.TAP_GALLONS_PER_MINUTE
        return gallons * F.WATER_PER_GALLON
    else:
        return amount * F.WATER_GENERIC


def _lawn_and_garden(amount, unit, text):
    if "mower" in text or "mowing" in text:
        return amount * F.MOWER_PER_HOUR
    elif "fertilizer" in text:
        return amount * F.FERTILIZER_PER_UNIT
    else:
        return amount * F.GARDENING_GENERIC


HOME_RULES = [
    Rule(("waste", "trash", "garbage"), _waste),
    Rule(("recycle", "recycling"), _recycling),
    Rule(("compost",), _compost),
    Rule(("water",), _water),
    Rule(("lawn", "garden"), _lawn_and_garden),
]


def calc_home(amount: float, unit: str, label: Optional[str] = None) -> float:
    text = normalize_label(label)
    rule = first_match(HOME_RULES, text)
    if rule is None:
        return amount * F.HOME_DEFAULT
    logger.debug("home %r (%s): matched %s", text, unit, rule.keywords)
    return rule.outcome(amount, unit, text)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

CALCULATORS = {
    "transport": calc_transport,
    "energy": calc_energy,
    "food": calc_food,
    "home": calc_home,
}


def calculate_emissions(category: str, amount: float, unit: str, label: Optional[str] = None) -> float:
    """Estimate kg CO2e for one activity.

    ``amount`` is expected to be validated upstream (positive and finite).
    The result keeps full precision and may be negative for recycling and
    composting credits.
    """
    calc = CALCULATORS.get(category)
    if calc is None:
        logger.warning("unknown category %r, using flat fallback factor", category)
        return amount * F.FALLBACK_LBS_PER_UNIT * F.LBS_TO_KG
    return calc(amount, unit, label) * F.LBS_TO_KG


def _field(item, name, default=None):
    if isinstance(item, Mapping):
        return item.get(name, default)
    return getattr(item, name, default)


def summarize(items: Iterable[Any]) -> Tuple[float, Dict[str, float], List[Dict[str, Any]]]:
    """Estimate a batch of activities.

    ``items`` are mappings or objects with category/amount/unit/label;
    amounts must already be numeric. Items without a category count toward
    the total under the flat fallback but are left out of the per-category
    breakdown. Returns (total_kgco2, kg per category, per-item details).
    """
    total = 0.0
    by_category: Dict[str, float] = {c: 0.0 for c in F.CATEGORIES}
    details: List[Dict[str, Any]] = []
    for item in items:
        category = _field(item, "category") or ""
        amount = float(_field(item, "amount", 0) or 0)
        unit = _field(item, "unit", "") or ""
        label = _field(item, "label", "") or ""
        kg = calculate_emissions(category, amount, unit, label)
        total += kg
        if category:
            by_category[category] = by_category.get(category, 0.0) + kg
        details.append({
            "category": category,
            "amount": amount,
            "unit": unit,
            "label": label,
            "emissions_kgco2": kg,
        })
    return total, by_category, details
