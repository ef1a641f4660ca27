"""
Emission estimator tests.

Expected values are written out from the published factors so a change to
any constant or to rule order shows up here.
"""

import pytest

from activity_emissions import factors as F
from activity_emissions.utils import (
    calc_energy,
    calc_food,
    calc_home,
    calc_transport,
    calculate_emissions,
    food_factor,
    summarize,
    transport_factor,
)

LBS = 0.453592
CAR_PER_MILE = (19.6 / 24.8) * 1.01


# ==================== DISPATCH ====================

def test_unknown_category_uses_flat_fallback():
    assert calculate_emissions("shopping", 10, "units", "new shoes") == pytest.approx(10 * 0.5 * LBS)


@pytest.mark.parametrize("category,unit,expected_lbs", [
    ("transport", "miles", 0.0),
    ("energy", "kWh", 10 * 0.92),
    ("food", "kg", 10 * 3.0 * 2.20462),
    ("home", "people", 10 * 2.0),
])
def test_empty_label_gives_category_default(category, unit, expected_lbs):
    assert calculate_emissions(category, 10, unit, "") == pytest.approx(expected_lbs * LBS)
    assert calculate_emissions(category, 10, unit) == pytest.approx(expected_lbs * LBS)


def test_identical_inputs_give_identical_results():
    args = ("transport", 42.5, "km", "Uber to the airport")
    assert calculate_emissions(*args) == calculate_emissions(*args)


@pytest.mark.parametrize("category", ["transport", "energy", "food", "home"])
def test_unrecognized_unit_does_not_raise(category):
    result = calculate_emissions(category, 3, "furlongs", "something")
    assert isinstance(result, float)


# ==================== TRANSPORT ====================

def test_car_drive_scenario():
    kg = calculate_emissions("transport", 25, "km", "Car drive to work")
    assert kg == pytest.approx(25 * 0.621371 * CAR_PER_MILE * LBS)
    assert kg == pytest.approx(5.62, abs=0.01)


@pytest.mark.parametrize("x", [1.0, 25.0, 312.7])
def test_km_and_miles_agree(x):
    km = calculate_emissions("transport", x, "km", "car")
    miles = calculate_emissions("transport", x * 0.621371, "miles", "car")
    assert km == pytest.approx(miles)


@pytest.mark.parametrize("label", [
    "walk to school", "Walking", "bike commute", "bicycle", "cycling class",
    "electric bike", "e-bike ride", "skateboard", "kick scooter",
])
@pytest.mark.parametrize("unit", ["miles", "km", "gallons", "liters", "trips"])
def test_zero_emission_modes_are_terminal(label, unit):
    assert calculate_emissions("transport", 100, unit, label) == 0


def test_electric_car_wins_over_rideshare():
    assert calculate_emissions("transport", 10, "miles", "electric car uber") == pytest.approx(10 * 0.20 * LBS)


def test_rideshare_adds_empty_miles():
    assert calc_transport(10, "miles", "Taxi ride") == pytest.approx(10 * CAR_PER_MILE * 1.4)


def test_motor_scooter_is_not_zero():
    assert calc_transport(10, "miles", "motor scooter") == pytest.approx(10 * (19.6 / 80.0) * 1.01)


@pytest.mark.parametrize("label,factor", [
    ("bus to town", 0.33),
    ("subway", 0.25),
    ("tram", 0.20),
    ("domestic flight", 0.62),
    ("short plane hop", 0.62),
    ("flight to Tokyo", 0.40),
    ("delivery van", 19.6 / 22.0 * 1.01),
    ("freight", 2.5),
    ("hybrid", 19.6 / 45.0 * 1.01),
    ("SUV", 19.6 / 20.0 * 1.01),
])
def test_per_mile_factors(label, factor):
    assert transport_factor(label) == pytest.approx(factor)
    assert calc_transport(2, "miles", label) == pytest.approx(2 * factor)


def test_delivery_van_matches_van_first():
    # "van" precedes "delivery" in priority order
    assert transport_factor("delivery van") == pytest.approx(F.per_mile_from_mpg(F.VAN_MPG))


def test_fuel_units_ignore_vehicle_factor():
    gallons = calc_transport(10, "gallons", "bus")
    assert gallons == pytest.approx(10 * 19.6 * 1.01)
    assert calc_transport(10, "gallons", "") == gallons
    assert calc_transport(10, "liters", "car") == pytest.approx(10 * 0.264172 * 19.6 * 1.01)


def test_unmatched_transport_is_zero_for_distance():
    assert calc_transport(50, "miles", "hot air balloon") == 0.0


def test_other_units_use_factor_directly():
    assert calc_transport(3, "trips", "train") == pytest.approx(3 * 0.25)


# ==================== ENERGY ====================

@pytest.mark.parametrize("label,factor", [
    ("solar panels", 0.05),
    ("wind", 0.05),
    ("geothermal", 0.1),
    ("nuclear", 0.15),
])
@pytest.mark.parametrize("unit", ["kWh", "dollars", "hours"])
def test_renewables_ignore_unit(label, factor, unit):
    assert calc_energy(100, unit, label) == pytest.approx(100 * factor)


def test_air_conditioning_by_hours():
    assert calc_energy(3, "hours", "Air conditioning") == pytest.approx(3 * 3.5 * 0.92)
    assert calc_energy(3, "kWh", "Air conditioning") == pytest.approx(3 * 0.92)


def test_heating_electric_vs_gas():
    assert calc_energy(5, "hours", "electric heating") == pytest.approx(5 * 2.0 * 0.92)
    assert calc_energy(5, "therms", "gas heating") == pytest.approx(5 * 11.7)


def test_water_heater_electric_vs_gas():
    assert calc_energy(2, "hours", "electric water heater") == pytest.approx(2 * 1.5 * 0.92)
    assert calc_energy(2, "therms", "hot water") == pytest.approx(2 * 11.7 * 0.8)


def test_water_labels_skip_space_heating():
    # "heating" with "water" is not space heating; falls to the source rules
    assert calc_energy(2, "therms", "water heating") == pytest.approx(2 * 0.92)
    assert calc_energy(2, "hours", "electric water heating") == pytest.approx(2 * 1.5 * 0.92)


@pytest.mark.parametrize("label,kwh", [
    ("clothes dryer", 2.5),
    ("dishwasher", 1.8),
    ("fridge", 0.5),
    ("refrigerator", 0.5),
    ("tv", 0.15),
    ("laptop", 0.1),
])
def test_appliances(label, kwh):
    assert calc_energy(4, "hours", label) == pytest.approx(4 * kwh * 0.92)


def test_electricity_units():
    assert calc_energy(100, "kWh", "electricity") == pytest.approx(92.0)
    assert calc_energy(50, "dollars", "electricity bill") == pytest.approx(50 / 0.1609 * 0.92)
    assert calc_energy(2, "hours", "electric") == pytest.approx(2 * 1.5 * 0.92)


def test_kwh_unit_counts_as_electricity_without_keyword():
    assert calc_energy(10, "kWh", "monthly usage") == pytest.approx(10 * 0.92)


def test_natural_gas_units():
    assert calc_energy(10, "therms", "natural gas") == pytest.approx(10 * 11.7)
    assert calc_energy(2, "1000ft3", "natural gas") == pytest.approx(2 * 117)
    assert calc_energy(30, "dollars", "gas bill") == pytest.approx(30 / 15.23 * 117)


def test_fuel_oil_propane_coal():
    assert calc_energy(10, "gallons", "fuel oil") == pytest.approx(224.0)
    assert calc_energy(42.7, "dollars", "oil") == pytest.approx(10 * 22.4)
    assert calc_energy(25.6, "dollars", "propane") == pytest.approx(10 * 12.7)
    assert calc_energy(3, "gallons", "propane") == pytest.approx(3 * 12.7)
    assert calc_energy(100, "pounds", "coal") == pytest.approx(207.0)


def test_unmatched_energy_defaults_to_electricity():
    assert calc_energy(7, "hours", "") == pytest.approx(7 * 0.92)


# ==================== FOOD ====================

def test_beef_scenario():
    assert calculate_emissions("food", 1, "kg", "beef") == pytest.approx(60.0, rel=1e-4)


@pytest.mark.parametrize("label,factor", [
    ("Steak dinner", 60.0),
    ("ham sandwich", 12.1),
    ("grilled chicken", 6.9),
    ("salmon", 5.4),
    ("farmed salmon", 13.6),
    ("cheddar cheese", 21.2),
    ("tofu stir fry", 3.0),
    ("whole wheat", 1.3),
    ("spinach", 0.4),
    ("organic vegetables", 0.3),
    ("mixed vegetables", 0.5),
    ("strawberry", 1.5),
    ("fruit salad", 0.75),
    ("mcdonalds", 15.0),
    ("soda", 0.7),
    ("mystery casserole", 3.0),
    ("", 3.0),
])
def test_food_factors(label, factor):
    assert food_factor(label) == pytest.approx(factor)


def test_food_units():
    assert calc_food(500, "g", "chicken") == pytest.approx(0.5 * 6.9 * 2.20462)
    assert calc_food(2, "lbs", "rice") == pytest.approx(8.0)
    assert calc_food(4, "servings", "pasta") == pytest.approx(4 * 1.1 * 0.25)
    assert calc_food(1, "meals", "fast food") == pytest.approx(15.0)
    assert calc_food(2, "bowls", "lentils") == pytest.approx(3.6)


# ==================== HOME ====================

def test_aluminum_recycling_is_negative():
    kg = calculate_emissions("home", 5, "people", "aluminum recycling")
    assert kg < 0
    assert kg == pytest.approx(5 * -89.38 * LBS)


@pytest.mark.parametrize("label,credit", [
    ("recycling cans", -89.38),
    ("plastic recycling", -35.56),
    ("recycle glass", -25.39),
    ("newspaper recycling", -113.14),
    ("magazine recycling", -27.46),
    ("cardboard recycling", -50.0),
    ("electronics recycling", -100.0),
    ("recycling", -30.0),
])
def test_recycling_credits(label, credit):
    assert calc_home(2, "units", label) == pytest.approx(2 * credit)


def test_waste_units():
    assert calc_home(2, "people", "household waste") == pytest.approx(2 * 822)
    assert calc_home(3, "bags", "trash") == pytest.approx(45.0)
    assert calc_home(20, "pounds", "garbage") == pytest.approx(10.0)
    assert calc_home(1, "units", "waste") == pytest.approx(10.0)


def test_waste_wins_over_recycling():
    assert calc_home(1, "bags", "recycling waste") == pytest.approx(15.0)


def test_compost_credit():
    assert calc_home(2, "units", "compost") == pytest.approx(-40.0)


def test_water_use():
    assert calc_home(100, "gallons", "water") == pytest.approx(0.2)
    assert calc_home(10, "minutes", "shower water") == pytest.approx(10 * 2.5 * 0.002)
    assert calc_home(10, "minutes", "tap water") == pytest.approx(10 * 1.0 * 0.002)
    assert calc_home(4, "units", "water") == pytest.approx(2.0)


def test_lawn_and_garden():
    assert calc_home(2, "hours", "lawn mowing") == pytest.approx(5.0)
    assert calc_home(1, "units", "garden fertilizer") == pytest.approx(5.0)
    assert calc_home(3, "hours", "gardening") == pytest.approx(0.3)


def test_unmatched_home_default():
    assert calc_home(3, "hours", "sewing") == pytest.approx(6.0)


# ==================== BATCH ====================

def test_summarize_totals_by_category():
    items = [
        {"category": "transport", "amount": 10, "unit": "miles", "label": "bus"},
        {"category": "food", "amount": 1, "unit": "kg", "label": "beef"},
        {"category": "home", "amount": 1, "unit": "units", "label": "compost"},
    ]
    total, by_category, details = summarize(items)

    assert by_category["transport"] == pytest.approx(3.3 * LBS)
    assert by_category["energy"] == 0.0
    assert by_category["home"] == pytest.approx(-20 * LBS)
    assert total == pytest.approx(sum(d["emissions_kgco2"] for d in details))
    assert [d["label"] for d in details] == ["bus", "beef", "compost"]


def test_summarize_keeps_unknown_categories():
    total, by_category, _ = summarize([{"category": "other", "amount": 4, "unit": "units"}])
    assert by_category["other"] == pytest.approx(4 * 0.5 * LBS)
    assert total == pytest.approx(by_category["other"])


def test_summarize_without_category_skips_breakdown():
    total, by_category, details = summarize([{"amount": 2, "unit": "x"}])
    assert None not in by_category
    assert set(by_category) == {"transport", "energy", "food", "home"}
    assert total == pytest.approx(2 * 0.5 * LBS)
    assert details[0]["category"] == ""
