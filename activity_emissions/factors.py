# activity_emissions/factors.py
# EPA-style emission factors. Values are lbs CO2e per basis unit unless noted.

LBS_TO_KG = 0.453592
KG_TO_LBS = 2.20462
FALLBACK_LBS_PER_UNIT = 0.5  # unknown category

CATEGORIES = {
    "transport": "Transportation",
    "energy": "Energy Usage",
    "food": "Food & Diet",
    "home": "Home & Lifestyle",
}

# Units offered to callers per category. Anything else falls back to a raw
# amount * factor computation.
UNIT_OPTIONS = {
    "transport": ["miles", "km", "gallons", "liters", "hours", "trips"],
    "energy": ["kWh", "therms", "1000ft3", "gallons", "dollars", "hours"],
    "food": ["kg", "g", "lbs", "servings", "meals"],
    "home": ["people", "bags", "pounds", "gallons", "minutes", "hours", "units"],
}

# ---- transport -------------------------------------------------------------
CO2_PER_GALLON = 19.6  # gasoline
GREENHOUSE_GAS_MULTIPLIER = 1.01  # non-CO2 gases
KM_TO_MILES = 0.621371
LITERS_TO_GALLONS = 0.264172

DEFAULT_MPG = 24.8
HYBRID_MPG = 45.0
MOTORCYCLE_MPG = 50.0
MOPED_MPG = 80.0
SUV_MPG = 20.0
VAN_MPG = 22.0
COMPACT_MPG = 32.0
LUXURY_MPG = 18.0
RIDESHARE_EMPTY_MILES = 1.4

E_BIKE_PER_MILE = 0.02
BUS_PER_PASSENGER_MILE = 0.33
TRAIN_PER_PASSENGER_MILE = 0.25
LIGHT_RAIL_PER_PASSENGER_MILE = 0.20
DOMESTIC_FLIGHT_PER_PASSENGER_MILE = 0.62
LONG_FLIGHT_PER_PASSENGER_MILE = 0.40
ELECTRIC_CAR_PER_MILE = 0.20
DELIVERY_PER_MILE = 2.5
UNMATCHED_TRANSPORT_PER_MILE = 0.0


def per_mile_from_mpg(mpg):
    return (CO2_PER_GALLON / mpg) * GREENHOUSE_GAS_MULTIPLIER


# ---- energy ----------------------------------------------------------------
ELECTRICITY_PER_KWH = 0.92  # US grid average
NATURAL_GAS_PER_THERM = 11.7
NATURAL_GAS_PER_1000_FT3 = 117.0
FUEL_OIL_PER_GALLON = 22.4
PROPANE_PER_GALLON = 12.7
COAL_PER_LB = 2.07

KWH_PRICE = 0.1609  # $ per kWh
GAS_PRICE_PER_1000_FT3 = 15.23
FUEL_OIL_PRICE_PER_GALLON = 4.27
PROPANE_PRICE_PER_GALLON = 2.56
KWH_PER_USAGE_HOUR = 1.5

SOLAR_WIND_HYDRO_PER_UNIT = 0.05
GEOTHERMAL_PER_UNIT = 0.1
NUCLEAR_PER_UNIT = 0.15

# appliance draw, kWh per hour/load/day
AC_KWH_PER_HOUR = 3.5
ELECTRIC_HEATING_KWH = 2.0
ELECTRIC_WATER_HEATER_KWH = 1.5
GAS_WATER_HEATER_THERM_SHARE = 0.8
DRYER_KWH_PER_LOAD = 2.5
DISHWASHER_KWH_PER_LOAD = 1.8
FRIDGE_KWH_PER_DAY = 0.5
TV_KWH_PER_HOUR = 0.15
COMPUTER_KWH_PER_HOUR = 0.1

# ---- food (lbs CO2e per kg of food) ----------------------------------------
FOOD_FACTORS = {
    "beef": 60.0,
    "lamb": 39.2,
    "pork": 12.1,
    "chicken": 6.9,
    "turkey": 10.9,
    "fish_farmed": 13.6,
    "fish_wild": 5.4,
    "cheese": 21.2,
    "milk": 3.2,
    "yogurt": 2.2,
    "butter": 23.8,
    "tofu": 3.0,
    "beans": 2.0,
    "lentils": 1.8,
    "nuts": 2.3,
    "rice": 4.0,
    "bread": 1.3,
    "pasta": 1.1,
    "potatoes": 0.5,
    "leafy_greens": 0.4,
    "root_vegetables": 0.4,
    "tomatoes": 2.1,
    "onions": 0.5,
    "peppers": 0.7,
    "organic_vegetables": 0.3,
    "conventional_vegetables": 0.5,
    "apples": 0.6,
    "bananas": 0.9,
    "citrus": 0.4,
    "berries": 1.5,
    "fast_food": 15.0,
    "packaged_snacks": 8.0,
    "soft_drinks": 0.7,
}
AVERAGE_FRUIT = (FOOD_FACTORS["apples"] + FOOD_FACTORS["bananas"]) / 2
DEFAULT_FOOD_FACTOR = 3.0

# Rough portion sizes, applied to every food alike.
LBS_PER_SERVING = 0.25
LBS_PER_MEAL = 1.0

# ---- home ------------------------------------------------------------------
WASTE_PER_PERSON_YEAR = 822.0
WASTE_PER_BAG = 15.0
WASTE_PER_POUND = 0.5
WASTE_GENERIC = 10.0

# credits, lbs CO2e saved per person per year
RECYCLING_CREDITS = {
    "aluminum": -89.38,
    "plastic": -35.56,
    "glass": -25.39,
    "newspaper": -113.14,
    "magazines": -27.46,
    "cardboard": -50.0,
    "electronics": -100.0,
}
RECYCLING_GENERIC = -30.0
COMPOST_CREDIT = -20.0

WATER_PER_GALLON = 0.002
SHOWER_GALLONS_PER_MINUTE = 2.5
TAP_GALLONS_PER_MINUTE = 1.0
WATER_GENERIC = 0.5

MOWER_PER_HOUR = 2.5
FERTILIZER_PER_UNIT = 5.0
GARDENING_GENERIC = 0.1

HOME_DEFAULT = 2.0
