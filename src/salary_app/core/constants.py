"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MONEY_PLACES = Decimal("0.01")
DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_ISOLATION_LEVEL = "REPEATABLE READ"

# Field limits (mirrors database/schema.sql)
FIRST_NAME_MAX = 50
MIDDLE_NAME_MAX = 50
LAST_NAME_MAX = 50
STREET_NAME_MAX = 100
STREET_NUMBER_MAX = 15
NEIGHBORHOOD_MAX = 30
POSTAL_CODE_MAX = 20
