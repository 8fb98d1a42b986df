import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Daily capacity band
MIN_DAILY_LAUNCHES = _constants["MIN_DAILY_LAUNCHES"]
MAX_DAILY_LAUNCHES = _constants["MAX_DAILY_LAUNCHES"]

# Merchant cool-down and durations
MERCHANT_REPEAT_DAYS = _constants["MERCHANT_REPEAT_DAYS"]
DEFAULT_DURATION_DAYS = _constants["DEFAULT_DURATION_DAYS"]
LONG_DURATION_DAYS = _constants["LONG_DURATION_DAYS"]
LONG_DURATION_CATEGORIES = _constants["LONG_DURATION_CATEGORIES"]

# Search
MAX_DATE_SEARCH_DAYS = _constants["MAX_DATE_SEARCH_DAYS"]
UTC_OFFSET_MINUTES = _constants["UTC_OFFSET_MINUTES"]

# Categories
MAX_CATEGORY_DEPTH = _constants["MAX_CATEGORY_DEPTH"]
CATEGORY_KEY_DELIMITER = _constants["CATEGORY_KEY_DELIMITER"]
CATEGORY_HIERARCHY = _constants["CATEGORY_HIERARCHY"]

# Reservation statuses that occupy the calendar
BLOCKING_STATUSES = tuple(_constants["BLOCKING_STATUSES"])
