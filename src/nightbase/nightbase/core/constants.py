"""Constants and defaults.

Note: Keep store-level fallbacks here so repositories and services agree on them.
"""

DEFAULT_DAY_SWITCH_TIME = "05:00:00"
DEFAULT_TIME_ROUNDING_MINUTES = 15
DEFAULT_BUSINESS_TIMEZONE = "Asia/Tokyo"
DEFAULT_GATE_MODE = "watermark"
