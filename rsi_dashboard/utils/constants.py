"""Shared constants and defaults for the dashboard."""

DEFAULT_SYMBOL = "BTCUSDT"

SIGNALS = ("BUY", "SELL")

# Synthetic RSI bands: [low, high)
OVERSOLD_BAND: tuple[float, float] = (25.0, 35.0)
OVERBOUGHT_BAND: tuple[float, float] = (70.0, 80.0)
BUY_RSI_THRESHOLD = 35.0

# Synthetic prices
ENTRY_PRICE_MIN = 45000.0
ENTRY_PRICE_SPAN = 10000.0
PRICE_CHANGE_BIAS = 0.4
PRICE_CHANGE_SCALE = 0.06

# Monitor defaults when no trade exists yet
DEFAULT_RSI = 50.0
DEFAULT_PRICE = 50000.0

# Window sizes used by the HTTP layer
RECENT_TRADES_LIMIT = 10
SPARKLINE_POINTS = 20
TREND_WINDOW = 5

# Unitless display scaling, kept as-is for dashboard compatibility
TREND_CHANGE_SCALE = 5
PNL_CHANGE_DIVISOR = 100
