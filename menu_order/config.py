"""Runtime configuration defaults for pricing, search and debug logging."""

from __future__ import annotations

from decimal import Decimal

TAX_RATE = Decimal("0.0825")
ORDER_NUMBER_START = 1000
CURRENCY_SYMBOL = "$"

HIGHLIGHT_OPEN = "<mark>"
HIGHLIGHT_CLOSE = "</mark>"
HIGHLIGHT_STYLE = "bold #1a1a1a on #f2c94c"

DEBUG_LOG_PATH = "/tmp/menu-order-debug.log"
DEBUG_LOG_ENV = "MENU_ORDER_DEBUG_LOG"
