APP_NAME = "Expense Tracker"
APP_WIDTH = 1000
APP_HEIGHT = 760

DEFAULT_API_URL = "http://127.0.0.1:8000/api/expenses/"
DEFAULT_REQUEST_TIMEOUT = 10  # seconds
DEFAULT_APPEARANCE_MODE = "system"
DEFAULT_CURRENCY_SYMBOL = "₹"
DEFAULT_LOG_LEVEL = "INFO"

FILTER_ALL = "All"

TOAST_DURATION_MS = 2000
TOAST_KINDS = ("success", "info", "error")

TOAST_COLORS = {
    "success": "#4CAF50",
    "info":    "#2196F3",
    "error":   "#F44336",
}

TOAST_ICONS = {
    "success": "✔",
    "info":    "ℹ",
    "error":   "❗",
}

CHART_PALETTE = "Set3"
CHART_SIZE_IN = 3.75
CHART_DPI = 80
