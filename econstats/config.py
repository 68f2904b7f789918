"""Configuration management for the indicator statistics engine."""
import os
from dotenv import load_dotenv

load_dotenv()


def _parse_int(value: str, default: int) -> int:
    """Parse an integer setting, falling back to the default on garbage."""
    if not value:
        return default
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def _parse_float(value: str, default: float) -> float:
    """Parse a float setting, accepting a decimal comma ("2,5")."""
    if not value:
        return default
    try:
        return float(str(value).strip().replace(",", "."))
    except (TypeError, ValueError):
        return default


def _parse_port(value: str, default: int) -> int:
    """Parse port value that might be provided as 'host:port' or just 'port'."""
    if not value:
        return default
    # "0.0.0.0:8000" style values carry the port last
    return _parse_int(str(value).split(":")[-1], default)


# Statistics Configuration
ROUND_DIGITS = 6  # results are rounded when computed, not when displayed
ENTROPY_BINS = _parse_int(os.getenv("ENTROPY_BINS", "10"), 10)
OUTLIER_THRESHOLD = _parse_float(os.getenv("OUTLIER_THRESHOLD", "2.5"), 2.5)
AUTOCORRELATION_LAG = _parse_int(os.getenv("AUTOCORRELATION_LAG", "1"), 1)

# Display Configuration
DISPLAY_LOCALE = os.getenv("DISPLAY_LOCALE", "en-US")
NOT_AVAILABLE = os.getenv("NOT_AVAILABLE", "N/A")

# Selection limits
MAX_ENTITIES = _parse_int(os.getenv("MAX_ENTITIES", "10"), 10)
MAX_PERIODS = _parse_int(os.getenv("MAX_PERIODS", "50"), 50)
MIN_YEAR = 1980

# API Configuration
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = _parse_port(os.getenv("API_PORT", "8000"), 8000)
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

# Data Configuration
DATA_PATH = os.getenv("DATA_PATH", "./data")
