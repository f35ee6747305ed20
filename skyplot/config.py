"""
SKYPLOT Configuration Module.

Centralized configuration management using environment variables.
Supports .env files for local development.

Usage:
    from skyplot.config import settings

    print(settings.price_per_square_meter)
    print(settings.no_fly_zones_path)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import logging

from dotenv import load_dotenv

# Load .env file if present
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

DEFAULT_PRICE_PER_SQUARE_METER = 0.5


def get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


@dataclass
class Settings:
    """Engine settings loaded from environment."""

    # Pricing (currency units per square meter of drawn area)
    price_per_square_meter: float = field(
        default_factory=lambda: get_float("PRICE_PER_SQUARE_METER", DEFAULT_PRICE_PER_SQUARE_METER)
    )

    # No-fly zone catalog (GeoJSON FeatureCollection); None = bundled catalog
    no_fly_zones_path: Optional[str] = field(default_factory=lambda: os.getenv("NO_FLY_ZONES_PATH"))

    # Default display name for a new polygon is "<prefix> <n>"
    polygon_name_prefix: str = field(default_factory=lambda: os.getenv("POLYGON_NAME_PREFIX", "Polygon"))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = field(
        default_factory=lambda: os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.price_per_square_meter < 0:
            logging.warning(
                f"Price per square meter {self.price_per_square_meter} is negative, "
                f"using {DEFAULT_PRICE_PER_SQUARE_METER}"
            )
            self.price_per_square_meter = DEFAULT_PRICE_PER_SQUARE_METER

    def configure_logging(self, fmt: Optional[str] = None) -> int:
        """
        Configure root logging from LOG_LEVEL and LOG_FORMAT.

        Args:
            fmt: Format string overriding LOG_FORMAT

        Returns:
            The numeric level applied to the root logger
        """
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        logging.basicConfig(level=level, format=fmt or self.log_format)
        # basicConfig is a no-op once handlers exist
        logging.getLogger().setLevel(level)
        return level


# Singleton instance
settings = Settings()
