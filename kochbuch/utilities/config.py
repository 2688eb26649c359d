"""Configuration management for the Kochbuch core."""
import os
from typing import Final
from pathlib import Path

# Load environment variables from .env file if it exists
try:
    from dotenv import load_dotenv
    env_path = Path(__file__).parent.parent / '.env'
    if env_path.exists():
        load_dotenv(env_path)
except ImportError:
    pass  # dotenv not installed, using defaults

# Logging
LOG_LEVEL: Final[str] = os.getenv('KOCHBUCH_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT: Final[str] = os.getenv('KOCHBUCH_LOG_FORMAT', '%(asctime)s %(levelname)s [%(name)s] %(message)s')
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Recipe form
MAX_IMAGES: Final[int] = max(1, int(os.getenv('KOCHBUCH_MAX_IMAGES', '1')))

# Shopping list export
AMOUNT_DECIMALS: Final[int] = int(os.getenv('KOCHBUCH_AMOUNT_DECIMALS', '2'))
SHOPPING_LIST_TITLE: Final[str] = os.getenv('KOCHBUCH_SHOPPING_LIST_TITLE', 'Einkaufsliste')
