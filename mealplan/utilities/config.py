"""Configuration management for the meal plan importer."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Import defaults for synthesized recipes
DEFAULT_CUISINE: Final[str] = os.getenv('DEFAULT_CUISINE', 'Mexican')
DEFAULT_COOK_TIME: Final[int] = int(os.getenv('DEFAULT_COOK_TIME', '30'))

# Upload limits
MAX_UPLOAD_BYTES: Final[int] = int(os.getenv('MAX_UPLOAD_BYTES', str(5 * 1024 * 1024)))
