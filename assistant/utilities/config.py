"""Configuration management for the Assistant application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()  # fall back to a .env in the working directory

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Model service (DashScope OpenAI-compatible endpoint by default)
LLM_API_KEY_ENV: Final[str] = 'QWEN_API_KEY'
LLM_BASE_URL: Final[str] = os.getenv('LLM_BASE_URL', 'https://dashscope.aliyuncs.com/compatible-mode/v1')
LLM_MODEL: Final[str] = os.getenv('LLM_MODEL', 'qwen-turbo')
LLM_TIMEOUT: Final[float] = float(os.getenv('LLM_TIMEOUT', '60'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
