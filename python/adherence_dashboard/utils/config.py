"""
Configuration Management for the Patient Adherence Dashboard

Settings come from environment variables (optionally seeded from a .env file
in development): toast timing, the openFDA and NewsData endpoints, the news
API key, the request timeout and the local storage file.
"""

import os
import logging
from typing import Dict, Any, Optional
from pathlib import Path

logger = logging.getLogger(__name__)

def get_app_config() -> Dict[str, Any]:
    """
    Get application settings

    Returns:
        Dictionary with the app name, environment and toast timing
    """
    return {
        'app_name': os.getenv('APP_NAME', 'Patient Adherence Dashboard'),
        'environment': os.getenv('ENVIRONMENT', 'development'),
        'toast_display_seconds': float(os.getenv('TOAST_DISPLAY_SECONDS', '3.0')),
        'toast_exit_seconds': float(os.getenv('TOAST_EXIT_SECONDS', '0.3'))
    }

def get_request_timeout() -> Optional[float]:
    """Request timeout in seconds, or None when requests may wait indefinitely"""
    raw = os.getenv('REQUEST_TIMEOUT', '').strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid REQUEST_TIMEOUT value: {raw}")
        return None

def get_api_config() -> Dict[str, Any]:
    """
    Get external API configuration settings

    Returns:
        Dictionary containing drug-label and news API configuration
    """
    config = {
        'openfda_api_url': os.getenv('OPENFDA_API_URL', 'https://api.fda.gov/drug/label.json'),
        'newsdata_api_url': os.getenv('NEWSDATA_API_URL', 'https://newsdata.io/api/1/news'),
        'newsdata_api_key': os.getenv('NEWSDATA_API_KEY', ''),
        'request_timeout': get_request_timeout()
    }

    if not config['newsdata_api_key']:
        logger.warning("NEWSDATA_API_KEY is not set; the health news feed will be rejected by the API")

    return config

def get_storage_config() -> Dict[str, Any]:
    """
    Get local storage configuration settings

    Returns:
        Dictionary containing storage file path and patient key
    """
    return {
        'storage_path': os.getenv('STORAGE_PATH', '.local_storage.json'),
        'storage_key': os.getenv('STORAGE_KEY', 'patients')
    }

def is_development() -> bool:
    """Check if running in development environment"""
    return os.getenv('ENVIRONMENT', 'development').lower() == 'development'

def get_log_level() -> str:
    """Get configured log level"""
    level = os.getenv('LOG_LEVEL', 'INFO').upper()
    return level if level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL') else 'INFO'

def setup_logging() -> None:
    """Configure root logging; outside development the log also goes to a file"""
    handlers = [logging.StreamHandler()]
    if not is_development():
        handlers.append(logging.FileHandler('adherence_dashboard.log'))

    logging.basicConfig(
        level=getattr(logging, get_log_level()),
        format=os.getenv('LOG_FORMAT', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        handlers=handlers
    )

    # Keep HTTP client chatter out of the app log
    logging.getLogger('urllib3').setLevel(logging.WARNING)

def load_environment_file(env_file: str = '.env') -> bool:
    """
    Seed os.environ from KEY=VALUE lines; variables already set win

    Args:
        env_file: Path to environment file

    Returns:
        True if the file was found and read
    """
    env_path = Path(env_file)
    if not env_path.exists():
        logger.debug(f"Environment file not found: {env_file}")
        return False

    with open(env_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#') and '=' in line:
                key, value = line.split('=', 1)
                os.environ.setdefault(key.strip(), value.strip())

    logger.info(f"Environment file loaded: {env_file}")
    return True

def load_app_config() -> Dict[str, Any]:
    """
    Prepare logging and the environment, then collect every settings group

    Returns:
        Dictionary with 'app', 'api' and 'storage' settings
    """
    setup_logging()

    if is_development():
        load_environment_file()

    return {
        'app': get_app_config(),
        'api': get_api_config(),
        'storage': get_storage_config()
    }
