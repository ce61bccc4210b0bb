import logging
import os

from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)

# Load environment variables based on ENV setting
env = os.getenv("ENV", "development")
env_file = (
    ".env.production"
    if env == "production"
    else (
        ".env.staging" if env == "staging" else ".env.local"
    )  # Default to local development
)

logger.info(f"Environment: {env}")

if os.path.exists(env_file):
    logger.info(f"Loading environment from {env_file}")
    load_dotenv(dotenv_path=env_file)
else:
    logger.info(f"Environment file {env_file} not found")
    # Fallback to .env if specific file doesn't exist
    if os.path.exists(".env"):
        logger.info("Falling back to .env")
        load_dotenv(dotenv_path=".env")
    else:
        logger.warning("No environment file found!")


def get_bool(name: str, default: bool = False) -> bool:
    """Read a boolean flag such as SHARE=true from the environment."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_port(name: str = "PORT", default: int = 7860) -> int:
    """Read the server port from the environment."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        port = int(value)
    except ValueError:
        raise EnvironmentError(f"Invalid {name}: {value!r} is not an integer")
    if not 0 < port < 65536:
        raise EnvironmentError(f"Invalid {name}: {port} is out of range")
    return port


# Server Configuration
PORT = get_port()
SERVER_NAME = os.getenv("SERVER_NAME", "0.0.0.0")
SHARE = get_bool("SHARE")
DEBUG = get_bool("DEBUG")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "app.log")

logger.info("Environment variables loaded:")
logger.info(f"ENV: {os.getenv('ENV')}")
logger.info(f"SERVER_NAME: {SERVER_NAME}")
logger.info(f"PORT: {PORT}")
logger.info(f"SHARE: {SHARE}")
logger.info(f"LOG_LEVEL: {LOG_LEVEL}")
