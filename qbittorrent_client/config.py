import os
import dotenv


dotenv.load_dotenv()


# Defaults
DEBUG = False
VERBOSE = False
LOG_PATH = ""
LOG_LEVEL = "DEBUG" if DEBUG else "INFO"
LOG_ROTATION = "1 week"
LOG_RETENTION = "1 month"

# qBittorrent WebUI defaults
QBITTORRENT_HOST = "localhost:8080"
QBITTORRENT_USERNAME = "admin"
QBITTORRENT_PASSWORD = ""
QBITTORRENT_USER_AGENT = ""
QBITTORRENT_USE_SSL = False

# Requests permitted per window, and window length in seconds
RATE_LIMIT_COUNT = 10
RATE_LIMIT_DURATION = 10


class Config:
    DEBUG = os.getenv("DEBUG", str(DEBUG)).lower() == "true"
    VERBOSE = os.getenv("VERBOSE", str(VERBOSE)).lower() == "true"

    LOG_PATH = os.getenv("LOG_PATH", LOG_PATH)
    LOG_LEVEL = os.getenv("LOG_LEVEL", LOG_LEVEL)
    LOG_ROTATION = os.getenv("LOG_ROTATION", LOG_ROTATION)
    LOG_RETENTION = os.getenv("LOG_RETENTION", LOG_RETENTION)

    # qBittorrent Configuration
    QBITTORRENT_HOST = os.getenv("QBITTORRENT_HOST", QBITTORRENT_HOST)
    QBITTORRENT_USERNAME = os.getenv("QBITTORRENT_USERNAME", QBITTORRENT_USERNAME)
    QBITTORRENT_PASSWORD = os.getenv("QBITTORRENT_PASSWORD", QBITTORRENT_PASSWORD)
    QBITTORRENT_USER_AGENT = os.getenv("QBITTORRENT_USER_AGENT", QBITTORRENT_USER_AGENT)
    QBITTORRENT_USE_SSL = os.getenv("QBITTORRENT_USE_SSL", str(QBITTORRENT_USE_SSL)).lower() == "true"

    # Rate limiting
    RATE_LIMIT_COUNT = int(os.getenv("RATE_LIMIT_COUNT", RATE_LIMIT_COUNT))
    RATE_LIMIT_DURATION = float(os.getenv("RATE_LIMIT_DURATION", RATE_LIMIT_DURATION))
