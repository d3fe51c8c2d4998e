from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

# Tests wire in-memory repositories, never a live database
AUTO_INIT_DB = False
AUTO_SEED_DB = False

TIMEZONE = ""
LOG_LEVEL = "WARNING"
