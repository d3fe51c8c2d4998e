"""Settings shared by every environment, overridable through the environment."""
import os


def _flag(name: str, default: str) -> bool:
    return bool(int(os.getenv(name, default)))


SECRET_KEY = os.getenv("SECRET_KEY", "committee-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "committee_db"),
}

DEBUG = _flag("DEBUG", "0")

# Apply database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = _flag("AUTO_INIT_DB", "0")
# Also load database/seed.sql demo members
AUTO_SEED_DB = _flag("AUTO_SEED_DB", "0")

# Payment: meetings x rate, plus the bonus for conveners
RATE_PER_MEETING = os.getenv("RATE_PER_MEETING", "100")
CONVENER_BONUS = os.getenv("CONVENER_BONUS", "50")

MIN_CONTACT_LENGTH = int(os.getenv("MIN_CONTACT_LENGTH", "10"))

# Display rank of subcommittees in listings and reports
SUBCOMMITTEE_ORDER = tuple(
    s.strip() for s in os.getenv("SUBCOMMITTEE_ORDER", "Transport,Revenue,Travel").split(",") if s.strip()
)

# "demote": a candidate who cannot take the convener seat joins as an ordinary member
# "reject": the add is refused instead
CONVENER_CONFLICT_POLICY = os.getenv("CONVENER_CONFLICT_POLICY", "demote")

# Empty means the server's local time decides what "today" is
TIMEZONE = os.getenv("TIMEZONE", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
