"""Configuration from environment."""
import os
from typing import Optional

PORT = int(os.environ.get("PORT", "3000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# When TESTING=true, use test DB URL so tests never touch production.
if os.environ.get("TESTING") == "true":
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./labwhere.db",
    )


def database_url_for(environment: str, path: Optional[str] = None) -> str:
    """SQLite URL for an environment database file, e.g. ("test", "data") -> sqlite:///data/test.db."""
    if path:
        return f"sqlite:///{path.rstrip('/')}/{environment}.db"
    return f"sqlite:///{environment}.db"
