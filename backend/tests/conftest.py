"""Root conftest: shared test configuration."""

import os

# Importing examguide.main builds the app, which needs a DATABASE_URL.
# The lifespan never runs under ASGITransport, so nothing connects to it.
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
