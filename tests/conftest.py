"""Root conftest: shared test configuration."""

import os

# Tests never touch a real database or the real pixel endpoint
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PIXEL_BASE_URL", "https://pixels.test/t/")
os.environ.setdefault("LOG_FORMAT", "text")
