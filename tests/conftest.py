"""Root conftest: shared test configuration."""

import os

# Keep the module-level app off the filesystem and away from any DEP server
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.pop("DEP_SERVER_URL", None)
