"""Configuration from environment."""
import os

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8080"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# When false, the app starts with an empty store instead of the sample locations.
SEED_ON_STARTUP = os.environ.get("SEED_ON_STARTUP", "true").lower() == "true"
