"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Simulation
DEFAULT_TRIAL_COUNT = int(os.getenv("POKER_EQUITY_TRIALS", "10000"))
DEFAULT_WORKERS = int(os.getenv("POKER_EQUITY_WORKERS", "1"))

_seed = os.getenv("POKER_EQUITY_SEED", "")
DEFAULT_SEED = int(_seed) if _seed else None

# Logging
LOG_LEVEL = os.getenv("POKER_EQUITY_LOG_LEVEL", "WARNING").upper()
