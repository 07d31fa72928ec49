"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("PROBLEMSET_DB_PATH", "problemsets.duckdb")

# Logging
LOG_DIR = Path(os.getenv("PROBLEMSET_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("PROBLEMSET_LOG_LEVEL", "INFO")
LOG_RETENTION_DAYS = int(os.getenv("PROBLEMSET_LOG_RETENTION_DAYS", "7"))

# API
API_BASE_URL = os.getenv("PROBLEMSET_API_URL", "http://localhost:8080/api")
API_TIMEOUT = int(os.getenv("PROBLEMSET_API_TIMEOUT", "60"))
MAX_CONCURRENT = int(os.getenv("PROBLEMSET_MAX_CONCURRENT", "5"))

# Cache
CACHE_TTL_DAYS = int(os.getenv("PROBLEMSET_CACHE_TTL_DAYS", "30"))
MIN_PROBLEM_SET_SIZE = int(os.getenv("PROBLEMSET_MIN_SIZE", "30"))
MAX_PROBLEM_SET_SIZE = int(os.getenv("PROBLEMSET_MAX_SIZE", "50"))

# Upstream fetch deadline in seconds, applied on top of the client's own retries
FETCH_TIMEOUT = float(os.getenv("PROBLEMSET_FETCH_TIMEOUT", "30"))
