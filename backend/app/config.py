"""Default Flask configuration; override with GROWTH_* environment variables."""

DEFAULT_CONFIG = {
    # browser origins allowed to call /api/*
    "CORS_ORIGINS": [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    "LOG_LEVEL": "INFO",
    # keep monthlyData fields in model order
    "JSON_SORT_KEYS": False,
}

ENV_PREFIX = "GROWTH"
