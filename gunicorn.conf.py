"""Gunicorn config for the Ops Dashboard API."""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers — each holds its own snapshot and fetches at startup.
# Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Startup fetches six sheets; allow for slow sources
timeout = 120

graceful_timeout = 30

# Keep-alive — must exceed proxy keep-alive (default 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
