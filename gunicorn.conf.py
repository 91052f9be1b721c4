# gunicorn.conf.py
import multiprocessing as mp
import os

# ASGI application
wsgi_app = "platecraft.app:app"

# Bind to address and port
bind = os.getenv("BIND", "0.0.0.0:3001")

# Worker class - using Uvicorn worker for ASGI apps
worker_class = "uvicorn.workers.UvicornWorker"

# Image generation is I/O bound; keep worker count modest
workers = int(os.getenv("WEB_CONCURRENCY", mp.cpu_count() + 1))

# Imagen calls can take well over 30s
timeout = int(os.getenv("TIMEOUT", "180"))
graceful_timeout = int(os.getenv("GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.getenv("KEEPALIVE", "5"))

# Credentials are cached per process, so each worker loads its own copy
preload_app = False

# Limit maximum requests per worker to mitigate memory leaks
max_requests = int(os.getenv("MAX_REQUESTS", "1000"))
max_requests_jitter = int(os.getenv("MAX_REQUESTS_JITTER", "100"))

# Whitelisted IPs for X-Forwarded-For header
forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")

# Logs
accesslog = "-" if os.getenv("ACCESS_LOG", "1") == "1" else None
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info")
capture_output = True
