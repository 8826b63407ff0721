# Bind & workers
bind = "0.0.0.0:8000"
# Each worker process owns its own in-memory registry; keep a single worker
# so every request sees the same users.
workers = 1
# Hashing releases the GIL.
threads = 8
worker_class = "gthread"
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = "info"  # override with env LOG_LEVEL

wsgi_app = "identity_registry:create_app()"
