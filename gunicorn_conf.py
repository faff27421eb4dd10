#Note: Do not touch if you don't understand anything
import multiprocessing

from idverify.config import DEFAULT_PORT, env_int, env_str, tls_files

bind = f"0.0.0.0:{env_int('PORT', DEFAULT_PORT)}"

# TLS is terminated by gunicorn; missing files abort startup
certfile, keyfile = tls_files()

# Calculate workers: 2-4 x CPU cores is common. We'll use 2 * cores + 1
cores = multiprocessing.cpu_count() or 1
workers = env_int("GUNICORN_WORKERS", 2 * cores + 1)

worker_class = env_str("GUNICORN_WORKER_CLASS", "sync")

keepalive = env_int("GUNICORN_KEEPALIVE", 5)

# Graceful timeouts
timeout = env_int("GUNICORN_TIMEOUT", 60)
graceful_timeout = env_int("GUNICORN_GRACEFUL_TIMEOUT", 30)

# Log to stdout/stderr for container visibility
accesslog = "-"
errorlog = "-"
loglevel = env_str("GUNICORN_LOGLEVEL", "info")

# Telephony bodies and query strings are tiny
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190
