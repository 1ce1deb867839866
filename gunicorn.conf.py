# Serve with: gunicorn -c gunicorn.conf.py run:app
import os

bind = f"{os.environ.get('HOST', '0.0.0.0')}:{os.environ.get('PORT', '5000')}"

# Worker Configuration
workers = 1
worker_class = 'gthread'
threads = 16
timeout = 30
keepalive = 5

# Logging
loglevel = 'info'
accesslog = '-'
errorlog = '-'
