# wsgi.py
# Import the application object expected by gunicorn (wsgi:app)
import os

from prompt_catalog import create_app
from prompt_catalog.factory import configure_logging

configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
app = create_app(os.environ.get("FLASK_ENV", "production"))
