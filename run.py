import os

from prompt_catalog import create_app
from prompt_catalog.factory import configure_logging

config_name = os.environ.get("FLASK_ENV", "development")
configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
app = create_app(config_name)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5001)), debug=app.config.get("DEBUG", False))
