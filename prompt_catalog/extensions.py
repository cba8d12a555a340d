from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_talisman import Talisman

db = SQLAlchemy()
migrate = Migrate()
talisman = Talisman()
# Do not pass app positionally; init_app will be used.
limiter = Limiter(key_func=get_remote_address)

MIGRATIONS_DIRECTORY = "alembic"


def init_extensions(app):
    """Initialize Flask extensions and attach them to app."""
    db.init_app(app)
    migrate.init_app(
        app, db, directory=app.config.get("MIGRATIONS_DIRECTORY", MIGRATIONS_DIRECTORY)
    )
    limiter.init_app(app)

    # force_https: respect app.config flag DISABLE_FORCE_HTTPS (True to disable force)
    force_https = not app.config.get("DISABLE_FORCE_HTTPS", False)
    talisman.init_app(
        app,
        content_security_policy=app.config.get("CSP", None),
        force_https=force_https,
        strict_transport_security=force_https,
        session_cookie_secure=force_https,
    )
