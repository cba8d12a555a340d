import glob
import logging
import os
import re
from logging.config import fileConfig

from flask import current_app, has_app_context
from sqlalchemy import create_engine, pool, text

from alembic import context

config = context.config

# ロギング設定
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
logger = logging.getLogger("alembic.env")


def _resolve_app():
    """Flask app providing metadata and DB URL.

    Under `flask db ...` Flask-Migrate already pushed an app context; when run
    as plain `alembic -c alembic/alembic.ini ...` build one from FLASK_ENV.
    """
    if has_app_context():
        return current_app._get_current_object()
    # migrations own the schema here; skip start-up create_all and seeding
    os.environ["CREATE_TABLES_ON_STARTUP"] = "0"
    os.environ["SEED_ON_STARTUP"] = "0"
    from prompt_catalog import create_app

    return create_app(os.environ.get("FLASK_ENV", "development"))


app = _resolve_app()

from prompt_catalog import models  # noqa: E402,F401  register tables
from prompt_catalog.extensions import db  # noqa: E402

target_metadata = db.metadata

# 環境変数優先で DB URL を決定（DATABASE_URL、なければアプリ設定）
db_url = os.environ.get("DATABASE_URL") or app.config.get("SQLALCHEMY_DATABASE_URI")
if not db_url:
    raise RuntimeError(
        "DATABASE_URL is not set and the app config has no SQLALCHEMY_DATABASE_URI. "
        "Set DATABASE_URL for alembic to run migrations."
    )


# DB にあるがローカルに存在しないリビジョンを早期に検出する
def _local_revisions(versions_dir=None):
    if versions_dir is None:
        versions_dir = os.path.join(os.path.dirname(__file__), "versions")
    revs = set()
    for path in glob.glob(os.path.join(versions_dir, "*.py")):
        with open(path, "r", encoding="utf-8") as fh:
            m = re.search(r"revision\s*=\s*['\"]([^'\"]+)['\"]", fh.read())
        if m:
            revs.add(m.group(1))
    return revs


def _db_revisions(url):
    eng = create_engine(url, poolclass=pool.NullPool)
    with eng.connect() as conn:
        # alembic_version テーブルが存在しない場合は空セットを返す
        try:
            rows = conn.execute(text("SELECT version_num FROM alembic_version")).fetchall()
        except Exception:
            return set()
        return set(r[0] for r in rows if r and r[0])


def _check_revisions(url):
    missing = sorted(r for r in _db_revisions(url) if r not in _local_revisions())
    if missing:
        raise RuntimeError(
            "The database's alembic_version contains revision(s) that are not present "
            f"in this repository: {missing}. Restore the missing files under "
            "alembic/versions/ or stamp the database with a known revision."
        )


def run_migrations_offline():
    context.configure(url=db_url, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    _check_revisions(db_url)
    connectable = create_engine(db_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
    logger.info("migrations applied to %s", connectable.url.render_as_string(hide_password=True))


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
