import logging


def main():
    from prompt_catalog import create_app
    from prompt_catalog.extensions import db
    from prompt_catalog.factory import configure_logging
    from prompt_catalog.seed import seed_database
    from prompt_catalog.storage import get_storage

    configure_logging(logging.INFO)
    app = create_app({"CREATE_TABLES_ON_STARTUP": False, "SEED_ON_STARTUP": False})
    with app.app_context():
        # テーブルがなければ作る（既にあれば何もしない）
        db.create_all()
        seeded = seed_database(get_storage())
    print("create_all complete" + (" (seeded)" if seeded else ""))


if __name__ == "__main__":
    main()
