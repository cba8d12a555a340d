"""
Add a component (e.g. "Email", "Document") to the catalog.

Usage:
    python scripts/create_component.py [NAME]

Uses FLASK_ENV (default: development) to pick the database.
"""
import os
import sys

from prompt_catalog import create_app
from prompt_catalog.storage import DuplicateRecordError, get_storage


def main(argv):
    app = create_app(os.environ.get("FLASK_ENV", "development"))
    with app.app_context():
        name = (argv[1] if len(argv) > 1 else input("component name: ")).strip()
        if not name:
            print("component name is required")
            return 1
        storage = get_storage()
        if any(c.name == name for c in storage.list_components()):
            print("component already exists:", name)
            return 1
        try:
            component = storage.create_component(name)
        except DuplicateRecordError:
            print("component already exists:", name)
            return 1
        print(f"created component id={component.id} name={component.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
