import sys
from pathlib import Path

import pytest

# project root: 親ディレクトリ（tests/ の一つ上）
ROOT = Path(__file__).resolve().parents[1]
# 先頭に追加して、ローカルの prompt_catalog パッケージが優先されるようにする
sys.path.insert(0, str(ROOT))

from prompt_catalog import create_app  # noqa: E402
from prompt_catalog.extensions import db  # noqa: E402
from prompt_catalog.schemas import PromptCreate  # noqa: E402
from prompt_catalog.storage import InMemoryStorage, get_storage  # noqa: E402


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def memory_app():
    return create_app("testing", storage=InMemoryStorage())


@pytest.fixture
def memory_client(memory_app):
    return memory_app.test_client()


@pytest.fixture(params=["database", "memory"])
def storage(request):
    """Each storage-level test runs against both stores."""
    if request.param == "memory":
        yield InMemoryStorage()
        return
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield get_storage()
        db.session.remove()
        db.drop_all()


def populate(storage):
    """Small fixed catalog: 2 components, 2 categories, 5 prompts."""
    email = storage.create_component("Email")
    document = storage.create_component("Document")
    emails = storage.create_category(
        name="Email Management",
        slug="emails",
        description="Templates for professional communication",
        icon="Mail",
        color="bg-blue-500",
    )
    reports = storage.create_category(
        name="Report Writing",
        slug="reports",
        description="Templates for business reports and summaries",
        icon="FileText",
        color="bg-purple-500",
    )

    def add(category, title, description, content, component=None):
        return storage.create_prompt(
            PromptCreate(
                category_id=category.id,
                component_id=component.id if component else None,
                title=title,
                description=description,
                content=content,
            )
        )

    prompts = {
        "follow_up": add(
            emails,
            "Client Follow-up",
            "Follow up after meetings",
            "Write a follow-up email about [topic].",
            email,
        ),
        "newsletter": add(
            emails,
            "Newsletter Template",
            "Monthly customer newsletter",
            "Create a newsletter with 3 updates.",
        ),
        "status": add(
            reports,
            "Project Status Update",
            "Update stakeholders on progress",
            "Report current progress (%) and next steps.",
            document,
        ),
        "monthly": add(
            reports,
            "Monthly Performance Report",
            "Summarize the month",
            "Include revenue and an email-ready summary.",
        ),
        "underscore": add(
            reports,
            "Snake_case naming guide",
            "Naming conventions",
            "Explain naming for [language].",
        ),
    }
    return {
        "components": {"email": email, "document": document},
        "categories": {"emails": emails, "reports": reports},
        "prompts": prompts,
    }


@pytest.fixture
def catalog(storage):
    return populate(storage)


@pytest.fixture
def populate_catalog():
    return populate
