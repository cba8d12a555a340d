import pytest

from prompt_catalog import create_app
from prompt_catalog.storage import ComponentRecord, InMemoryStorage, get_storage


@pytest.fixture
def seeded(app, populate_catalog):
    return populate_catalog(get_storage())


@pytest.fixture
def component_client():
    """In-memory app holding components Email (1) and Document (2) and one category."""
    store = InMemoryStorage(
        [ComponentRecord(id=1, name="Email"), ComponentRecord(id=2, name="Document")]
    )
    store.create_category(
        name="Test Category",
        slug="test",
        description="For tests",
        icon="Test",
        color="bg-gray-500",
    )
    return create_app("testing", storage=store).test_client()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "healthy"}


def test_list_components(client, seeded):
    resp = client.get("/api/components")
    assert resp.status_code == 200
    assert resp.get_json() == [
        {"id": seeded["components"]["email"].id, "name": "Email"},
        {"id": seeded["components"]["document"].id, "name": "Document"},
    ]


def test_list_categories(client, seeded):
    resp = client.get("/api/categories")
    assert resp.status_code == 200
    body = resp.get_json()
    assert [c["slug"] for c in body] == ["emails", "reports"]
    assert set(body[0]) == {"id", "name", "slug", "description", "icon", "color"}


def test_get_category_includes_prompts(client, seeded):
    emails = seeded["categories"]["emails"]
    resp = client.get(f"/api/categories/{emails.id}")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["slug"] == "emails"
    assert [p["title"] for p in body["prompts"]] == [
        "Client Follow-up",
        "Newsletter Template",
    ]
    assert "category" not in body["prompts"][0]


def test_get_category_not_found(client, seeded):
    resp = client.get("/api/categories/9999")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Category not found"}


@pytest.mark.parametrize("raw", ["abc", "0", "99999999999999999999"])
def test_get_category_bad_id_is_not_found(client, seeded, raw):
    resp = client.get(f"/api/categories/{raw}")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Category not found"}


def test_get_category_by_slug(client, seeded):
    resp = client.get("/api/categories/slug/reports")
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "Report Writing"
    assert client.get("/api/categories/slug/missing").status_code == 404


def test_list_prompts_shape(client, seeded):
    resp = client.get("/api/prompts")
    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body) == 5

    follow_up = body[0]
    assert follow_up["title"] == "Client Follow-up"
    assert follow_up["category"]["slug"] == "emails"
    assert follow_up["component"] == {
        "id": seeded["components"]["email"].id,
        "name": "Email",
    }

    newsletter = body[1]
    assert newsletter["componentId"] is None
    assert "component" not in newsletter
    assert newsletter["isFavorite"] is False
    assert newsletter["metadata"] is None


def test_list_prompts_filters(client, seeded):
    reports = seeded["categories"]["reports"]

    resp = client.get("/api/prompts", query_string={"categoryId": str(reports.id)})
    assert {p["categoryId"] for p in resp.get_json()} == {reports.id}
    assert len(resp.get_json()) == 3

    resp = client.get("/api/prompts", query_string={"search": "EMAIL"})
    assert [p["title"] for p in resp.get_json()] == [
        "Client Follow-up",
        "Monthly Performance Report",
    ]

    resp = client.get(
        "/api/prompts", query_string={"search": "email", "categoryId": str(reports.id)}
    )
    assert [p["title"] for p in resp.get_json()] == ["Monthly Performance Report"]


def test_search_without_match_is_empty_list(client, seeded):
    resp = client.get("/api/prompts?search=nonexistentxyz")
    assert resp.status_code == 200
    assert resp.get_json() == []


@pytest.mark.parametrize("raw", ["abc", "0", "-2", "", "99999999999999999999"])
def test_malformed_category_id_is_ignored(client, seeded, raw):
    resp = client.get("/api/prompts", query_string={"categoryId": raw})
    assert resp.status_code == 200
    assert len(resp.get_json()) == 5


def test_get_prompt_not_found(client, seeded):
    resp = client.get("/api/prompts/9999")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Prompt not found"}


@pytest.mark.parametrize("raw", ["abc", "0", "99999999999999999999"])
def test_get_prompt_bad_id_is_not_found(client, seeded, raw):
    resp = client.get(f"/api/prompts/{raw}")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Prompt not found"}


def test_create_then_fetch_with_component(client, seeded):
    emails = seeded["categories"]["emails"]
    document = seeded["components"]["document"]
    resp = client.post(
        "/api/prompts",
        json={
            "categoryId": emails.id,
            "componentId": document.id,
            "title": "T",
            "description": "D",
            "content": "C",
        },
    )
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["id"]
    assert created["categoryId"] == emails.id
    assert created["componentId"] == document.id
    assert created["content"] == "C"
    assert "component" not in created
    assert "category" not in created

    resp = client.get(f"/api/prompts/{created['id']}")
    assert resp.status_code == 200
    fetched = resp.get_json()
    assert fetched["component"] == {"id": document.id, "name": "Document"}
    assert fetched["category"]["id"] == emails.id


def test_create_without_component(client, seeded):
    emails = seeded["categories"]["emails"]
    resp = client.post(
        "/api/prompts",
        json={
            "categoryId": emails.id,
            "title": "No Component Prompt",
            "description": "No component",
            "content": "Content without component",
            "isFavorite": True,
        },
    )
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["componentId"] is None
    assert created["isFavorite"] is True

    fetched = client.get(f"/api/prompts/{created['id']}").get_json()
    assert "component" not in fetched
    assert fetched["componentId"] is None


def test_create_rejects_non_numeric_component(client, seeded):
    resp = client.post(
        "/api/prompts",
        json={
            "categoryId": seeded["categories"]["emails"].id,
            "componentId": "not-a-number",
            "title": "Bad",
            "description": "Bad",
            "content": "Bad",
        },
    )
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["message"]
    assert body["field"] == "componentId"
    assert get_storage().count_prompts() == 5


@pytest.mark.parametrize("missing", ["title", "categoryId", "content"])
def test_create_rejects_missing_field(client, seeded, missing):
    payload = {"categoryId": 1, "title": "T", "description": "D", "content": "C"}
    del payload[missing]
    resp = client.post("/api/prompts", json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["field"] == missing
    assert get_storage().count_prompts() == 5


def test_create_rejects_non_json_body(client, seeded):
    resp = client.post("/api/prompts", data="title=T", content_type="text/plain")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Request body must be a JSON object"}


@pytest.mark.parametrize(
    "field, value",
    [("componentId", 10**20), ("categoryId", 10**20), ("categoryId", True)],
)
def test_create_rejects_out_of_range_or_boolean_id(client, seeded, field, value):
    payload = {
        "categoryId": seeded["categories"]["emails"].id,
        "title": "T",
        "description": "D",
        "content": "C",
        field: value,
    }
    resp = client.post("/api/prompts", json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["field"] == field
    assert get_storage().count_prompts() == 5


@pytest.mark.parametrize("prompt_id", ["1", "9999", "abc"])
def test_copy_always_succeeds(client, seeded, prompt_id):
    resp = client.post(f"/api/prompts/{prompt_id}/copy")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.is_json
    assert "message" in resp.get_json()


def test_wrong_method_is_json_405(client):
    resp = client.delete("/api/prompts/1")
    assert resp.status_code == 405
    assert resp.is_json


def test_store_failure_is_500(memory_app):
    def broken(*args, **kwargs):
        raise RuntimeError("store unreachable")

    store = memory_app.extensions["prompt_catalog.storage"]
    store.list_prompts = broken
    resp = memory_app.test_client().get("/api/prompts")
    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Internal server error"}


# ---- in-memory store, components with fixed ids ----
def test_component_round_trip_in_memory(component_client):
    resp = component_client.post(
        "/api/prompts",
        json={
            "categoryId": 1,
            "componentId": 2,
            "title": "Document Prompt",
            "description": "For documents",
            "content": "Write a document",
            "isFavorite": False,
        },
    )
    assert resp.status_code == 201
    prompt_id = resp.get_json()["id"]

    fetched = component_client.get(f"/api/prompts/{prompt_id}").get_json()
    assert fetched["componentId"] == 2
    assert fetched["component"] == {"id": 2, "name": "Document"}

    listed = component_client.get("/api/prompts").get_json()
    with_component = [p for p in listed if p.get("component", {}).get("name") == "Document"]
    assert [p["id"] for p in with_component] == [prompt_id]


def test_memory_client_starts_empty(memory_client):
    assert memory_client.get("/api/prompts").get_json() == []
    assert memory_client.get("/api/categories").get_json() == []
