"""Tests for the server-rendered pages."""

from fastapi.testclient import TestClient

from form_records.adapters.memory_record_repository import InMemoryRecordRepository
from form_records.api.app import create_app
from form_records.domain.records import Record


def test_home_page_links_to_views(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'href="/add-data"' in response.text
    assert 'href="/show-table-data"' in response.text


def test_add_data_page_renders_empty_form(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/add-data")

    assert response.status_code == 200
    assert 'action="/save-data"' in response.text
    assert 'value=""' in response.text
    assert "Data saved successfully" not in response.text


def test_add_data_page_shows_success_notice(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/add-data?success")

    assert "Data saved successfully" in response.text


def test_save_data_persists_and_redirects(
    container, record_repository: InMemoryRecordRepository
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/save-data", data={"name": "Alice Wonderland"}, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/add-data?success"
    assert record_repository.find_all() == [Record(id=1, name="Alice Wonderland")]


def test_save_data_redirect_lands_on_form(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/save-data", data={"name": "Bob"})

    assert response.status_code == 200
    assert "Data saved successfully" in response.text


def test_show_table_lists_records(
    container, seeded_repository: InMemoryRecordRepository
) -> None:
    client = TestClient(create_app(container))

    response = client.get("/show-table-data")

    assert response.status_code == 200
    assert response.text.index("John Doe") < response.text.index("Jane Smith")
    assert "No data" not in response.text


def test_show_table_escapes_names(
    container, record_repository: InMemoryRecordRepository
) -> None:
    record_repository.save(Record(id=None, name="<script>alert(1)</script>"))
    client = TestClient(create_app(container))

    response = client.get("/show-table-data")

    assert "<script>alert(1)</script>" not in response.text
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in response.text


def test_show_table_empty_state(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/show-table-data")

    assert "No data" in response.text
