"""
Project handlers and admin routes.
"""

import pytest

from folio.modules.projects.handlers import (
    SAVE_FAILED_MESSAGE, create_project, decode_tech_stack, delete_project, encode_tech_stack,
    parse_image_urls, parse_tech_stack_input, tech_stack_to_form, toggle_featured, update_project,
    validate_project_form,
)

from conftest import make_project


def _form(**overrides):
    form = {
        "title": "Folio",
        "description": "Portfolio site",
        "tech_stack": "Flask, SQLite",
        "category": "personal",
    }
    form.update(overrides)
    return form


# ---------------------------------------------------------------------------
# Tech stack codec
# ---------------------------------------------------------------------------

TECH_STACK_INPUTS = [
    ("React, TypeScript ,  Vite", ["React", "TypeScript", "Vite"]),
    (",, Go ,", ["Go"]),
    ("C\\C++, \"Quoted\" Lang", ["C\\C++", "\"Quoted\" Lang"]),
    ("스프링 부트, Django", ["스프링 부트", "Django"]),
    ("  Node.js  ", ["Node.js"]),
]


@pytest.mark.parametrize("text, expected", TECH_STACK_INPUTS)
def test_tech_stack_round_trip(text, expected):
    items = parse_tech_stack_input(text)
    assert items == expected

    stored = encode_tech_stack(items)
    assert decode_tech_stack(stored) == expected
    assert tech_stack_to_form(stored) == ", ".join(expected)
    assert parse_tech_stack_input(tech_stack_to_form(stored)) == expected


def test_tech_stack_stored_as_json_array():
    assert encode_tech_stack(["React", "TypeScript", "Vite"]) == '["React", "TypeScript", "Vite"]'


def test_tech_stack_keeps_non_ascii():
    assert encode_tech_stack(["스프링"]) == '["스프링"]'


def test_decode_tech_stack_never_raises():
    assert decode_tech_stack(None) == []
    assert decode_tech_stack("") == []
    assert decode_tech_stack("React, Vue") == []
    assert decode_tech_stack('{"a": 1}') == []


def test_parse_image_urls():
    assert parse_image_urls(None) == []
    assert parse_image_urls("https://a.png") == ["https://a.png"]
    assert parse_image_urls("https://a.png\n\n https://b.png ") == ["https://a.png", "https://b.png"]
    assert parse_image_urls('["https://a.png", "https://b.png"]') == ["https://a.png", "https://b.png"]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def test_validation_collects_every_missing_field():
    _, errors = validate_project_form({})
    assert set(errors) == {"title", "description", "tech_stack", "category"}


def test_comma_only_tech_stack_rejected(store):
    result = create_project(store, _form(tech_stack=" , , "))
    assert result["errors"]["tech_stack"] == "At least one tech stack item is required."
    assert store.count("projects") == 0


def test_defaults_for_featured_status_and_order():
    values, errors = validate_project_form(_form())
    assert errors == {}
    assert values["featured"] is False
    assert values["order_index"] == 0
    assert values["status"] == "completed"


def test_unknown_category_is_a_field_error():
    _, errors = validate_project_form(_form(category="hobby"))
    assert "category" in errors


def test_non_numeric_order_is_a_field_error():
    _, errors = validate_project_form(_form(order_index="first"))
    assert "order_index" in errors


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def test_create_project_persists_json_tech_stack(store):
    result = create_project(store, _form(featured="on"))
    assert result["success"] is True

    project = store.get_by_id("projects", result["id"])
    assert project["tech_stack"] == '["Flask", "SQLite"]'
    assert project["featured"] is True


def test_update_project_missing_id(store):
    assert update_project(store, 999, _form()) == {"not_found": True}


def test_storage_error_becomes_generic_field_error(store, monkeypatch):
    from folio.core.store import StoreError

    def boom(*args, **kwargs):
        raise StoreError("disk I/O error")

    monkeypatch.setattr(store, "insert", boom)
    result = create_project(store, _form())
    assert result == {"errors": {"title": SAVE_FAILED_MESSAGE}}


def test_toggle_featured_twice(store):
    project_id = make_project(store, featured=False)
    assert toggle_featured(store, project_id)["featured"] is True
    assert toggle_featured(store, project_id)["featured"] is False


def test_delete_missing_project_is_noop(store):
    assert delete_project(store, 999) == {"success": True, "deleted": False}


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

def test_create_redirects_to_list(admin_client, store):
    response = admin_client.post("/admin/projects/new", data=_form())
    assert response.status_code == 302
    assert response.location == "/admin/projects"
    assert store.count("projects") == 1


def test_invalid_create_rerenders_with_input(admin_client, store):
    response = admin_client.post("/admin/projects/new", data=_form(tech_stack=" , "))
    assert response.status_code == 200
    assert b"At least one tech stack item is required." in response.data
    assert b'value="Folio"' in response.data
    assert store.count("projects") == 0


def test_edit_form_prefills_tech_stack(admin_client, store):
    project_id = make_project(store, tech_stack='["React", "Vite"]')
    response = admin_client.get(f"/admin/projects/{project_id}/edit")
    assert response.status_code == 200
    assert b'value="React, Vite"' in response.data


def test_edit_missing_project_is_404(admin_client):
    response = admin_client.get("/admin/projects/999/edit")
    assert response.status_code == 404
    assert b"Project not found." in response.data
    assert admin_client.post("/admin/projects/999/edit", data=_form()).status_code == 404


def test_update_via_route(admin_client, store):
    project_id = make_project(store)
    response = admin_client.post(f"/admin/projects/{project_id}/edit",
                                 data=_form(title="Renamed", status="archived"))
    assert response.status_code == 302
    project = store.get_by_id("projects", project_id)
    assert project["title"] == "Renamed"
    assert project["status"] == "archived"


def test_list_actions(admin_client, store):
    project_id = make_project(store, featured=False)

    response = admin_client.post("/admin/projects/", data={
        "_action": "toggle-featured", "projectId": str(project_id), "currentFeatured": "false",
    })
    assert response.status_code == 302
    assert store.get_by_id("projects", project_id)["featured"] is True

    response = admin_client.post("/admin/projects/", data={"_action": "delete", "projectId": str(project_id)})
    assert response.status_code == 302
    assert store.get_by_id("projects", project_id) is None

    # Deleting again is harmless
    response = admin_client.post("/admin/projects/", data={"_action": "delete", "projectId": str(project_id)})
    assert response.status_code == 302


def test_list_renders_projects(admin_client, store):
    make_project(store, title="Visible Project")
    response = admin_client.get("/admin/projects/")
    assert response.status_code == 200
    assert b"Visible Project" in response.data
