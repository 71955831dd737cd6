"""
Public pages, projects API, health check and app wiring.
"""

from folio import Folio

from conftest import make_project


def test_extension_registered(app):
    ext = app.extensions["folio"]
    assert isinstance(ext, Folio)
    assert set(ext.get_registered_modules()) == {
        "auth", "projects", "skills", "experiences", "personal_info", "public", "health",
    }


def test_disabled_module_not_registered(tmp_db_dir):
    from flask import Flask

    app = Flask(__name__)
    app.config["DB_DIR"] = tmp_db_dir
    ext = Folio(app, {"features": {"health": False}})
    assert "health" not in ext.get_registered_modules()
    assert app.config["PORTFOLIO_DB"].endswith("portfolio.db")


def test_index_renders_portfolio(client, store):
    store.upsert_personal_info({"name": "Kim Dev", "title": "Backend Engineer"})
    make_project(store, title="Featured One", featured=True)
    make_project(store, title="Hidden One", featured=False)
    store.insert("skills", {"name": "Flask", "category": "backend", "proficiency": 3})
    store.insert("experiences", {"company_name": "Acme", "position": "Dev",
                                 "start_date": "2022-01", "is_current": True})

    response = client.get("/")
    assert response.status_code == 200
    body = response.data.decode()
    assert "Kim Dev" in body
    assert "Featured One" in body
    assert "Hidden One" not in body
    assert "Flask" in body
    assert "2022.01 - Present" in body


def test_project_detail(client, store):
    project_id = make_project(store, title="Detail Page", tech_stack='["Go"]')
    response = client.get(f"/projects/{project_id}")
    assert response.status_code == 200
    assert b"Detail Page" in response.data


def test_project_detail_missing_is_404(client):
    response = client.get("/projects/999")
    assert response.status_code == 404
    assert b"Project not found." in response.data


def test_projects_api(client, store):
    make_project(store, title="A", featured=True, image_url="https://a.png\nhttps://b.png")
    make_project(store, title="B", featured=False)

    response = client.get("/api/projects")
    assert response.status_code == 200
    projects = response.get_json()
    assert len(projects) == 2
    assert projects[0]["tech_stack"] == ["Flask", "SQLite"]

    featured = client.get("/api/projects?featured=1").get_json()
    assert [p["title"] for p in featured] == ["A"]
    assert featured[0]["images"] == ["https://a.png", "https://b.png"]

    assert len(client.get("/api/projects?limit=1").get_json()) == 1


def test_projects_api_allows_cross_origin(client):
    response = client.get("/api/projects", headers={"Origin": "https://example.com"})
    assert response.headers.get("Access-Control-Allow-Origin") in ("*", "https://example.com")


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "ok"
    assert data["checks"]["database"]["ok"] is True


def test_unknown_page_is_404(client):
    assert client.get("/no/such/page").status_code == 404
