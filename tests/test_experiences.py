"""
Experience handlers and admin route.
"""

from folio.modules.experiences.handlers import (
    add_experience, delete_experience, description_lines, format_period, is_year_month,
)


def _form(**overrides):
    form = {"company_name": "Acme", "position": "Backend Engineer", "start_date": "2022-03"}
    form.update(overrides)
    return form


def test_is_year_month():
    assert is_year_month("2024-01")
    assert not is_year_month("2024-13")
    assert not is_year_month("2024/01")
    assert not is_year_month("")


def test_required_fields(store):
    for missing in ("company_name", "position", "start_date"):
        assert "error" in add_experience(store, _form(**{missing: ""}))
    assert store.count("experiences") == 0


def test_is_current_forces_null_end_date(store):
    for end_date in ("2023-01", "", "not-a-date"):
        result = add_experience(store, _form(is_current="on", end_date=end_date))
        assert result["success"] is True
        assert store.get_by_id("experiences", result["id"])["end_date"] is None


def test_end_date_before_start_rejected(store):
    result = add_experience(store, _form(end_date="2021-01"))
    assert result == {"error": "End date cannot be before the start date."}


def test_finished_job_keeps_end_date(store):
    result = add_experience(store, _form(end_date="2023-06", location="Seoul"))
    experience = store.get_by_id("experiences", result["id"])
    assert experience["end_date"] == "2023-06"
    assert experience["is_current"] is False
    assert experience["location"] == "Seoul"


def test_delete_experience_idempotent(store):
    experience_id = add_experience(store, _form())["id"]
    assert delete_experience(store, experience_id)["deleted"] is True
    assert delete_experience(store, experience_id)["deleted"] is False


def test_format_period():
    assert format_period({"start_date": "2022-03", "is_current": True}) == "2022.03 - Present"
    assert format_period({"start_date": "2020-01", "end_date": "2021-12", "is_current": False}) == "2020.01 - 2021.12"


def test_description_lines():
    assert description_lines("- Built APIs\n\n• Led migrations\n") == ["Built APIs", "Led migrations"]
    assert description_lines(None) == []


def test_add_and_delete_via_route(admin_client, store):
    response = admin_client.post("/admin/experiences/", data=dict(_form(), intent="add"))
    assert response.status_code == 302
    experience = store.list("experiences")[0]

    response = admin_client.post("/admin/experiences/", data={
        "intent": "delete", "experienceId": str(experience["id"]),
    })
    assert response.status_code == 302
    assert store.count("experiences") == 0


def test_route_validation_error_renders_inline(admin_client):
    response = admin_client.post("/admin/experiences/", data=dict(_form(start_date="March"), intent="add"))
    assert response.status_code == 200
    assert b"YYYY-MM" in response.data
