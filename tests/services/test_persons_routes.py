"""Person routes — listing with search/sort, CRUD status codes and error envelopes."""

from uuid import uuid4

import pytest


def _payload(**overrides) -> dict:
    payload = {
        "person_name": "Mary",
        "email": "mary@example.com",
        "date_of_birth": "1993-01-02",
        "gender": "Female",
        "address": "56 Sundown Point",
        "receive_news_letters": False,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def seeded_people(client):
    people = []
    for name in ("Smith", "Mary", "Rahman", "Scott"):
        res = await client.post("/api/v1/persons", json=_payload(
            person_name=name, email=f"{name.lower()}@example.com",
        ))
        people.append(res.json())
    return people


async def test_create_person_returns_201(client):
    res = await client.post("/api/v1/persons", json=_payload())
    assert res.status_code == 201
    body = res.json()
    assert body["person_id"]
    assert body["gender"] == "Female"
    assert body["age"] is not None


async def test_create_person_with_country(client):
    country = (await client.post(
        "/api/v1/countries", json={"country_name": "Canada"},
    )).json()
    res = await client.post(
        "/api/v1/persons", json=_payload(country_id=country["country_id"]),
    )
    assert res.json()["country"] == "Canada"


async def test_create_person_without_name_returns_400(client):
    res = await client.post("/api/v1/persons", json=_payload(person_name=None))
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "Person Name" in error["message"]


async def test_create_person_with_bad_email_returns_400(client):
    res = await client.post("/api/v1/persons", json=_payload(email="nope"))
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["field"] == "email"
    assert error["details"][0]["field"] == "email"


async def test_body_and_service_validation_errors_share_one_envelope(client):
    rejected_by_schema = await client.post(
        "/api/v1/persons", json=_payload(email="nope"),
    )
    rejected_by_service = await client.post(
        "/api/v1/persons", json=_payload(person_name=None),
    )

    schema_error = rejected_by_schema.json()["error"]
    service_error = rejected_by_service.json()["error"]
    assert rejected_by_schema.status_code == rejected_by_service.status_code == 400
    assert set(schema_error) == set(service_error)
    assert schema_error["code"] == service_error["code"] == "VALIDATION_ERROR"
    assert service_error["field"] == "person_name"


async def test_list_defaults_to_name_ascending(client, seeded_people):
    res = await client.get("/api/v1/persons")
    assert res.status_code == 200
    assert [p["person_name"] for p in res.json()] == [
        "Mary", "Rahman", "Scott", "Smith",
    ]


async def test_list_search_and_sort_descending(client, seeded_people):
    res = await client.get("/api/v1/persons", params={
        "search_by": "PersonName", "search_string": "ma",
        "sort_by": "PersonName", "sort_order": "DESC",
    })
    assert [p["person_name"] for p in res.json()] == ["Rahman", "Mary"]


async def test_list_unknown_search_field_returns_all(client, seeded_people):
    res = await client.get("/api/v1/persons", params={
        "search_by": "Shoe", "search_string": "x",
    })
    assert len(res.json()) == 4


async def test_list_rejects_unknown_sort_order(client):
    res = await client.get("/api/v1/persons", params={"sort_order": "SIDEWAYS"})
    assert res.status_code == 400
    assert res.json()["error"]["field"] == "sort_order"


async def test_get_person(client, seeded_people):
    person = seeded_people[0]
    res = await client.get(f"/api/v1/persons/{person['person_id']}")
    assert res.status_code == 200
    assert res.json() == person


async def test_get_unknown_person_returns_404(client):
    res = await client.get(f"/api/v1/persons/{uuid4()}")
    assert res.status_code == 404


async def test_edit_form_prefills_update_request(client, seeded_people):
    person = seeded_people[1]
    res = await client.get(f"/api/v1/persons/{person['person_id']}/edit")
    assert res.status_code == 200
    form = res.json()
    assert form["person_id"] == person["person_id"]
    assert form["person_name"] == "Mary"
    assert form["gender"] == "Female"
    assert "age" not in form


async def test_update_person(client, seeded_people):
    person = seeded_people[0]
    res = await client.put(
        f"/api/v1/persons/{person['person_id']}",
        json=_payload(person_name="Smythe", email="smythe@example.com", gender="Other"),
    )
    assert res.status_code == 200
    body = res.json()
    assert body["person_id"] == person["person_id"]
    assert body["person_name"] == "Smythe"
    assert body["gender"] == "Other"

    fetched = await client.get(f"/api/v1/persons/{person['person_id']}")
    assert fetched.json() == body


async def test_update_path_id_overrides_body_id(client, seeded_people):
    person = seeded_people[0]
    res = await client.put(
        f"/api/v1/persons/{person['person_id']}",
        json=_payload(person_id=str(uuid4())),
    )
    assert res.status_code == 200
    assert res.json()["person_id"] == person["person_id"]


async def test_update_unknown_person_returns_404(client):
    res = await client.put(f"/api/v1/persons/{uuid4()}", json=_payload())
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "PERSON_NOT_FOUND"


async def test_delete_person_returns_204(client, seeded_people):
    person = seeded_people[0]
    res = await client.delete(f"/api/v1/persons/{person['person_id']}")
    assert res.status_code == 204

    remaining = (await client.get("/api/v1/persons")).json()
    assert person["person_id"] not in {p["person_id"] for p in remaining}


async def test_delete_unknown_person_returns_404(client):
    res = await client.delete(f"/api/v1/persons/{uuid4()}")
    assert res.status_code == 404
