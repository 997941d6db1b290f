"""HTTP surface for /events."""

import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select

from app.models.event import Event


def _instant(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture
async def catalogue(client):
    music = (await client.post("/categories", json={"name": "Music"})).json()
    sports = (await client.post("/categories", json={"name": "Sports"})).json()
    jazz = (await client.post("/subcategories", json={"name": "Jazz", "categoryId": music["id"]})).json()
    rugby = (await client.post("/subcategories", json={"name": "Rugby", "categoryId": sports["id"]})).json()
    return {"music": music, "sports": sports, "jazz": jazz, "rugby": rugby}


async def _create_event(client, payload):
    res = await client.post("/events", json=payload)
    assert res.status_code == 200, res.text
    return res.json()


async def test_create_event_returns_camel_case_with_relations(client, catalogue, event_payload):
    body = await _create_event(client, event_payload(catalogue["music"]["id"], catalogue["jazz"]["id"]))

    assert body["name"] == "Harbour Jazz Night"
    assert body["venue"] == "Harbour Hall"
    assert body["imageUrl"] == "https://cdn.harbourhall.com/posters/jazz.png"
    assert body["contactEmail"] == "bookings@harbourhall.com"
    assert body["contactPhone"] == "+6421555123"
    assert body["categoryId"] == catalogue["music"]["id"]
    assert body["category"] == {"id": catalogue["music"]["id"], "name": "Music"}
    assert body["subcategory"]["name"] == "Jazz"
    assert "createdAt" in body


async def test_epoch_date_round_trips(client, catalogue, event_payload):
    created = await _create_event(
        client, event_payload(catalogue["music"]["id"], catalogue["jazz"]["id"], date=1732000000000)
    )

    fetched = (await client.get(f"/events/{created['id']}")).json()

    assert _instant(fetched["date"]) == datetime.fromtimestamp(1732000000, tz=timezone.utc)


async def test_calendar_date_round_trips(client, catalogue, event_payload):
    created = await _create_event(
        client, event_payload(catalogue["music"]["id"], catalogue["jazz"]["id"], date="2024-12-01")
    )

    fetched = (await client.get(f"/events/{created['id']}")).json()

    assert _instant(fetched["date"]) == datetime(2024, 12, 1, tzinfo=timezone.utc)


async def test_unknown_category_returns_404_and_persists_nothing(client, catalogue, event_payload, test_db):
    missing = str(uuid.uuid4())

    res = await client.post("/events", json=event_payload(missing, catalogue["jazz"]["id"]))

    assert res.status_code == 404
    assert res.json() == {"message": f"Category with ID {missing} does not exist"}
    count = (await test_db.execute(select(func.count(Event.id)))).scalar_one()
    assert count == 0


async def test_invalid_event_returns_every_field_error(client, catalogue, event_payload):
    payload = event_payload(
        catalogue["music"]["id"],
        "not-a-uuid",
        date="someday",
        contactEmail="not-an-email",
        contactPhone="123",
    )

    res = await client.post("/events", json=payload)

    assert res.status_code == 400
    fields = {e["field"] for e in res.json()["errors"]}
    assert fields == {"subcategoryId", "date", "contactEmail", "contactPhone"}


async def test_list_and_filter_newest_first(client, catalogue, event_payload):
    music, sports = catalogue["music"]["id"], catalogue["sports"]["id"]
    await _create_event(client, event_payload(music, catalogue["jazz"]["id"], name="Jazz Brunch"))
    await _create_event(client, event_payload(sports, catalogue["rugby"]["id"], name="Cup Final"))
    await _create_event(client, event_payload(music, catalogue["jazz"]["id"], name="Late Set"))

    listed = (await client.get("/events")).json()
    unfiltered = (await client.get("/events/filter")).json()
    by_category = (await client.get("/events/filter", params={"categoryId": music})).json()
    by_subcategory = (
        await client.get("/events/filter", params={"subcategoryId": catalogue["rugby"]["id"]})
    ).json()

    assert [e["name"] for e in listed] == ["Late Set", "Cup Final", "Jazz Brunch"]
    assert unfiltered == listed
    assert [e["name"] for e in by_category] == ["Late Set", "Jazz Brunch"]
    assert [e["name"] for e in by_subcategory] == ["Cup Final"]


async def test_filter_with_malformed_id_returns_400(client):
    res = await client.get("/events/filter", params={"categoryId": "not-a-uuid"})

    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "categoryId"


async def test_get_missing_event_returns_404(client):
    res = await client.get(f"/events/{uuid.uuid4()}")

    assert res.status_code == 404
    assert res.json() == {"message": "Event not found"}


async def test_update_event(client, catalogue, event_payload):
    created = await _create_event(client, event_payload(catalogue["music"]["id"], catalogue["jazz"]["id"]))

    res = await client.put(
        f"/events/{created['id']}",
        json=event_payload(catalogue["sports"]["id"], catalogue["rugby"]["id"], name="Cup Final", venue="Eden Park"),
    )

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == created["id"]
    assert body["name"] == "Cup Final"
    assert body["venue"] == "Eden Park"
    assert body["category"]["name"] == "Sports"
    assert body["subcategory"]["name"] == "Rugby"
    assert body["createdAt"] == created["createdAt"]


async def test_update_with_malformed_id_returns_400(client, catalogue, event_payload):
    res = await client.put(
        "/events/not-a-uuid", json=event_payload(catalogue["music"]["id"], catalogue["jazz"]["id"])
    )

    assert res.status_code == 400


async def test_delete_event(client, catalogue, event_payload):
    created = await _create_event(client, event_payload(catalogue["music"]["id"], catalogue["jazz"]["id"]))

    res = await client.delete(f"/events/{created['id']}")

    assert res.status_code == 200
    assert res.json() == {"message": "Event deleted"}
    assert (await client.get(f"/events/{created['id']}")).status_code == 404


async def test_deleting_category_keeps_its_events(client, catalogue, event_payload):
    created = await _create_event(client, event_payload(catalogue["music"]["id"], catalogue["jazz"]["id"]))

    await client.delete(f"/categories/{catalogue['music']['id']}")

    fetched = (await client.get(f"/events/{created['id']}")).json()
    assert fetched["categoryId"] == catalogue["music"]["id"]
    assert fetched["category"] is None


async def test_whole_number_float_date_is_accepted(client, catalogue, event_payload):
    created = await _create_event(
        client, event_payload(catalogue["music"]["id"], catalogue["jazz"]["id"], date=1732000000000.0)
    )

    assert _instant(created["date"]) == datetime.fromtimestamp(1732000000, tz=timezone.utc)


async def test_null_contact_fields_are_rejected(client, catalogue, event_payload):
    payload = event_payload(
        catalogue["music"]["id"], catalogue["jazz"]["id"], contactPhone=None, contactEmail=None
    )

    res = await client.post("/events", json=payload)

    assert res.status_code == 400
    assert {e["field"] for e in res.json()["errors"]} == {"contactPhone", "contactEmail"}
