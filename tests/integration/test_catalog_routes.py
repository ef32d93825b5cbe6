"""Integration tests for catalog endpoints."""

import uuid

import httpx
import pytest

GUEST = {"Authorization": f"Bearer {uuid.uuid4()}"}

NEW_HOTEL = {
    "hotel_name": "Lake Side Inn",
    "stars": 3,
    "per_night_charge": 9500,
    "price_category": "Low",
    "city": "Kandy",
}

NEW_VEHICLE = {
    "vehicle_type": "Car",
    "model": "Suzuki Wagon R",
    "per_km_charge": 85,
    "vehicle_class": "Mid",
    "seating_capacity": 4,
}


@pytest.mark.asyncio
async def test_full_catalog(api_client: httpx.AsyncClient) -> None:
    response = await api_client.get("/catalog")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"hotels", "vehicles", "destinations", "vehicle_types", "vehicle_classes"}
    assert len(body["hotels"]) == 7


@pytest.mark.asyncio
async def test_hotel_filters(api_client: httpx.AsyncClient) -> None:
    response = await api_client.get("/catalog/hotels", params={"city": "kandy"})
    assert {h["hotel_name"] for h in response.json()} == {
        "Kandy Hills Guest House",
        "Temple View Hotel",
    }

    response = await api_client.get("/catalog/hotels", params={"category": "Luxury"})
    assert all(h["price_category"] == "Luxury" for h in response.json())
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_vehicle_type_filter(api_client: httpx.AsyncClient) -> None:
    response = await api_client.get("/catalog/vehicles", params={"type": "van"})

    assert {v["vehicle_type"] for v in response.json()} == {"Van"}


@pytest.mark.asyncio
async def test_offerable_vehicle_types(api_client: httpx.AsyncClient) -> None:
    response = await api_client.get("/catalog/vehicle-types", params={"guests": 12})

    assert [vt["name"] for vt in response.json()] == ["Bus"]

    response = await api_client.get("/catalog/vehicle-types")
    assert len(response.json()) == 3


@pytest.mark.asyncio
async def test_hotel_owner_can_list_hotel(api_client: httpx.AsyncClient) -> None:
    # Dev user holds every role
    response = await api_client.post("/catalog/hotels", json=NEW_HOTEL)

    assert response.status_code == 201
    assert response.json()["owner_id"] == "00000000-0000-0000-0000-000000000002"

    hotels = (await api_client.get("/catalog/hotels", params={"category": "Low"})).json()
    assert "Lake Side Inn" in [h["hotel_name"] for h in hotels]


@pytest.mark.asyncio
async def test_driver_can_list_vehicle(api_client: httpx.AsyncClient) -> None:
    response = await api_client.post("/catalog/vehicles", json=NEW_VEHICLE)

    assert response.status_code == 201
    assert response.json()["model"] == "Suzuki Wagon R"


@pytest.mark.asyncio
async def test_listing_requires_role(api_client: httpx.AsyncClient) -> None:
    assert (await api_client.post("/catalog/hotels", json=NEW_HOTEL, headers=GUEST)).status_code == 403
    assert (
        await api_client.post("/catalog/vehicles", json=NEW_VEHICLE, headers=GUEST)
    ).status_code == 403


@pytest.mark.asyncio
async def test_listing_validates_body(api_client: httpx.AsyncClient) -> None:
    response = await api_client.post("/catalog/hotels", json={**NEW_HOTEL, "stars": 7})

    assert response.status_code == 422


async def grant(api_client: httpx.AsyncClient, role: str) -> dict[str, str]:
    """Headers for a fresh user holding ``role``, granted through the admin review."""
    headers = {"Authorization": f"Bearer {uuid.uuid4()}:{role}@example.com"}
    filed = await api_client.post("/role-requests", json={"requested_role": role}, headers=headers)
    await api_client.post(f"/admin/role-requests/{filed.json()['request_id']}/approve")
    return headers


@pytest.mark.asyncio
async def test_owner_edits_own_hotel(api_client: httpx.AsyncClient) -> None:
    owner = await grant(api_client, "hotel_owner")
    hotel_id = (await api_client.post("/catalog/hotels", json=NEW_HOTEL, headers=owner)).json()[
        "hotel_id"
    ]

    response = await api_client.put(
        f"/catalog/hotels/{hotel_id}",
        json={"per_night_charge": 11000, "price_category": "Middle"},
        headers=owner,
    )

    assert response.status_code == 200
    assert response.json()["per_night_charge"] == 11000
    assert response.json()["price_category"] == "Middle"
    assert response.json()["hotel_name"] == "Lake Side Inn"

    middle = (await api_client.get("/catalog/hotels", params={"category": "Middle"})).json()
    assert hotel_id in [h["hotel_id"] for h in middle]


@pytest.mark.asyncio
async def test_other_owner_cannot_touch_listing(api_client: httpx.AsyncClient) -> None:
    owner = await grant(api_client, "hotel_owner")
    rival = await grant(api_client, "hotel_owner")
    hotel_id = (await api_client.post("/catalog/hotels", json=NEW_HOTEL, headers=owner)).json()[
        "hotel_id"
    ]

    edit = await api_client.put(f"/catalog/hotels/{hotel_id}", json={"stars": 1}, headers=rival)
    remove = await api_client.delete(f"/catalog/hotels/{hotel_id}", headers=rival)

    assert edit.status_code == 404
    assert remove.status_code == 404

    # Admin reaches every listing
    assert (await api_client.put(f"/catalog/hotels/{hotel_id}", json={"stars": 4})).json()[
        "stars"
    ] == 4


@pytest.mark.asyncio
async def test_driver_edits_and_deletes_vehicle(api_client: httpx.AsyncClient) -> None:
    driver = await grant(api_client, "driver")
    vehicle_id = (
        await api_client.post("/catalog/vehicles", json=NEW_VEHICLE, headers=driver)
    ).json()["vehicle_id"]

    edited = await api_client.put(
        f"/catalog/vehicles/{vehicle_id}", json={"per_km_charge": 95}, headers=driver
    )
    assert edited.status_code == 200
    assert edited.json()["per_km_charge"] == 95
    assert edited.json()["model"] == "Suzuki Wagon R"

    deleted = await api_client.delete(f"/catalog/vehicles/{vehicle_id}", headers=driver)
    assert deleted.status_code == 204

    vehicles = (await api_client.get("/catalog/vehicles")).json()
    assert vehicle_id not in [v["vehicle_id"] for v in vehicles]
    assert (
        await api_client.delete(f"/catalog/vehicles/{vehicle_id}", headers=driver)
    ).status_code == 404


@pytest.mark.asyncio
async def test_listing_edits_are_role_gated_and_validated(api_client: httpx.AsyncClient) -> None:
    hotels = (await api_client.get("/catalog/hotels")).json()
    hotel_id = hotels[0]["hotel_id"]

    assert (
        await api_client.put(f"/catalog/hotels/{hotel_id}", json={"stars": 4}, headers=GUEST)
    ).status_code == 403
    assert (
        await api_client.put(f"/catalog/hotels/{hotel_id}", json={"stars": 9})
    ).status_code == 422
    assert (await api_client.delete("/catalog/hotels/not-a-uuid")).status_code == 400
