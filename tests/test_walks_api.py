"""
Walk API tests - CRUD, filter/sort/paging semantics and the versioned listings.
"""

import uuid

import pytest
from httpx import AsyncClient

from indiatrails.api.walk_listing import MAX_PAGE_NUMBER
from indiatrails.db.seed import EASY_ID, HARD_ID, REGIONS

HP_ID = REGIONS[0]["id"]
LD_ID = REGIONS[2]["id"]


def _walk_payload(**overrides) -> dict:
    payload = {
        "name": "Kheerganga",
        "description": "Hot springs above Parvati valley",
        "lengthInKm": 12.5,
        "walkImageUrl": "https://example.com/kheerganga.jpg",
        "regionId": str(HP_ID),
        "difficultyId": str(EASY_ID),
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/walks", "/api/v1/walks", "/api/v2/walks"])
async def test_list_walks_empty_is_404(client: AsyncClient, path):
    response = await client.get(path)
    assert response.status_code == 404
    assert response.json()["detail"] == "No walks found!"


@pytest.mark.asyncio
async def test_create_walk_nests_region_and_difficulty(client: AsyncClient):
    response = await client.post("/api/walks", json=_walk_payload())
    assert response.status_code == 201
    data = response.json()
    assert data["lengthInKm"] == 12.5
    assert data["region"]["code"] == "HP"
    assert data["difficulty"]["name"] == "Easy"
    assert response.headers["location"].endswith(f"/api/walks/{data['id']}")


@pytest.mark.asyncio
async def test_create_walk_with_unknown_region_fails(client: AsyncClient):
    response = await client.post("/api/walks", json=_walk_payload(regionId=str(uuid.uuid4())))
    assert response.status_code == 400
    assert "Region" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_walk_with_unknown_difficulty_fails(client: AsyncClient):
    response = await client.post("/api/walks", json=_walk_payload(difficultyId=str(uuid.uuid4())))
    assert response.status_code == 400
    assert "Difficulty" in response.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides,field",
    [
        ({"lengthInKm": 0}, "lengthInKm"),
        ({"lengthInKm": -3.2}, "lengthInKm"),
        ({"description": ""}, "description"),
        ({"name": "x" * 101}, "name"),
        ({"regionId": "not-a-uuid"}, "regionId"),
    ],
)
async def test_create_walk_validation_is_400(client: AsyncClient, overrides, field):
    response = await client.post("/api/walks", json=_walk_payload(**overrides))
    assert response.status_code == 400
    assert field in {e["field"] for e in response.json()["errors"]}


@pytest.mark.asyncio
async def test_get_walk_by_id(client: AsyncClient, walks):
    response = await client.get(f"/api/walks/{walks[3].id}")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Markha Valley"
    assert data["region"]["name"] == "Ladakh"
    assert data["difficulty"]["name"] == "Hard"


@pytest.mark.asyncio
async def test_filter_on_name_is_case_insensitive(client: AsyncClient, walks):
    response = await client.get("/api/walks", params={"filterOn": "name", "filterQuery": "VALLEY"})
    assert response.status_code == 200
    names = {w["name"] for w in response.json()}
    assert names == {"Valley of Flowers", "Markha Valley"}


@pytest.mark.asyncio
async def test_filter_on_description(client: AsyncClient, walks):
    response = await client.get("/api/walks", params={"filterOn": "Description", "filterQuery": "trek"})
    names = {w["name"] for w in response.json()}
    assert names == {"Valley of Flowers", "Markha Valley"}


@pytest.mark.asyncio
async def test_unknown_filter_on_returns_everything(client: AsyncClient, walks):
    response = await client.get("/api/walks", params={"filterOn": "Region", "filterQuery": "zzz"})
    assert response.status_code == 200
    assert len(response.json()) == 4


@pytest.mark.asyncio
async def test_filter_query_wildcards_are_literal(client: AsyncClient, walks):
    response = await client.get("/api/walks", params={"filterOn": "Name", "filterQuery": "%"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_page_past_the_end_is_404(client: AsyncClient, walks):
    response = await client.get("/api/walks", params={"pageNumber": 3, "pageSize": 2})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_sort_by_length_descending_is_reverse_of_ascending(client: AsyncClient, walks):
    asc = await client.get("/api/walks", params={"sortBy": "Length", "isAscending": "true"})
    desc = await client.get("/api/walks", params={"sortBy": "Length", "isAscending": "false"})
    asc_ids = [w["id"] for w in asc.json()]
    desc_ids = [w["id"] for w in desc.json()]
    assert [w["lengthInKm"] for w in asc.json()] == [9.0, 17.0, 26.0, 65.0]
    assert desc_ids == list(reversed(asc_ids))


@pytest.mark.asyncio
async def test_sort_by_name(client: AsyncClient, walks):
    response = await client.get("/api/walks", params={"sortBy": "name"})
    assert [w["name"] for w in response.json()] == [
        "Hampta Pass",
        "Markha Valley",
        "Triund Trek",
        "Valley of Flowers",
    ]


@pytest.mark.asyncio
async def test_pagination_is_applied(client: AsyncClient, walks):
    response = await client.get(
        "/api/walks", params={"sortBy": "Length", "pageNumber": 2, "pageSize": 2}
    )
    assert [w["name"] for w in response.json()] == ["Hampta Pass", "Markha Valley"]


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"pageNumber": 0}, {"pageSize": 0}, {"pageSize": 1001}])
async def test_invalid_paging_is_400(client: AsyncClient, params):
    response = await client.get("/api/walks", params=params)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_huge_page_number_is_400_not_500(client: AsyncClient, walks):
    response = await client.get("/api/walks", params={"pageNumber": 10**19})
    assert response.status_code == 400
    assert "pageNumber" in {e["field"] for e in response.json()["errors"]}


@pytest.mark.asyncio
async def test_largest_page_number_is_accepted(client: AsyncClient, walks):
    response = await client.get(
        "/api/walks", params={"pageNumber": MAX_PAGE_NUMBER, "pageSize": 1000}
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_v1_listing_exposes_length_in_km(client: AsyncClient, walks):
    response = await client.get("/api/v1/walks", params={"sortBy": "Length", "pageSize": 1})
    assert response.status_code == 200
    assert response.json() == [
        {
            "id": str(walks[0].id),
            "name": "Triund Trek",
            "description": "Ridge walk above Dharamshala",
            "lengthInKm": 9.0,
        }
    ]


@pytest.mark.asyncio
async def test_v2_listing_exposes_length(client: AsyncClient, walks):
    response = await client.get(
        "/api/v2/walks", params={"filterOn": "Name", "filterQuery": "triund"}
    )
    assert response.status_code == 200
    [walk] = response.json()
    assert walk["length"] == 9.0
    assert "lengthInKm" not in walk


@pytest.mark.asyncio
async def test_update_walk_moves_it_to_another_region(client: AsyncClient, walks):
    response = await client.put(
        f"/api/walks/{walks[0].id}",
        json=_walk_payload(name="Triund", regionId=str(LD_ID), difficultyId=str(HARD_ID), walkImageUrl=None),
    )
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(walks[0].id)
    assert data["name"] == "Triund"
    assert data["region"]["code"] == "LD"
    assert data["difficulty"]["name"] == "Hard"
    assert data["walkImageUrl"] is None


@pytest.mark.asyncio
async def test_update_unknown_walk_is_404(client: AsyncClient):
    response = await client.put(f"/api/walks/{uuid.uuid4()}", json=_walk_payload())
    assert response.status_code == 404
    assert response.json()["detail"] == "No walk found with given id to update!"


@pytest.mark.asyncio
async def test_delete_walk(client: AsyncClient, walks):
    response = await client.delete(f"/api/walks/{walks[1].id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Valley of Flowers"
    assert (await client.get(f"/api/walks/{walks[1].id}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_unknown_walk_is_404(client: AsyncClient):
    response = await client.delete(f"/api/walks/{uuid.uuid4()}")
    assert response.status_code == 404
