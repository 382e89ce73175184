"""API tests for folder and file listings."""

from __future__ import annotations

import uuid

from httpx import AsyncClient

API = "/api/v1/media"


async def _create_folder(client: AsyncClient, headers: dict[str, str], name: str, parent: str | None = None) -> dict:
    response = await client.post(f"{API}/folders", json={"name": name, "parentFolderId": parent}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def _create_file(client: AsyncClient, headers: dict[str, str], name: str, folder: str | None = None) -> dict:
    response = await client.post(
        f"{API}/files",
        json={"name": name, "folderId": folder, "size": 10, "mimeType": "text/plain"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_and_page_files(client: AsyncClient, owner_headers: dict[str, str]):
    folder = await _create_folder(client, owner_headers, "reports")
    for i in range(1, 9):
        await _create_file(client, owner_headers, f"file_{i:02d}.txt", folder["id"])
    params = {"folder-id": folder["id"], "direction": "forward", "sort": "asc", "sort-by": "name", "limit": 3}

    first = await client.get(f"{API}/files", params=params, headers=owner_headers)
    assert first.status_code == 200
    body = first.json()
    assert [item["name"] for item in body["items"]] == ["file_01.txt", "file_02.txt", "file_03.txt"]
    assert body["hasMore"] is True
    assert body["prevCursor"]
    assert body["items"][0]["folderId"] == folder["id"]
    assert body["items"][0]["mimeType"] == "text/plain"

    second = await client.get(
        f"{API}/files", params={**params, "next-cursor": body["nextCursor"]}, headers=owner_headers
    )
    assert [item["name"] for item in second.json()["items"]] == ["file_04.txt", "file_05.txt", "file_06.txt"]


async def test_root_listing_excludes_nested_files(client: AsyncClient, owner_headers: dict[str, str]):
    folder = await _create_folder(client, owner_headers, "nested")
    await _create_file(client, owner_headers, "root.txt")
    await _create_file(client, owner_headers, "inner.txt", folder["id"])

    response = await client.get(f"{API}/files", params={"direction": "forward"}, headers=owner_headers)

    assert [item["name"] for item in response.json()["items"]] == ["root.txt"]


async def test_list_sub_folders(client: AsyncClient, owner_headers: dict[str, str]):
    parent = await _create_folder(client, owner_headers, "parent")
    for name in ("b", "a", "c"):
        await _create_folder(client, owner_headers, name, parent["id"])

    response = await client.get(
        f"{API}/folders",
        params={"parent-id": parent["id"], "direction": "forward", "sort": "desc"},
        headers=owner_headers,
    )

    assert response.status_code == 200
    assert [item["name"] for item in response.json()["items"]] == ["c", "b", "a"]


async def test_folder_content_pages_each_collection_independently(client: AsyncClient, owner_headers: dict[str, str]):
    folder = await _create_folder(client, owner_headers, "mixed")
    for i in range(3):
        await _create_file(client, owner_headers, f"f{i}.txt", folder["id"])
        await _create_folder(client, owner_headers, f"d{i}", folder["id"])

    response = await client.get(
        f"{API}/folders/{folder['id']}/content",
        params={
            "file-direction": "forward",
            "file-sort": "asc",
            "file-limit": 2,
            "folder-direction": "forward",
            "folder-sort": "desc",
            "folder-limit": 5,
        },
        headers=owner_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert [item["name"] for item in body["files"]["items"]] == ["f0.txt", "f1.txt"]
    assert body["files"]["hasMore"] is True
    assert [item["name"] for item in body["folders"]["items"]] == ["d2", "d1", "d0"]
    assert body["folders"]["hasMore"] is False


async def test_root_content(client: AsyncClient, owner_headers: dict[str, str]):
    await _create_file(client, owner_headers, "top.txt")
    await _create_folder(client, owner_headers, "top")

    response = await client.get(f"{API}/content", headers=owner_headers)

    body = response.json()
    assert [item["name"] for item in body["files"]["items"]] == ["top.txt"]
    assert [item["name"] for item in body["folders"]["items"]] == ["top"]


async def test_empty_listing_has_no_cursors(client: AsyncClient, owner_headers: dict[str, str]):
    response = await client.get(f"{API}/files", headers=owner_headers)

    assert response.json() == {"items": [], "prevCursor": "", "nextCursor": "", "hasMore": False}


async def test_invalid_cursor_is_bad_request(client: AsyncClient, owner_headers: dict[str, str]):
    response = await client.get(
        f"{API}/files",
        params={"direction": "forward", "next-cursor": "garbage!!"},
        headers=owner_headers,
    )

    assert response.status_code == 400
    assert response.json()["type"] == "invalid-cursor"


async def test_cursor_from_another_sort_key_is_bad_request(client: AsyncClient, owner_headers: dict[str, str]):
    for name in ("a.txt", "b.txt"):
        await _create_file(client, owner_headers, name)
    first = await client.get(
        f"{API}/files", params={"direction": "forward", "sort-by": "name", "limit": 1}, headers=owner_headers
    )

    response = await client.get(
        f"{API}/files",
        params={"direction": "forward", "sort-by": "updated", "next-cursor": first.json()["nextCursor"]},
        headers=owner_headers,
    )

    assert response.status_code == 400
    assert response.json()["reason"] == "sort-mismatch"


async def test_unknown_preferences_are_normalized(client: AsyncClient, owner_headers: dict[str, str]):
    await _create_file(client, owner_headers, "only.txt")

    response = await client.get(
        f"{API}/files",
        params={"direction": "sideways", "sort": "random", "sort-by": "size", "limit": -3},
        headers=owner_headers,
    )

    assert response.status_code == 200
    assert [item["name"] for item in response.json()["items"]] == ["only.txt"]


async def test_non_integer_limit_is_rejected(client: AsyncClient, owner_headers: dict[str, str]):
    response = await client.get(f"{API}/files", params={"limit": "lots"}, headers=owner_headers)

    assert response.status_code == 422


async def test_unknown_folder_is_not_found(client: AsyncClient, owner_headers: dict[str, str]):
    response = await client.get(f"{API}/files", params={"folder-id": str(uuid.uuid4())}, headers=owner_headers)

    assert response.status_code == 404
    assert response.json()["type"] == "folder-info-not-found"


async def test_other_owners_folder_is_not_found(client: AsyncClient, owner_headers: dict[str, str]):
    folder = await _create_folder(client, owner_headers, "private")
    stranger = {"X-Owner-ID": str(uuid.uuid4())}

    listing = await client.get(f"{API}/folders/{folder['id']}/content", headers=stranger)
    create = await client.post(f"{API}/files", json={"name": "x.txt", "folderId": folder["id"]}, headers=stranger)

    assert listing.status_code == 404
    assert create.status_code == 404


async def test_missing_owner_header_is_rejected(client: AsyncClient):
    response = await client.get(f"{API}/files")

    assert response.status_code == 422


async def test_path_like_names_are_rejected(client: AsyncClient, owner_headers: dict[str, str]):
    response = await client.post(f"{API}/folders", json={"name": "a/b"}, headers=owner_headers)

    assert response.status_code == 422
