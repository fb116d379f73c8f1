from fastapi.testclient import TestClient

from cinelog.core.config import settings

ITEM_BODY = {
    "id": 1399,
    "title": "Game of Thrones",
    "poster_path": "/got.jpg",
    "release_date": "2011-04-17",
    "overview": "Seven noble families fight for control of Westeros.",
    "media_type": "tv",
}


def test_watchlist_requires_authentication(client: TestClient) -> None:
    url = f"{settings.API_V1_STR}/watchlist/"

    assert client.get(url).status_code == 401
    assert client.post(url, json=ITEM_BODY).status_code == 401
    assert client.delete(url, params={"movie_id": 1399}).status_code == 401


def test_add_check_remove(
    client: TestClient, normal_user_token_headers: dict[str, str]
) -> None:
    url = f"{settings.API_V1_STR}/watchlist/"
    check_url = f"{settings.API_V1_STR}/watchlist/check"

    added = client.post(url, headers=normal_user_token_headers, json=ITEM_BODY)
    assert added.status_code == 200
    assert added.json()["id"] == 1399
    assert added.json()["media_type"] == "tv"

    check = client.get(
        check_url, headers=normal_user_token_headers, params={"movie_id": 1399}
    )
    assert check.json() == {"is_in_watchlist": True}

    listed = client.get(url, headers=normal_user_token_headers).json()
    assert [item["title"] for item in listed] == ["Game of Thrones"]

    removed = client.delete(
        url, headers=normal_user_token_headers, params={"movie_id": 1399}
    )
    assert removed.json() == {"success": True}
    removed_again = client.delete(
        url, headers=normal_user_token_headers, params={"movie_id": 1399}
    )
    assert removed_again.json() == {"success": False}


def test_add_twice_keeps_one_item(
    client: TestClient, normal_user_token_headers: dict[str, str]
) -> None:
    url = f"{settings.API_V1_STR}/watchlist/"

    client.post(url, headers=normal_user_token_headers, json=ITEM_BODY)
    client.post(
        url,
        headers=normal_user_token_headers,
        json={**ITEM_BODY, "title": "Game of Thrones (2011)"},
    )

    listed = client.get(url, headers=normal_user_token_headers).json()
    assert [item["title"] for item in listed] == ["Game of Thrones (2011)"]


def test_watchlists_are_per_account(
    client: TestClient,
    normal_user_token_headers: dict[str, str],
    other_user_token_headers: dict[str, str],
) -> None:
    url = f"{settings.API_V1_STR}/watchlist/"
    client.post(url, headers=normal_user_token_headers, json=ITEM_BODY)

    check = client.get(
        f"{settings.API_V1_STR}/watchlist/check",
        headers=other_user_token_headers,
        params={"movie_id": 1399},
    )
    removed = client.delete(
        url, headers=other_user_token_headers, params={"movie_id": 1399}
    )

    assert check.json() == {"is_in_watchlist": False}
    assert removed.json() == {"success": False}
    assert len(client.get(url, headers=normal_user_token_headers).json()) == 1


def test_missing_movie_id_is_client_error(
    client: TestClient, normal_user_token_headers: dict[str, str]
) -> None:
    r = client.delete(
        f"{settings.API_V1_STR}/watchlist/", headers=normal_user_token_headers
    )
    check = client.get(f"{settings.API_V1_STR}/watchlist/check")

    assert r.status_code == 400
    assert check.status_code == 400


def test_check_without_account_uses_anonymous_storage(
    client: TestClient, anonymous_headers: dict[str, str]
) -> None:
    client.post(
        f"{settings.API_V1_STR}/local/watchlist",
        headers=anonymous_headers,
        json=ITEM_BODY,
    )
    check_url = f"{settings.API_V1_STR}/watchlist/check"

    anonymous = client.get(
        check_url, headers=anonymous_headers, params={"movie_id": 1399}
    )
    nobody = client.get(check_url, params={"movie_id": 1399})

    assert anonymous.status_code == 200
    assert anonymous.json() == {"is_in_watchlist": True}
    assert nobody.json() == {"is_in_watchlist": False}


def test_check_with_unknown_session_token_falls_back(client: TestClient) -> None:
    r = client.get(
        f"{settings.API_V1_STR}/watchlist/check",
        headers={"Authorization": "Bearer not-a-session"},
        params={"movie_id": 1399},
    )

    assert r.status_code == 200
    assert r.json() == {"is_in_watchlist": False}


def test_check_signed_in_ignores_anonymous_id_header(
    client: TestClient, normal_user_token_headers: dict[str, str]
) -> None:
    client.post(
        f"{settings.API_V1_STR}/watchlist/",
        headers=normal_user_token_headers,
        json=ITEM_BODY,
    )

    r = client.get(
        f"{settings.API_V1_STR}/watchlist/check",
        headers={**normal_user_token_headers, "X-Anonymous-Id": "legacy-id"},
        params={"movie_id": 1399},
    )

    assert r.status_code == 200
    assert r.json() == {"is_in_watchlist": True}


def test_check_signed_out_rejects_malformed_anonymous_id(client: TestClient) -> None:
    r = client.get(
        f"{settings.API_V1_STR}/watchlist/check",
        headers={"X-Anonymous-Id": "legacy-id"},
        params={"movie_id": 1399},
    )

    assert r.status_code == 400


def test_add_rejects_overlong_display_fields(
    client: TestClient, normal_user_token_headers: dict[str, str]
) -> None:
    url = f"{settings.API_V1_STR}/watchlist/"

    long_poster = client.post(
        url,
        headers=normal_user_token_headers,
        json={**ITEM_BODY, "poster_path": "/" + "p" * 500},
    )
    long_date = client.post(
        url,
        headers=normal_user_token_headers,
        json={**ITEM_BODY, "release_date": "2011-04-17" * 4},
    )

    assert long_poster.status_code == 422
    assert long_date.status_code == 422
    assert client.get(url, headers=normal_user_token_headers).json() == []
