from uuid import uuid4

from fastapi.testclient import TestClient
from sqlmodel import Session, select

from cinelog.core.config import settings
from cinelog.models.review import Review

REVIEW_BODY = {
    "movie_id": 603,
    "movie_title": "The Matrix",
    "movie_poster_path": "/matrix.jpg",
    "movie_release_date": "1999-03-31",
    "ratings": {
        "story": 8,
        "acting": 6,
        "direction": 7,
        "cinematography": 9,
        "music": 5,
        "overall": 10,
    },
    "comment": "Still holds up.",
}


def _body(**overrides) -> dict:
    return {**REVIEW_BODY, **overrides}


def test_reviews_require_authentication(client: TestClient) -> None:
    url = f"{settings.API_V1_STR}/reviews/"

    assert client.get(url).status_code == 401
    assert client.post(url, json=REVIEW_BODY).status_code == 401
    r = client.get(f"{settings.API_V1_STR}/reviews/by-movie", params={"movie_id": 603})
    assert r.status_code == 401
    assert r.headers["www-authenticate"] == "Bearer"
    r = client.delete(f"{settings.API_V1_STR}/reviews/{uuid4()}")
    assert r.status_code == 401


def test_create_review_derives_overall(
    client: TestClient, normal_user_token_headers: dict[str, str]
) -> None:
    r = client.post(
        f"{settings.API_V1_STR}/reviews/",
        headers=normal_user_token_headers,
        json=REVIEW_BODY,
    )

    assert r.status_code == 200
    review = r.json()
    assert review["movie_id"] == 603
    assert review["ratings"]["overall"] == 7
    assert review["overall_star_rating"] == 3.5
    assert review["comment"] == "Still holds up."


def test_create_review_twice_replaces(
    client: TestClient,
    db_transaction: Session,
    normal_user_token_headers: dict[str, str],
) -> None:
    url = f"{settings.API_V1_STR}/reviews/"
    first = client.post(url, headers=normal_user_token_headers, json=REVIEW_BODY)
    perfect = {name: 10 for name in ("story", "acting", "direction", "cinematography", "music")}
    second = client.post(
        url,
        headers=normal_user_token_headers,
        json=_body(ratings=perfect, comment="Even better the second time."),
    )

    assert second.json()["id"] == first.json()["id"]
    assert second.json()["overall_star_rating"] == 5.0
    rows = db_transaction.exec(select(Review).where(Review.movie_id == 603)).all()
    assert len(rows) == 1

    listed = client.get(url, headers=normal_user_token_headers).json()
    assert [review["comment"] for review in listed] == ["Even better the second time."]


def test_create_review_rejects_out_of_range_rating(
    client: TestClient, normal_user_token_headers: dict[str, str]
) -> None:
    ratings = {**REVIEW_BODY["ratings"], "music": 11}

    r = client.post(
        f"{settings.API_V1_STR}/reviews/",
        headers=normal_user_token_headers,
        json=_body(ratings=ratings),
    )

    assert r.status_code == 422


def test_get_review_by_movie(
    client: TestClient, normal_user_token_headers: dict[str, str]
) -> None:
    url = f"{settings.API_V1_STR}/reviews/by-movie"
    client.post(
        f"{settings.API_V1_STR}/reviews/",
        headers=normal_user_token_headers,
        json=REVIEW_BODY,
    )

    found = client.get(url, headers=normal_user_token_headers, params={"movie_id": 603})
    missing = client.get(url, headers=normal_user_token_headers, params={"movie_id": 1})
    no_id = client.get(url, headers=normal_user_token_headers)

    assert found.status_code == 200
    assert found.json()["movie_title"] == "The Matrix"
    assert missing.status_code == 200
    assert missing.json() is None
    assert no_id.status_code == 400
    assert no_id.json()["detail"] == "movie_id is required."


def test_update_and_delete_review(
    client: TestClient, normal_user_token_headers: dict[str, str]
) -> None:
    created = client.post(
        f"{settings.API_V1_STR}/reviews/",
        headers=normal_user_token_headers,
        json=REVIEW_BODY,
    ).json()
    url = f"{settings.API_V1_STR}/reviews/{created['id']}"
    lowest = {name: 1 for name in ("story", "acting", "direction", "cinematography", "music")}

    updated = client.put(
        url, headers=normal_user_token_headers, json=_body(ratings=lowest)
    )
    assert updated.status_code == 200
    assert updated.json()["ratings"]["overall"] == 1
    assert updated.json()["overall_star_rating"] == 0.5
    assert updated.json()["created_at"] == created["created_at"]

    deleted = client.delete(url, headers=normal_user_token_headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True}

    again = client.delete(url, headers=normal_user_token_headers)
    assert again.status_code == 404


def test_other_user_cannot_touch_review(
    client: TestClient,
    db_transaction: Session,
    normal_user_token_headers: dict[str, str],
    other_user_token_headers: dict[str, str],
) -> None:
    created = client.post(
        f"{settings.API_V1_STR}/reviews/",
        headers=normal_user_token_headers,
        json=REVIEW_BODY,
    ).json()
    url = f"{settings.API_V1_STR}/reviews/{created['id']}"

    updated = client.put(
        url, headers=other_user_token_headers, json=_body(comment="hijacked")
    )
    deleted = client.delete(url, headers=other_user_token_headers)

    assert updated.status_code == 404
    assert deleted.status_code == 404
    assert client.get(
        f"{settings.API_V1_STR}/reviews/", headers=other_user_token_headers
    ).json() == []
    owned = client.get(
        f"{settings.API_V1_STR}/reviews/", headers=normal_user_token_headers
    ).json()
    assert [review["comment"] for review in owned] == ["Still holds up."]


def test_storage_error_is_generic_server_error(
    client: TestClient, normal_user_token_headers: dict[str, str], mocker
) -> None:
    mocker.patch(
        "cinelog.crud.review.get_reviews", side_effect=RuntimeError("connection lost")
    )

    r = client.get(f"{settings.API_V1_STR}/reviews/", headers=normal_user_token_headers)

    assert r.status_code == 500
    assert r.json() == {"detail": "An unexpected error occurred."}
