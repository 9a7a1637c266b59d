import uuid

import pytest
from httpx import AsyncClient

from src.domain.entities import AuditAction, AuditLog, ContentStatus, News, UserRole


def news_payload(title: str = "Upstream Gas Report Released", **overrides) -> dict:
    payload = {
        "title": title,
        "content": "Full text of the article.",
        "excerpt": "Short summary",
        "category": "Press Release",
        "tags": ["gas", "reports"],
    }
    payload.update(overrides)
    return payload


async def create_news(client, headers, **kwargs) -> dict:
    response = await client.post("/api/news", json=news_payload(**kwargs), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.asyncio
async def test_create_news_derives_slug_and_stamps_author(
    client: AsyncClient, create_user, fetch_all
):
    from src.api.utils.jwt import issue_access_token

    editor = await create_user(email="editor@nuprc.gov.ng", role=UserRole.editor)
    headers = {"Authorization": f"Bearer {issue_access_token(editor)}"}

    data = await create_news(client, headers, title="  Bid Round 2025: Results!  ")

    assert data["slug"] == "bid-round-2025-results"
    assert data["title"] == "Bid Round 2025: Results!"
    assert data["authorId"] == str(editor.id)
    assert data["status"] == "draft"
    assert data["publishedAt"] is None
    assert data["views"] == 0

    entries = await fetch_all(AuditLog, AuditLog.resource == "News")
    assert len(entries) == 1
    assert entries[0].action == AuditAction.create
    assert entries[0].user_id == editor.id
    assert entries[0].resource_id == uuid.UUID(data["id"])
    assert entries[0].changes["title"] == "Bid Round 2025: Results!"
    assert entries[0].ip_address is not None


@pytest.mark.asyncio
async def test_create_published_news_stamps_published_at(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)

    data = await create_news(client, headers, status="published")

    assert data["status"] == "published"
    assert data["publishedAt"] is not None


@pytest.mark.asyncio
async def test_slug_conflict(client: AsyncClient, auth_headers, fetch_all):
    headers = await auth_headers(UserRole.editor)
    await create_news(client, headers, title="Same Title")

    response = await client.post(
        "/api/news", json=news_payload(title="Same title!"), headers=headers
    )

    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "SLUG_CONFLICT"
    assert "same-title" in data["message"]
    assert len(await fetch_all(News)) == 1


@pytest.mark.asyncio
async def test_title_without_slug_characters(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)

    response = await client.post("/api/news", json=news_payload(title="!!!"), headers=headers)

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_create_news_validation(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)

    response = await client.post(
        "/api/news", json={"title": "x" * 201, "content": "body"}, headers=headers
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"title", "excerpt", "category"} <= fields


@pytest.mark.asyncio
async def test_anonymous_list_only_shows_published(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)
    await create_news(client, headers, title="Draft Story")
    published = await create_news(client, headers, title="Live Story", status="published")

    anonymous = await client.get("/api/news", params={"status": "draft"})

    assert anonymous.status_code == 200
    data = anonymous.json()
    assert [item["id"] for item in data["data"]] == [published["id"]]
    assert data["pagination"] == {"page": 1, "limit": 10, "total": 1, "pages": 1}

    staff = await client.get("/api/news", params={"status": "draft"}, headers=headers)
    assert [item["title"] for item in staff.json()["data"]] == ["Draft Story"]


@pytest.mark.asyncio
async def test_pagination(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)
    for number in range(15):
        await create_news(client, headers, title=f"Story {number}", status="published")

    response = await client.get("/api/news", params={"page": 2, "limit": 10})

    data = response.json()
    assert len(data["data"]) == 5
    assert data["count"] == 5
    assert data["pagination"] == {"page": 2, "limit": 10, "total": 15, "pages": 2}


@pytest.mark.asyncio
async def test_filter_by_tag_and_search(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)
    await create_news(client, headers, title="Gas Flare Update", tags=["gas"], status="published")
    await create_news(client, headers, title="Oil Output Update", tags=["oil"], status="published")

    by_tag = await client.get("/api/news", params={"tag": "oil"})
    assert [item["title"] for item in by_tag.json()["data"]] == ["Oil Output Update"]

    by_search = await client.get("/api/news", params={"search": "FLARE"})
    assert [item["title"] for item in by_search.json()["data"]] == ["Gas Flare Update"]


@pytest.mark.asyncio
async def test_draft_is_hidden_from_anonymous_readers(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)
    draft = await create_news(client, headers, title="Embargoed")

    by_slug = await client.get(f"/api/news/{draft['slug']}")
    by_id = await client.get(f"/api/news/id/{draft['id']}")

    assert by_slug.status_code == 404
    assert by_slug.json()["message"] == "News article not found"
    assert by_id.status_code == 404

    staff = await client.get(f"/api/news/id/{draft['id']}", headers=headers)
    assert staff.status_code == 200


@pytest.mark.asyncio
async def test_reading_published_article_counts_a_view(
    client: AsyncClient, auth_headers, fetch_all
):
    headers = await auth_headers(UserRole.editor)
    article = await create_news(client, headers, status="published")

    first = await client.get(f"/api/news/{article['slug']}")
    await client.get(f"/api/news/{article['slug']}")

    assert first.status_code == 200
    assert first.json()["data"]["id"] == article["id"]
    [stored] = await fetch_all(News, News.id == uuid.UUID(article["id"]))
    assert stored.views == 2


@pytest.mark.asyncio
async def test_staff_reads_do_not_count_views(client: AsyncClient, auth_headers, fetch_all):
    headers = await auth_headers(UserRole.editor)
    article = await create_news(client, headers, status="published")

    first = await client.get(f"/api/news/{article['slug']}", headers=headers)
    await client.get(f"/api/news/{article['slug']}", headers=headers)

    assert first.status_code == 200
    [stored] = await fetch_all(News, News.id == uuid.UUID(article["id"]))
    assert stored.views == 0


@pytest.mark.asyncio
async def test_update_news_merges_and_reslugs(client: AsyncClient, auth_headers, fetch_all):
    headers = await auth_headers(UserRole.editor)
    article = await create_news(client, headers, title="Old Headline")

    response = await client.put(
        f"/api/news/{article['id']}", json={"title": "New Headline"}, headers=headers
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "New Headline"
    assert data["slug"] == "new-headline"
    assert data["excerpt"] == "Short summary"
    assert data["tags"] == ["gas", "reports"]

    [entry] = await fetch_all(
        AuditLog, AuditLog.resource == "News", AuditLog.action == AuditAction.update
    )
    assert entry.changes == {"title": "New Headline"}


@pytest.mark.asyncio
async def test_update_to_taken_slug(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)
    await create_news(client, headers, title="First")
    second = await create_news(client, headers, title="Second")

    response = await client.put(
        f"/api/news/{second['id']}", json={"title": "First"}, headers=headers
    )

    assert response.status_code == 400
    assert response.json()["code"] == "SLUG_CONFLICT"


@pytest.mark.asyncio
async def test_update_validates_merged_record(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)
    article = await create_news(client, headers)

    response = await client.put(
        f"/api/news/{article['id']}", json={"status": "retracted"}, headers=headers
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "status"


@pytest.mark.asyncio
async def test_update_missing_article(client: AsyncClient, auth_headers):
    headers = await auth_headers(UserRole.editor)

    response = await client.put(
        f"/api/news/{uuid.uuid4()}", json={"title": "Nothing"}, headers=headers
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_publish_is_stamped_once(client: AsyncClient, auth_headers, fetch_all):
    headers = await auth_headers(UserRole.editor)
    article = await create_news(client, headers)

    first = await client.post(f"/api/news/{article['id']}/publish", headers=headers)
    second = await client.post(f"/api/news/{article['id']}/publish", headers=headers)

    assert first.status_code == 200
    assert first.json()["data"]["status"] == "published"
    assert first.json()["data"]["publishedAt"] is not None
    assert second.json()["data"]["publishedAt"] == first.json()["data"]["publishedAt"]

    entries = await fetch_all(AuditLog, AuditLog.action == AuditAction.publish)
    assert len(entries) == 2


@pytest.mark.asyncio
async def test_unpublish_keeps_published_at(client: AsyncClient, auth_headers, fetch_all):
    headers = await auth_headers(UserRole.editor)
    article = await create_news(client, headers, status="published")

    response = await client.post(f"/api/news/{article['id']}/unpublish", headers=headers)

    assert response.status_code == 200
    [stored] = await fetch_all(News, News.id == uuid.UUID(article["id"]))
    assert stored.status == ContentStatus.draft
    assert stored.published_at is not None
    [entry] = await fetch_all(AuditLog, AuditLog.action == AuditAction.unpublish)
    assert entry.changes == {"status": "draft"}


@pytest.mark.asyncio
async def test_delete_news(client: AsyncClient, auth_headers, fetch_all):
    editor = await auth_headers(UserRole.editor)
    admin = await auth_headers(UserRole.admin)
    article = await create_news(client, editor)

    response = await client.delete(f"/api/news/{article['id']}", headers=admin)

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert await fetch_all(News) == []
    entries = await fetch_all(AuditLog, AuditLog.action == AuditAction.delete)
    assert len(entries) == 1

    again = await client.delete(f"/api/news/{article['id']}", headers=admin)
    assert again.status_code == 404
