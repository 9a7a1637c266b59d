from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.policy import Identity
from src.app.repositories.content_repository import ContentQuery
from src.app.use_cases.content import (
    BOARD_MEMBERS,
    NEWS,
    PAGES,
    CreateContentUseCase,
    DeleteContentUseCase,
    GetContentUseCase,
    ListContentUseCase,
    SetPublishStateUseCase,
    UpdateContentUseCase,
)
from src.app.use_cases.content.commands import NewsCommand, PageCommand
from src.domain.entities import AuditAction, ContentStatus, News, StaticPage, UserRole


def news_repository(mock_uow, existing=None, slug_taken=False):
    repository = MagicMock()
    repository.get_by_id = AsyncMock(return_value=existing)
    repository.slug_exists = AsyncMock(return_value=slug_taken)
    repository.create = AsyncMock(side_effect=lambda item: item)
    repository.update = AsyncMock(side_effect=lambda item: item)
    repository.delete = AsyncMock()
    repository.list = AsyncMock(return_value=([], 0))
    mock_uow.news = repository
    return repository


def make_news(**overrides) -> News:
    fields = dict(
        title="Old Headline",
        slug="old-headline",
        content="Body",
        excerpt="Summary",
        category="Press",
        tags=["gas"],
        author_id=uuid4(),
    )
    fields.update(overrides)
    return News(**fields)


def recorded_audit(mock_uow):
    """The AuditLog entries handed to the audit repository"""
    return [call.args[0] for call in mock_uow.audit_logs.create.call_args_list]


@pytest.mark.asyncio
async def test_create_derives_slug_stamps_owner_and_audits(mock_uow):
    repository = news_repository(mock_uow)
    actor_id = uuid4()
    command = NewsCommand(
        title="Bid Round Opens", content="Body", excerpt="Summary", category="Press"
    )

    result = await CreateContentUseCase(mock_uow, NEWS).execute(actor_id, command)

    assert result.is_ok()
    news = result.value
    assert news.slug == "bid-round-opens"
    assert news.author_id == actor_id
    assert news.published_at is None
    repository.slug_exists.assert_awaited_once_with("bid-round-opens")

    [entry] = recorded_audit(mock_uow)
    assert entry.action == AuditAction.create
    assert entry.resource == "News"
    assert entry.user_id == actor_id
    assert entry.changes == {
        "title": "Bid Round Opens",
        "content": "Body",
        "excerpt": "Summary",
        "category": "Press",
    }
    # Mutation commit, then the audit commit
    assert mock_uow.commit.await_count == 2


@pytest.mark.asyncio
async def test_create_published_stamps_published_at(mock_uow):
    news_repository(mock_uow)
    command = NewsCommand(
        title="Live", content="Body", excerpt="Summary", category="Press", status="published"
    )

    result = await CreateContentUseCase(mock_uow, NEWS).execute(uuid4(), command)

    assert result.value.published_at is not None


@pytest.mark.asyncio
async def test_create_with_taken_slug(mock_uow):
    repository = news_repository(mock_uow, slug_taken=True)
    command = NewsCommand(title="Taken", content="Body", excerpt="Summary", category="Press")

    result = await CreateContentUseCase(mock_uow, NEWS).execute(uuid4(), command)

    assert result.is_err()
    assert result.error.code == "SLUG_CONFLICT"
    repository.create.assert_not_called()
    mock_uow.audit_logs.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_keeps_explicit_slug(mock_uow):
    repository = MagicMock()
    repository.slug_exists = AsyncMock(return_value=False)
    repository.create = AsyncMock(side_effect=lambda item: item)
    mock_uow.pages = repository
    actor_id = uuid4()
    command = PageCommand(title="About the Commission", slug="about", content="Text")

    result = await CreateContentUseCase(mock_uow, PAGES).execute(actor_id, command)

    assert result.value.slug == "about"
    assert isinstance(result.value, StaticPage)
    assert result.value.last_edited_by == actor_id


@pytest.mark.asyncio
async def test_update_merges_patch_and_reslugs(mock_uow):
    article = make_news()
    repository = news_repository(mock_uow, existing=article)
    actor_id = uuid4()

    result = await UpdateContentUseCase(mock_uow, NEWS).execute(
        actor_id, article.id, {"title": "New Headline"}
    )

    assert result.is_ok()
    assert article.title == "New Headline"
    assert article.slug == "new-headline"
    assert article.excerpt == "Summary"
    assert article.tags == ["gas"]
    repository.slug_exists.assert_awaited_once_with("new-headline", exclude_id=article.id)
    [entry] = recorded_audit(mock_uow)
    assert entry.action == AuditAction.update
    assert entry.changes == {"title": "New Headline"}


@pytest.mark.asyncio
async def test_update_accepts_snake_case_keys(mock_uow):
    article = make_news(featured_image="https://cdn/old.jpg")
    news_repository(mock_uow, existing=article)

    result = await UpdateContentUseCase(mock_uow, NEWS).execute(
        uuid4(), article.id, {"featured_image": "https://cdn/new.jpg"}
    )

    assert result.is_ok()
    assert article.featured_image == "https://cdn/new.jpg"
    [entry] = recorded_audit(mock_uow)
    assert entry.changes == {"featuredImage": "https://cdn/new.jpg"}


@pytest.mark.asyncio
async def test_update_keeps_slug_when_title_unchanged(mock_uow):
    article = make_news(slug="custom-slug")
    news_repository(mock_uow, existing=article)

    await UpdateContentUseCase(mock_uow, NEWS).execute(uuid4(), article.id, {"category": "Events"})

    assert article.slug == "custom-slug"
    assert article.category == "Events"


@pytest.mark.asyncio
async def test_update_does_not_change_author(mock_uow):
    author_id = uuid4()
    article = make_news(author_id=author_id)
    news_repository(mock_uow, existing=article)

    await UpdateContentUseCase(mock_uow, NEWS).execute(uuid4(), article.id, {"excerpt": "New"})

    assert article.author_id == author_id


@pytest.mark.asyncio
async def test_update_rejects_invalid_merge(mock_uow):
    article = make_news()
    repository = news_repository(mock_uow, existing=article)

    result = await UpdateContentUseCase(mock_uow, NEWS).execute(
        uuid4(), article.id, {"excerpt": "x" * 501}
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.details[0]["field"] == "excerpt"
    assert article.excerpt == "Summary"
    repository.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_publishing_stamps_once(mock_uow):
    article = make_news()
    news_repository(mock_uow, existing=article)

    await UpdateContentUseCase(mock_uow, NEWS).execute(uuid4(), article.id, {"status": "published"})
    first_stamp = article.published_at
    await UpdateContentUseCase(mock_uow, NEWS).execute(uuid4(), article.id, {"category": "Other"})

    assert article.status == ContentStatus.published
    assert first_stamp is not None
    assert article.published_at == first_stamp


@pytest.mark.asyncio
async def test_update_missing_item(mock_uow):
    news_repository(mock_uow, existing=None)

    result = await UpdateContentUseCase(mock_uow, NEWS).execute(uuid4(), uuid4(), {"title": "X"})

    assert result.error.code == "NOT_FOUND"
    assert result.error.message == "News article not found"


@pytest.mark.asyncio
async def test_anonymous_list_forces_visibility(mock_uow):
    repository = news_repository(mock_uow)
    query = ContentQuery(equals={"status": ContentStatus.draft, "category": "Press"})

    await ListContentUseCase(mock_uow, NEWS).execute(query, identity=None, page=2, limit=10)

    sent_query = repository.list.call_args.args[0]
    assert sent_query.equals == {"status": ContentStatus.published, "category": "Press"}
    assert repository.list.call_args.kwargs == {"page": 2, "limit": 10}


@pytest.mark.asyncio
async def test_authenticated_list_keeps_filters(mock_uow):
    repository = news_repository(mock_uow)
    repository.list.return_value = ([make_news()], 11)
    identity = Identity(user_id=uuid4(), email="e@nuprc.gov.ng", role=UserRole.editor)
    query = ContentQuery(equals={"status": ContentStatus.draft})

    result = await ListContentUseCase(mock_uow, NEWS).execute(query, identity=identity, limit=10)

    assert repository.list.call_args.args[0].equals == {"status": ContentStatus.draft}
    assert result.value.total == 11
    assert result.value.pages == 2


@pytest.mark.asyncio
async def test_hidden_item_is_not_found_for_anonymous(mock_uow):
    news_repository(mock_uow, existing=make_news(status=ContentStatus.draft))

    anonymous = await GetContentUseCase(mock_uow, NEWS).execute(item_id=uuid4())
    staff = await GetContentUseCase(mock_uow, NEWS).execute(
        identity=Identity(user_id=uuid4(), email="a@nuprc.gov.ng", role=UserRole.admin),
        item_id=uuid4(),
    )

    assert anonymous.error.code == "NOT_FOUND"
    assert staff.is_ok()


@pytest.mark.asyncio
async def test_inactive_board_member_hidden(mock_uow):
    from src.domain.entities import BoardMember

    member = BoardMember(name="Former", position="Member", image="x.jpg", is_active=False)
    mock_uow.board_members.get_by_id = AsyncMock(return_value=member)

    result = await GetContentUseCase(mock_uow, BOARD_MEMBERS).execute(item_id=member.id)

    assert result.error.message == "Board member not found"


@pytest.mark.asyncio
async def test_delete_audits_after_commit(mock_uow):
    article = make_news()
    repository = news_repository(mock_uow, existing=article)
    actor_id = uuid4()

    result = await DeleteContentUseCase(mock_uow, NEWS).execute(actor_id, article.id)

    assert result.is_ok()
    repository.delete.assert_awaited_once_with(article)
    [entry] = recorded_audit(mock_uow)
    assert entry.action == AuditAction.delete
    assert entry.resource_id == article.id


@pytest.mark.asyncio
async def test_audit_failure_propagates_after_commit(mock_uow):
    news_repository(mock_uow, existing=make_news())
    mock_uow.audit_logs.create = AsyncMock(side_effect=RuntimeError("audit store down"))

    with pytest.raises(RuntimeError):
        await DeleteContentUseCase(mock_uow, NEWS).execute(uuid4(), uuid4())

    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_publish_and_unpublish(mock_uow):
    article = make_news()
    news_repository(mock_uow, existing=article)

    await SetPublishStateUseCase(mock_uow).execute(uuid4(), article.id, publish=True)
    stamp = article.published_at
    await SetPublishStateUseCase(mock_uow).execute(uuid4(), article.id, publish=False)

    assert article.status == ContentStatus.draft
    assert article.published_at == stamp
    actions = [entry.action for entry in recorded_audit(mock_uow)]
    assert actions == [AuditAction.publish, AuditAction.unpublish]
