from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401  registers every table on SQLModel.metadata
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import issue_access_token
from src.app.services.chat_client import ChatServiceError, IChatClient
from src.app.services.file_storage import FileStorageError, IFileStorage, StoredFile
from src.app.services.passwords import hash_password
from src.depends import (
    get_chat_client,
    get_file_storage,
    get_unit_of_work,
    get_unit_of_work_factory,
)
from src.domain.entities import User, UserRole

DEFAULT_PASSWORD = "Password123"


class FakeFileStorage(IFileStorage):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.uploads = []

    async def upload(self, content, filename, content_type, folder):
        if self.fail:
            raise FileStorageError("storage unavailable")
        self.uploads.append((filename, content_type, folder, len(content)))
        stem = filename.rsplit(".", 1)[0]
        return StoredFile(
            url=f"https://files.example.com/{folder}/{filename}",
            public_id=f"{folder}/{stem}",
            format=filename.rsplit(".", 1)[-1],
            size=len(content),
        )


class FakeChatClient(IChatClient):
    def __init__(self, configured: bool = False, reply: str = "", fail: bool = False):
        self._configured = configured
        self.reply = reply
        self.fail = fail
        self.messages = []

    @property
    def configured(self) -> bool:
        return self._configured

    async def complete(self, system_prompt, message):
        self.messages.append(message)
        if self.fail:
            raise ChatServiceError("provider down")
        return self.reply


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def file_storage():
    return FakeFileStorage()


@pytest.fixture
def chat_client():
    return FakeChatClient()


@pytest.fixture
def app(session_factory, file_storage, chat_client):
    from config import ApplicationConfig
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    @asynccontextmanager
    async def unit_of_work_scope():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_unit_of_work_factory] = lambda: unit_of_work_scope
    app.dependency_overrides[get_file_storage] = lambda: file_storage
    app.dependency_overrides[get_chat_client] = lambda: chat_client
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_user(session_factory):
    """Insert a user directly and return it (detached, attributes loaded)."""

    async def _create(
        email: str = "admin@nuprc.gov.ng",
        role: UserRole = UserRole.admin,
        password: str = DEFAULT_PASSWORD,
        is_active: bool = True,
        first_name: str = "Test",
        last_name: str = "User",
    ) -> User:
        async with session_factory() as session:
            user = User(
                email=email,
                password_hash=hash_password(password),
                first_name=first_name,
                last_name=last_name,
                role=role,
                is_active=is_active,
            )
            session.add(user)
            await session.commit()
            await session.refresh(user)
            session.expunge(user)
            return user

    return _create


@pytest.fixture
def auth_headers(create_user):
    """Authorization headers for a freshly created user with the given role."""

    async def _headers(role: UserRole = UserRole.admin, email: str = None) -> dict:
        email = email or f"{role.value}@nuprc.gov.ng"
        user = await create_user(email=email, role=role)
        return {"Authorization": f"Bearer {issue_access_token(user)}"}

    return _headers


@pytest.fixture
def fetch_all(session_factory):
    """Rows of ``model`` matching ``conditions``, read on a fresh session."""
    from sqlmodel import select

    async def _fetch(model, *conditions):
        async with session_factory() as session:
            result = await session.exec(select(model).where(*conditions))
            return result.all()

    return _fetch
