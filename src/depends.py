from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.cloudinary_storage import CloudinaryStorage
from src.adapter.services.groq_chat_client import GroqChatClient
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.audit_trail import RequestMeta
from src.app.services.chat_client import IChatClient
from src.app.services.file_storage import IFileStorage

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@asynccontextmanager
async def unit_of_work_scope():
    """A unit of work on its own session, for work outliving the request."""
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_unit_of_work_factory():
    return unit_of_work_scope


def get_file_storage() -> IFileStorage:
    return CloudinaryStorage(
        cloud_name=ApplicationConfig.CLOUDINARY_CLOUD_NAME,
        api_key=ApplicationConfig.CLOUDINARY_API_KEY,
        api_secret=ApplicationConfig.CLOUDINARY_API_SECRET,
        timeout_sec=ApplicationConfig.OUTBOUND_TIMEOUT_SEC,
    )


def get_chat_client() -> IChatClient:
    return GroqChatClient(
        api_key=ApplicationConfig.GROQ_API_KEY,
        model=ApplicationConfig.GROQ_MODEL,
        base_url=ApplicationConfig.GROQ_BASE_URL,
        timeout_sec=ApplicationConfig.OUTBOUND_TIMEOUT_SEC,
    )


def get_request_meta(request: Request) -> RequestMeta:
    """Client address and user agent for audit entries"""
    return RequestMeta(
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
