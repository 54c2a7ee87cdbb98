"""Shared fixtures: an in-memory database with the template catalog"""
import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from docforms.models.base import Base
import docforms.models.registry  # noqa: F401
from docforms.forms.session import InMemorySessionStore
from docforms.repositories.template import TemplateRepository
from docforms.repositories.user import UserRepository
from docforms.templates.loader import CatalogLoader

VACATION_TITLE = "Заявление на ежегодный оплачиваемый отпуск"
PROPERTY_TITLE = "Заявление на налоговый вычет при покупке жилья"
TREATMENT_TITLE = "Заявление на налоговый вычет за лечение"


@pytest.fixture
async def db():
    """Fresh in-memory SQLite database per test"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def catalog(db):
    """Database seeded with the built-in templates"""
    await CatalogLoader().load(db)
    return db


@pytest.fixture
async def user(db):
    return await UserRepository().create_user(db, email="anna@example.com", name="Анна Петрова")


@pytest.fixture
def store():
    return InMemorySessionStore()


async def template_by_title(db, title):
    templates, _ = await TemplateRepository().search(db, search=title, limit=1)
    assert templates, f"template '{title}' is not seeded"
    return templates[0]
