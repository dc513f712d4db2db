import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from quizapp import database
from quizapp.config import Settings
from quizapp.main import create_app


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'quiz.db'}"


@pytest_asyncio.fixture
async def engine(database_url):
    engine = database.create_engine(database_url)
    await database.init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    async_session = database.create_sessionmaker(engine)
    async with async_session() as session:
        yield session


@pytest.fixture
def client(database_url, tmp_path):
    settings = Settings(DATABASE_URL=database_url, STATIC_DIR=str(tmp_path / "public"))
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def quiz_payload():
    return {
        "titulo": "T",
        "descricao": "D",
        "perguntas": [
            {
                "enunciado": "Q1",
                "alternativas": [
                    {"texto": "A", "correta": True},
                    {"texto": "B", "correta": False},
                ],
            }
        ],
    }
