"""테스트 설정"""

import os
from typing import Generator

import pytest
import pytest_asyncio
from docker import from_env
from docker.errors import DockerException
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from projectvault.core.config import settings
from projectvault.core.database import Base, get_db
from projectvault.domains.recommendations.cache import (
    _create_recommendation_cache,
)
from projectvault.main import app


def _is_docker_available() -> bool:
    """로컬 환경에서 Docker 접근 가능 여부 확인"""
    if os.getenv("FORCE_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return True
    if os.getenv("SKIP_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return False

    try:
        client = from_env()
        client.ping()
        return True
    except DockerException:
        return False
    except Exception:
        return False


DOCKER_AVAILABLE = _is_docker_available()


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """PostgreSQL 테스트 컨테이너"""
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available; skipping container-based tests.")

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def test_database_url(postgres_container: PostgresContainer) -> str:
    """테스트 데이터베이스 URL"""
    # asyncpg를 위한 URL 생성
    return str(
        postgres_container.get_connection_url().replace(
            "postgresql+psycopg2://", "postgresql+asyncpg://"
        )
    )


@pytest_asyncio.fixture
async def db_session(test_database_url: str):
    """테스트 데이터베이스 세션"""
    engine = create_async_engine(test_database_url, echo=False)

    # 각 테스트마다 깨끗한 스키마 유지
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await engine.dispose()


# NOTE:
# pytest-asyncio 는 테스트마다 독립적인 event loop 를 생성하므로
# async fixture 는 모두 function 스코프로 유지
@pytest_asyncio.fixture
async def client(db_session):
    """비동기 테스트 클라이언트 (테스트 DB 사용)"""

    # 테스트용 데이터베이스로 의존성 오버라이드
    async def override_get_db():
        yield db_session

    # 추천 캐시 싱글톤 초기화
    _create_recommendation_cache.cache_clear()

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    # 정리
    app.dependency_overrides.clear()
    _create_recommendation_cache.cache_clear()


@pytest.fixture
def api_key_header():
    """Internal API Key 헤더"""
    return {"X-Internal-Api-Key": settings.internal_api_key}


@pytest.fixture
def project_payload():
    """프로젝트 동기화 요청 본문 팩토리"""

    def _factory(project_id: str, tags=None, **overrides):
        payload = {
            "id": project_id,
            "title": f"Project {project_id}",
            "description": f"Description of {project_id}",
            "tags": tags if tags is not None else [],
            "githubLink": f"https://github.com/example/{project_id}",
            "status": "approved",
        }
        payload.update(overrides)
        return payload

    return _factory
