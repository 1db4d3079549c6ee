"""마이그레이션 자동 실행 유틸리티

서버 시작 시 Alembic 마이그레이션을 자동으로 확인하고 업데이트합니다.
"""

from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine

from projectvault.core.config import settings
from projectvault.core.logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def to_sync_url(database_url: str) -> str:
    """async 드라이버 URL을 alembic용 sync URL로 변환"""
    return database_url.replace("+asyncpg", "+psycopg2")


def get_alembic_config() -> Config:
    """Alembic 설정 객체 반환"""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", to_sync_url(settings.database_url))
    # 서버 기동 중에는 앱 로깅 설정을 유지
    config.attributes["configure_logger"] = False
    return config


def get_current_revision() -> Optional[str]:
    """현재 데이터베이스의 마이그레이션 버전 조회

    연결 실패 시 None을 반환합니다.
    """
    try:
        engine = create_engine(to_sync_url(settings.database_url))
        try:
            with engine.connect() as conn:
                rev = MigrationContext.configure(conn).get_current_revision()
        finally:
            engine.dispose()
        return str(rev) if rev else None
    except Exception as e:
        logger.warning(f"현재 마이그레이션 버전 조회 실패: {e}")
        return None


def get_head_revision() -> Optional[str]:
    """최신 마이그레이션 버전 조회"""
    script = ScriptDirectory.from_config(get_alembic_config())
    head = script.get_current_head()
    return str(head) if head else None


def check_migration_status() -> dict:
    """마이그레이션 상태 확인

    Returns:
        dict: current (현재 버전), head (최신 버전), is_up_to_date (최신 여부)
    """
    current = get_current_revision()
    head = get_head_revision()

    return {
        "current": current,
        "head": head,
        "is_up_to_date": current == head,
    }


def run_migrations(status: Optional[dict] = None) -> bool:
    """마이그레이션 실행

    Args:
        status: 미리 조회한 마이그레이션 상태 (없으면 새로 조회)

    Returns:
        bool: 성공 여부
    """
    try:
        status = status or check_migration_status()
        if status["is_up_to_date"]:
            logger.info(f"✅ 마이그레이션이 최신 상태입니다 (revision: {status['current']})")
            return True

        logger.info(
            f"🔄 마이그레이션 업데이트 중... ({status['current']} → {status['head']})"
        )
        command.upgrade(get_alembic_config(), "head")
        logger.info(f"✅ 마이그레이션 완료 (revision: {status['head']})")
        return True

    except Exception as e:
        logger.error(f"❌ 마이그레이션 실행 실패: {e}")
        return False


def run_migrations_on_startup(auto_migrate: bool = True) -> None:
    """서버 시작 시 마이그레이션 확인 및 실행

    Args:
        auto_migrate: True면 자동 마이그레이션, False면 상태만 확인

    Raises:
        RuntimeError: 프로덕션 환경에서 상태 확인에 실패한 경우
    """
    try:
        status = check_migration_status()

        if status["is_up_to_date"]:
            logger.info(f"✅ 마이그레이션 상태: 최신 (revision: {status['current']})")
            return

        if status["current"] is None:
            logger.warning("⚠️ 데이터베이스에 마이그레이션 기록이 없습니다. 초기 마이그레이션이 필요합니다.")
        else:
            logger.warning(
                f"⚠️ 마이그레이션이 최신 상태가 아닙니다. "
                f"(현재: {status['current']}, 최신: {status['head']})"
            )

        if auto_migrate:
            run_migrations(status)

    except Exception as e:
        logger.error(f"❌ 마이그레이션 상태 확인 실패: {e}")
        if settings.is_production:
            raise RuntimeError("프로덕션 환경에서 마이그레이션 확인 실패") from e
        logger.warning("⚠️ 개발 환경이므로 서버를 계속 시작합니다.")
