"""Projects 도메인 라우터

포털 프로젝트 카탈로그 동기화 API 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from projectvault.core.database import get_db
from projectvault.core.dependencies import verify_internal_api_key
from projectvault.core.schemas import (
    APIResponse,
    ListAPIResponse,
    create_list_response,
    create_response,
)
from projectvault.core.utils.pagination import PageParams
from projectvault.domains.projects.models import ProjectStatus
from projectvault.domains.projects.repository import ProjectFilters
from projectvault.domains.projects.schemas import (
    BulkSyncResponse,
    ProjectBulkSync,
    ProjectResponse,
    ProjectSync,
)
from projectvault.domains.projects.service import ProjectService

router = APIRouter(dependencies=[Depends(verify_internal_api_key)])


def get_project_service(
    session: AsyncSession = Depends(get_db),
) -> ProjectService:
    """ProjectService 의존성"""
    return ProjectService(session)


@router.get("", response_model=ListAPIResponse[ProjectResponse])
async def get_projects(
    page_params: PageParams = Depends(),
    status: Optional[ProjectStatus] = Query(None, description="심사 상태"),
    tag: Optional[str] = Query(None, description="포함해야 할 태그"),
    service: ProjectService = Depends(get_project_service),
):
    """프로젝트 목록 조회"""
    projects, total = await service.get_projects(
        page=page_params.page,
        size=page_params.size,
        filters=ProjectFilters(status=status, tag=tag),
    )
    return create_list_response(
        data=[ProjectResponse.model_validate(p) for p in projects],
        total=total,
        page=page_params.page,
        size=page_params.size,
        message="프로젝트 목록을 조회했습니다.",
    )


@router.get("/{project_id}", response_model=APIResponse[ProjectResponse])
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    """프로젝트 상세 조회"""
    project = await service.get_project(project_id)
    return create_response(
        data=ProjectResponse.model_validate(project),
        message="프로젝트 정보를 조회했습니다.",
    )


@router.post(
    "", response_model=APIResponse[ProjectResponse], status_code=201
)
async def upsert_project(
    project_data: ProjectSync,
    service: ProjectService = Depends(get_project_service),
):
    """프로젝트 동기화 (Upsert)"""
    project = await service.upsert_project(project_data)
    return create_response(
        data=ProjectResponse.model_validate(project),
        message="프로젝트가 동기화되었습니다.",
    )


@router.post(
    "/bulk", response_model=APIResponse[BulkSyncResponse], status_code=201
)
async def bulk_sync_projects(
    bulk_data: ProjectBulkSync,
    service: ProjectService = Depends(get_project_service),
):
    """벌크 프로젝트 동기화"""
    result = await service.bulk_upsert_projects(bulk_data.projects)
    return create_response(
        data=result,
        message="벌크 프로젝트 동기화가 완료되었습니다.",
    )


@router.delete("/{project_id}", status_code=204)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    """프로젝트 삭제 (Soft Delete)"""
    await service.delete_project(project_id)
    return None
