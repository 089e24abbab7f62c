"""HTTP routes for the container list, curation and start/stop actions."""

from typing import Dict, List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..core.constants import STOP_GRACE_PERIOD
from ..models.container import ContainerRecord, CurationRecord
from ..models.operation import OperationFailure, OperationResult
from ..services.dashboard_service import DashboardService

router = APIRouter()

# HTTP status for each start/stop failure kind
FAILURE_STATUS = {
    OperationFailure.NOT_FOUND: 404,
    OperationFailure.ALREADY_IN_STATE: 409,
    OperationFailure.TIMEOUT: 504,
    OperationFailure.RUNTIME_ERROR: 502,
}


def get_dashboard(request: Request) -> DashboardService:
    return request.app.state.dashboard


def _operation_response(result: OperationResult) -> JSONResponse:
    status_code = 200 if result.success else FAILURE_STATUS[result.failure]
    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(mode="json", by_alias=True),
    )


@router.get("/health")
async def health(dashboard: DashboardService = Depends(get_dashboard)):
    """Report the Docker endpoint in use and the engine version."""
    version = await run_in_threadpool(dashboard.docker_service.version)
    return {
        "status": "ok",
        "endpoint": dashboard.docker_service.endpoint,
        "dockerVersion": version.get("Version"),
        "apiVersion": version.get("ApiVersion"),
    }


@router.get("/containers", response_model=List[ContainerRecord])
async def list_containers(
    all: bool = Query(True, description="Include stopped containers"),
    enrich: bool = Query(True, description="Add Docker Hub descriptions and icons"),
    dashboard: DashboardService = Depends(get_dashboard),
):
    """List live containers."""
    return await dashboard.list_containers(all=all, enrich=enrich)


@router.get("/containers/projects", response_model=Dict[str, List[ContainerRecord]])
def list_projects(dashboard: DashboardService = Depends(get_dashboard)):
    """List live containers grouped by compose project."""
    return dashboard.list_projects()


@router.get("/containers/{container_id}", response_model=ContainerRecord)
def get_container(container_id: str, dashboard: DashboardService = Depends(get_dashboard)):
    """Get one container by id or id prefix."""
    return dashboard.get_container(container_id)


@router.post("/containers/{container_id}/start")
def start_container(container_id: str, dashboard: DashboardService = Depends(get_dashboard)):
    return _operation_response(dashboard.start_container(container_id))


@router.post("/containers/{container_id}/stop")
def stop_container(
    container_id: str,
    grace_period: int = Query(STOP_GRACE_PERIOD, alias="gracePeriod", ge=0),
    dashboard: DashboardService = Depends(get_dashboard),
):
    return _operation_response(dashboard.stop_container(container_id, grace_period))


@router.get("/display", response_model=List[CurationRecord])
async def get_display(dashboard: DashboardService = Depends(get_dashboard)):
    """Curated overview entries merged with live container state."""
    return await dashboard.get_display()


@router.post("/display")
def save_display(records: List[CurationRecord], dashboard: DashboardService = Depends(get_dashboard)):
    """Replace the whole curation collection."""
    return {"saved": dashboard.save_display(records)}
