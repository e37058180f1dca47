from fastapi import APIRouter, Depends, Request

from ..schemas import StatusResponse
from ..utils.runtime import RuntimeState, rfc3339_timestamp

router = APIRouter()

STATUS_RUNNING = "running"
STATUS_MESSAGE = "User service is running"


def get_runtime_state(request: Request) -> RuntimeState:
    return request.app.state.runtime


@router.get("/", response_model=StatusResponse)
def read_status(runtime: RuntimeState = Depends(get_runtime_state)) -> StatusResponse:
    """Return service identity along with the current time and uptime."""
    return StatusResponse(
        name=runtime.name,
        version=runtime.version,
        status=STATUS_RUNNING,
        message=STATUS_MESSAGE,
        timestamp=rfc3339_timestamp(),
        uptime=runtime.uptime(),
    )
