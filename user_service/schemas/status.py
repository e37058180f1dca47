from __future__ import annotations

from pydantic import BaseModel


class StatusResponse(BaseModel):
    name: str
    version: str
    status: str
    message: str
    timestamp: str
    uptime: str
