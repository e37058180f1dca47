from .status import StatusResponse

__all__ = [
    "StatusResponse",
]
