"""Error response schema."""

from typing import Optional

from pydantic import BaseModel


class ProblemDetail(BaseModel):
    """Problem-details body returned by the exception handlers."""

    type: str
    title: str
    status: int
    detail: str
    code: Optional[str] = None
    instance: Optional[str] = None
