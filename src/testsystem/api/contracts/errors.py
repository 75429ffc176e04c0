"""Error response contract - documents the body of 4xx responses."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body FastAPI returns for an HTTPException."""

    detail: str = Field(
        description="Human-readable reason",
        examples=["Test not found"],
    )
