"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    success: bool = True
    message: str = Field(default="API Server is running!")
    database: str = Field(..., description="Connected or Disconnected")


class RootResponse(BaseModel):
    """Response for GET /."""

    success: bool = True
    message: str = "Welcome to JWT Auth API"
