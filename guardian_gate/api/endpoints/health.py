"""Health check endpoint: process liveness plus credential store reachability."""

from typing import Annotated

from fastapi import APIRouter, Depends

from guardian_gate.api.dependencies import get_credential_store
from guardian_gate.application.interfaces.repositories import ICredentialStore
from guardian_gate.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
async def health_check(
    store: Annotated[ICredentialStore, Depends(get_credential_store)],
) -> HealthResponse:
    """Always 200 while the process serves; database reports the store ping."""
    connected = await store.ping()
    return HealthResponse(database="Connected" if connected else "Disconnected")
