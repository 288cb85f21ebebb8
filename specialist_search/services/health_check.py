from __future__ import annotations
from pydantic import BaseModel
from typing import Dict

from specialist_search.services.specialist_store import SpecialistStore


class DependencyStatus(BaseModel):
    status: str
    details: str | None = None


class ReadinessResponse(BaseModel):
    status: str
    dependencies: Dict[str, DependencyStatus]


def check_store_status(store: SpecialistStore | None) -> DependencyStatus:
    if store is None:
        return DependencyStatus(status="error", details="Specialist store is not provisioned")
    if len(store) == 0:
        return DependencyStatus(status="error", details="Specialist store is empty")
    return DependencyStatus(status="ok", details=f"Store loaded with {len(store)} specialists")


def run_readiness_check(store: SpecialistStore | None) -> ReadinessResponse:
    store_status = check_store_status(store)

    total_status = "ready"
    if store_status.status == "error":
        total_status = "not_ready"

    return ReadinessResponse(
        status=total_status,
        dependencies={"store": store_status},
    )
