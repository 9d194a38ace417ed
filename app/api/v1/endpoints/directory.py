"""Directory lookup endpoints."""

from fastapi import APIRouter, status

from app.core.exceptions import NotFoundException
from app.dependencies import DirectoryDep
from app.schemas.directory import ClinicRecord, ServiceRecord, UserRecord

router = APIRouter()


@router.get(
    "/users/{user_id}",
    response_model=UserRecord,
    status_code=status.HTTP_200_OK,
    tags=["Directory"],
    summary="Get user by ID",
)
async def get_user(user_id: str, directory: DirectoryDep) -> UserRecord:
    user = directory.resolve_user(user_id)
    if user is None:
        raise NotFoundException("User not found")
    return user


@router.get(
    "/services/{service_id}",
    response_model=ServiceRecord,
    status_code=status.HTTP_200_OK,
    tags=["Directory"],
    summary="Get service by ID",
)
async def get_service(service_id: str, directory: DirectoryDep) -> ServiceRecord:
    service = directory.resolve_service(service_id)
    if service is None:
        raise NotFoundException("Service not found")
    return service


@router.get(
    "/clinics/{clinic_id}",
    response_model=ClinicRecord,
    status_code=status.HTTP_200_OK,
    tags=["Directory"],
    summary="Get clinic by ID",
)
async def get_clinic(clinic_id: str, directory: DirectoryDep) -> ClinicRecord:
    clinic = directory.resolve_clinic(clinic_id)
    if clinic is None:
        raise NotFoundException("Clinic not found")
    return clinic
