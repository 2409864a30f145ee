# backeye/routers/log.py
"""CRUD operations on free-text person logs."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from ..core.database import get_db
from ..core.exceptions import bad_request, not_found, database_error
from ..core.security import require_token
from ..schemas import LogDto, to_dtos
from ..services.log_service import LogService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/Log",
    tags=["Log"],
    dependencies=[Depends(require_token)]
)

@router.get("/{log_id}", response_model=LogDto)
async def get_log(log_id: int, db: AsyncSession = Depends(get_db)):
    """Get a log by its id"""
    if log_id < 0:
        raise bad_request(f"logId: {log_id} must be positive")

    service = LogService(db)
    try:
        log = await service.get_log_by_id(log_id)
    except Exception as e:
        raise database_error(f"cannot get log with log id: {log_id}. due to: {e}")

    if log is None:
        raise not_found(f"log with log id: {log_id} not found in DB")
    return LogDto.model_validate(log)

@router.get("/PersonLogs/{person_id}", response_model=List[LogDto])
async def get_person_logs(person_id: int, db: AsyncSession = Depends(get_db)):
    """Get every log of a person"""
    if person_id < 0:
        raise bad_request(f"personId: {person_id} must be positive number")

    service = LogService(db)
    try:
        logs = await service.get_logs_by_person_id(person_id)
    except Exception as e:
        raise database_error(f"cannot get logs of a person with id: {person_id}. due to: {e}")
    return to_dtos(LogDto, logs)

@router.post("", response_model=LogDto)
async def add_log(log_dto: LogDto, db: AsyncSession = Depends(get_db)):
    """Add a log entry for a person"""
    if log_dto.person_id < 1:
        raise bad_request("logDto is null or person id is invalid")

    service = LogService(db)
    try:
        log = await service.add_log(log_dto.to_model())
    except Exception as e:
        raise database_error(
            f"cannot add the log with the next details - person id: {log_dto.person_id}"
            f" Creation Date: {log_dto.creation_date}  Data: {log_dto.data} to DB. due to: {e}"
        )
    return LogDto.model_validate(log)

@router.delete("/{log_id}", response_model=bool)
async def delete_log(log_id: int, db: AsyncSession = Depends(get_db)):
    """Remove a log by its id"""
    if log_id < 0:
        raise bad_request(f"logId: {log_id} must be positive")

    service = LogService(db)
    try:
        removed = await service.remove_log_by_id(log_id)
    except Exception as e:
        raise database_error(f"cannot remove the log with the Log Id: {log_id} from DB. Due to {e}")

    if not removed:
        raise database_error(f"cannot remove the log with the Log Id: {log_id} from DB")
    return True
