# backeye/routers/person.py
"""Students and teachers: sign-in, registration and maintenance."""
from typing import List
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from ..core.database import get_db
from ..core.exceptions import bad_request, not_found, database_error
from ..core.security import create_access_token, generate_password, require_token
from ..models.person import Person
from ..schemas import PersonDto
from ..services.person_service import PersonService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/Person", tags=["Person"])


def with_token(person: Person) -> PersonDto:
    """Map a person to its DTO carrying a freshly issued bearer token"""
    person_dto = PersonDto.from_person(person)
    person_dto.token = create_access_token(person.id, person.type.name)
    return person_dto


@router.post("/GetStudent", response_model=PersonDto)
async def get_student(password: str = Body(...), db: AsyncSession = Depends(get_db)):
    """Sign a student in by password"""
    if not password or not password.strip():
        raise bad_request(f"password: {password} must not be null or empty")

    service = PersonService(db)
    try:
        person = await service.get_person_by_password(password)
    except Exception as e:
        raise database_error(f"cannot get person with password: {password}. due to: {e}")

    if person is None:
        raise not_found(f"person with password: {password} not found in DB")
    return with_token(person)

@router.post("/GetTeacher/{email}", response_model=PersonDto)
async def get_teacher(email: str, password: str = Body(...), db: AsyncSession = Depends(get_db)):
    """Sign a teacher in by email and password"""
    if not email.strip() or not password or not password.strip():
        raise bad_request(f"email: {email} or password: {password} must not be null or empty")

    service = PersonService(db)
    try:
        person = await service.get_person_by_email_password(email, password)
    except Exception as e:
        raise database_error(f"cannot get person with email: {email} and password: {password}. due to: {e}")

    if person is None:
        raise not_found(f"person with email: {email} and password: {password} not found in DB")
    return with_token(person)

@router.post("", response_model=PersonDto)
async def add_person(person_dto: PersonDto, db: AsyncSession = Depends(get_db)):
    """Register a person; a password is generated when none is given"""
    if not person_dto.password:
        person_dto.password = generate_password()

    service = PersonService(db)
    try:
        person = await service.add_person(person_dto.to_model())
    except Exception as e:
        raise database_error(f"cannot add person to DB. due to: {e}")
    return with_token(person)

@router.get("/Students", response_model=List[PersonDto], dependencies=[Depends(require_token)])
async def get_students(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db)
):
    """List students"""
    service = PersonService(db)
    try:
        students = await service.get_students(skip=skip, limit=limit)
    except Exception as e:
        raise database_error(f"cannot get students from DB. due to: {e}")
    return [PersonDto.from_person(student) for student in students]

@router.get("/{person_id}", response_model=PersonDto, dependencies=[Depends(require_token)])
async def get_person(person_id: int, db: AsyncSession = Depends(get_db)):
    """Get a person by id"""
    if person_id < 1:
        raise bad_request(f"person id: {person_id} is invalid")

    service = PersonService(db)
    try:
        person = await service.get_person_by_id(person_id)
    except Exception as e:
        raise database_error(f"cannot get person with id: {person_id}. due to: {e}")

    if person is None:
        raise not_found(f"person with id: {person_id} not found in DB")
    return PersonDto.from_person(person)

@router.put("", response_model=PersonDto, dependencies=[Depends(require_token)])
async def update_person(person_dto: PersonDto, db: AsyncSession = Depends(get_db)):
    """Change the details of an existing person"""
    if person_dto.id < 1:
        raise bad_request("personDto is null or person id is invalid")

    service = PersonService(db)
    changes = person_dto.model_dump(exclude_unset=True, exclude={"id", "token"})
    try:
        person = await service.update_person(person_dto.id, changes)
    except Exception as e:
        raise database_error(f"cannot change the person with person id: {person_dto.id}. due to: {e}")

    if person is None:
        raise database_error(f"cannot change the person with person id: {person_dto.id}")
    return PersonDto.from_person(person)

@router.delete("/{person_id}", response_model=bool, dependencies=[Depends(require_token)])
async def delete_person(person_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a person with everything recorded about them"""
    if person_id < 1:
        raise bad_request(f"person id: {person_id} is invalid")

    service = PersonService(db)
    try:
        deleted = await service.delete_person(person_id)
    except Exception as e:
        raise database_error(f"cannot delete person from DB. due to: {e}")

    if not deleted:
        raise not_found(f"cannot find person id: {person_id} in DB")
    return True
