"""
REST API implementation for the roster using FastAPI.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query, Response, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .. import __version__
from ..core.entities import Person
from ..core.enums import RoleType
from ..core.exceptions import ResourceNotFoundError
from ..services import RosterService


# Pydantic models for API. Field rules live in the entity model, these
# only describe the shape of the payload.
class PersonCreate(BaseModel):
    name: str
    telephone: str
    email: str


class TeacherCreate(PersonCreate):
    salary: Decimal
    subject1: str = ""
    subject2: str = ""


class AdminCreate(PersonCreate):
    salary: Decimal
    is_full_time: bool
    working_hours: int


class StudentCreate(PersonCreate):
    subject1: str = ""
    subject2: str = ""
    subject3: str = ""


class PersonUpdate(BaseModel):
    changes: Dict[str, Any] = Field(..., min_length=1)


class PersonResponse(BaseModel):
    id: int
    role: str
    name: str
    telephone: str
    email: str
    salary: Optional[Decimal] = None
    is_full_time: Optional[bool] = None
    working_hours: Optional[int] = None
    subject1: Optional[str] = None
    subject2: Optional[str] = None
    subject3: Optional[str] = None
    display: str


class StatisticsResponse(BaseModel):
    success: bool
    message: str
    statistics: Dict[str, Any]


class RosterRestAPI:
    """REST API implementation for the roster."""

    def __init__(self, service: RosterService):
        self._service = service

        # Create FastAPI app
        self.app = FastAPI(
            title="Roster API",
            description="Validated roster of teachers, administrators and students",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes."""

        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            """Root endpoint."""
            return {
                "message": "Roster API",
                "version": __version__,
                "docs": "/docs"
            }

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        @self.app.post("/teachers", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
        async def create_teacher(teacher_data: TeacherCreate):
            """Create a new teacher."""
            return self._create(RoleType.TEACHER, teacher_data)

        @self.app.post("/admins", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
        async def create_admin(admin_data: AdminCreate):
            """Create a new administrator."""
            return self._create(RoleType.ADMIN, admin_data)

        @self.app.post("/students", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Create a new student."""
            return self._create(RoleType.STUDENT, student_data)

        @self.app.get("/people", response_model=List[PersonResponse])
        async def list_people(role: Optional[str] = None,
                              skip: int = Query(0, ge=0), limit: int = Query(100, ge=0)):
            """List records in insertion order, optionally of one role."""
            if role is None:
                people = self._service.list_all()
            else:
                try:
                    people = self._service.list_by_role(role)
                except ValueError as e:
                    raise HTTPException(status_code=400, detail=str(e))

            # Apply pagination
            people = people[skip:skip + limit]

            return [self._person_to_response(person) for person in people]

        @self.app.get("/people/{person_id}", response_model=PersonResponse)
        async def get_person(person_id: int):
            """Get a record by id."""
            person = self._service.find(person_id)
            if person is None:
                raise HTTPException(status_code=404, detail="Record not found")
            return self._person_to_response(person)

        @self.app.patch("/people/{person_id}", response_model=PersonResponse)
        async def update_person(person_id: int, update_data: PersonUpdate):
            """Update fields of a record; blank values keep the current value."""
            try:
                results = self._service.update(person_id, update_data.changes)
            except ResourceNotFoundError:
                raise HTTPException(status_code=404, detail="Record not found")

            failed = [result for result in results if not result.success]
            if failed:
                raise HTTPException(status_code=400, detail=failed[0].error.to_dict())

            return self._person_to_response(self._service.get(person_id))

        @self.app.delete("/people/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
        async def delete_person(person_id: int):
            """Delete a record by id."""
            if not self._service.delete(person_id):
                raise HTTPException(status_code=404, detail="Record not found")
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        @self.app.get("/statistics", response_model=StatisticsResponse)
        async def get_statistics():
            """Get roster statistics."""
            return StatisticsResponse(
                success=True,
                message="Statistics retrieved successfully",
                statistics=self._service.statistics()
            )

    def _create(self, role: RoleType, payload: PersonCreate) -> PersonResponse:
        result = self._service.create(role, **payload.model_dump())
        if not result.success:
            raise HTTPException(status_code=400, detail=result.error.to_dict())
        return self._person_to_response(result.person)

    def _person_to_response(self, person: Person) -> PersonResponse:
        """Convert a Person entity to its response model."""
        return PersonResponse(display=person.render(), **person.to_dict())
