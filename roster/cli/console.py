"""
Interactive console menu for the roster.

The console only collects raw text and reports outcomes. Every acceptance
decision is delegated to the validators of the entity model, so the menu and
the core can never disagree about what a valid telephone or salary is.
"""

import logging
from typing import Any, Callable, Optional, Sequence

from ..core.entities import Person
from ..core.enums import RoleType
from ..core.exceptions import RosterException, ValidationError
from ..core.validation import (
    MAX_WORKING_HOURS, MIN_WORKING_HOURS, validate_email, validate_name,
    validate_flag, validate_salary, validate_telephone, validate_working_hours,
)
from ..services import RosterService

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "name": "Name",
    "telephone": "Telephone",
    "email": "Email",
    "salary": "Salary",
    "subject1": "Subject 1",
    "subject2": "Subject 2",
    "subject3": "Subject 3",
    "is_full_time": "Full-time",
    "working_hours": "Working hours",
}

MENU = """============================================
  DESKTOP INFORMATION SYSTEM
============================================
1. Add new record
2. View all records
3. View by role
4. Edit record
5. Delete record
6. Help
0. Exit
--------------------------------------------"""

HELP = """HELP:
- Email must be a valid format (example: user@example.com).
- Telephone must start with 0 and be 10-11 digits.
- Salary 0-1,000,000,000, working hours 0-84.
- Use the ID in brackets for edit/delete.
- When editing, press Enter to keep the current value.
- Data is stored in memory only and will be lost when program exits."""


class ConsoleUI:
    """Menu loop over a ``RosterService``.

    ``prompt`` and ``write`` default to ``input`` and ``print`` and can be
    replaced for scripted sessions.
    """

    def __init__(self, service: RosterService,
                 prompt: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None,
                 pause: bool = True):
        self._service = service
        self._prompt = prompt or input
        self._write = write or print
        self._pause = pause

    def run(self) -> None:
        """Show the menu until the user picks 0 or input ends."""
        actions = {
            1: self.add_record,
            2: self.list_all,
            3: self.list_by_role,
            4: self.edit_record,
            5: self.delete_record,
            6: self.show_help,
        }
        while True:
            try:
                self._write(MENU)
                choice = self.read_int("Select (0-6): ", 0, 6)
                self._write("")
                if choice == 0:
                    return
                actions[choice]()
            except EOFError:
                return
            except RosterException as e:
                # Nothing raised by the core may end the session.
                logger.warning("Console action failed: %s", e.message)
                self._write(f"Error: {e.message}")

            if self._pause:
                self._write("\nPress Enter to continue...")
                try:
                    self._prompt("")
                except EOFError:
                    return

    # Menu actions

    def add_record(self) -> None:
        role = self.read_role()
        fields = {
            "name": self.read_validated("Name: ", validate_name),
            "telephone": self.read_validated("Telephone: ", validate_telephone),
            "email": self.read_validated("Email: ", validate_email),
        }

        if role == RoleType.TEACHER:
            fields["salary"] = self.read_validated("Salary: ", validate_salary)
            fields["subject1"] = self.read_non_empty("Subject 1: ")
            fields["subject2"] = self.read_non_empty("Subject 2: ")
        elif role == RoleType.ADMIN:
            fields["salary"] = self.read_validated("Salary: ", validate_salary)
            fields["is_full_time"] = self.read_validated("Full-time? (Y/N): ", validate_flag)
            fields["working_hours"] = self.read_validated(
                f"Working hours/week ({MIN_WORKING_HOURS}-{MAX_WORKING_HOURS}): ", validate_working_hours
            )
        else:
            fields["subject1"] = self.read_non_empty("Subject 1: ")
            fields["subject2"] = self.read_non_empty("Subject 2: ")
            fields["subject3"] = self.read_non_empty("Subject 3: ")

        result = self._service.create(role, **fields)
        if result.success:
            self._write(f"Record added successfully. (ID {result.id})")
        else:
            self._write(f"Error: {result.message}")

    def list_all(self) -> None:
        self._print_records(self._service.list_all(), "(No data)")

    def list_by_role(self) -> None:
        role = self.read_role()
        self._print_records(self._service.list_by_role(role), "(No records)")

    def edit_record(self) -> None:
        entity_id = self.read_int("Enter ID to edit: ", 1, None)
        person = self._service.find(entity_id)
        if person is None:
            self._write("Record not found.")
            return

        self._write("Current: " + person.render())
        self._write("Press Enter to keep value.")

        for field in person.editable_fields():
            label = FIELD_LABELS.get(field, field)
            raw = self._prompt(f"{label} ({self._current(person, field)}): ")
            if not raw.strip():
                continue
            result = self._service.set_field(person, field, raw)
            if not result.success:
                self._write(f"Invalid {label.lower()}: {result.message}")

        self._write("Record updated.")

    def delete_record(self) -> None:
        entity_id = self.read_int("Enter ID to delete: ", 1, None)
        if self._service.delete(entity_id):
            self._write("Deleted successfully.")
        else:
            self._write("Record not found.")

    def show_help(self) -> None:
        self._write(HELP)

    # Input helpers

    def read_validated(self, prompt: str, validator: Callable[[Any], Any]) -> Any:
        """Ask until ``validator`` accepts the answer; return its normalized value."""
        while True:
            raw = self._prompt(prompt)
            try:
                return validator(raw)
            except ValidationError as e:
                self._write(f"{e.message} Try again.")

    def read_non_empty(self, prompt: str) -> str:
        while True:
            raw = self._prompt(prompt)
            if raw.strip():
                return raw.strip()
            self._write("Invalid input. Try again.")

    def read_int(self, prompt: str, minimum: int, maximum: Optional[int]) -> int:
        while True:
            raw = self._prompt(prompt).strip()
            try:
                value = int(raw)
            except ValueError:
                value = None
            if value is not None and value >= minimum and (maximum is None or value <= maximum):
                return value
            if maximum is None:
                self._write(f"Enter a number of at least {minimum}.")
            else:
                self._write(f"Enter a number between {minimum} and {maximum}.")

    def read_role(self) -> RoleType:
        self._write("Select role: 1.Teacher 2.Admin 3.Student")
        return RoleType(self.read_int("Choice (1-3): ", 1, 3))

    def _print_records(self, people: Sequence[Person], empty_message: str) -> None:
        if not people:
            self._write(empty_message)
            return
        for person in people:
            self._write(person.render())

    @staticmethod
    def _current(person: Person, field: str) -> str:
        value = getattr(person, field)
        if isinstance(value, bool):
            return "Y" if value else "N"
        return str(value)
