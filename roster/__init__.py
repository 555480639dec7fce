"""
Roster: a small in-memory information system for school staff and students.

Keeps a validated roster of teachers, administrators and students and exposes
create/read/update/delete operations through a console menu and a REST API.
"""

__version__ = "1.0.0"
__author__ = "Roster Development Team"
__description__ = "In-memory school roster with validated person records"
