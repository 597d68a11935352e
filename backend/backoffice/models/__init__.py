"""ORM Models — SQLAlchemy declarative models for the four persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Employee owns Timesheets, Menu owns MenuItems (foreign keys, no cascade)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from backoffice.models.employee import Employee  # noqa: F401
from backoffice.models.timesheet import Timesheet  # noqa: F401
from backoffice.models.menu import Menu  # noqa: F401
from backoffice.models.menu_item import MenuItem  # noqa: F401
