"""Employee ORM — staff member; never hard-deleted.

Invariants:
    - is_current_employee is 1 for active staff, 0 after a (soft) delete
    - wage is numeric and required

Design Decisions:
    - Integer flag column instead of Boolean: statements compare against 1/0
      on every backend the same way
"""

from sqlalchemy import Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base


class Employee(Base):
    """Employee row — parent of Timesheet."""
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    position: Mapped[str] = mapped_column(Text, nullable=False)
    wage: Mapped[float] = mapped_column(Numeric, nullable=False)
    is_current_employee: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1, server_default="1",
    )

    timesheets: Mapped[list["Timesheet"]] = relationship(
        "Timesheet", back_populates="employee",
    )
