"""Timesheet ORM — hours worked by one employee on one date."""

from sqlalchemy import ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base


class Timesheet(Base):
    """Timesheet row — always belongs to an Employee (employee_id FK)."""
    __tablename__ = "timesheets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    hours: Mapped[float] = mapped_column(Numeric, nullable=False)
    rate: Mapped[float] = mapped_column(Numeric, nullable=False)
    # Day number (e.g. epoch day or epoch milliseconds), not a DATE column
    date: Mapped[int] = mapped_column(Numeric, nullable=False)
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False, index=True,
    )

    employee: Mapped["Employee"] = relationship(
        "Employee", back_populates="timesheets",
    )
