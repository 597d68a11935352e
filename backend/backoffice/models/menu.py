"""Menu ORM — named collection of menu items.

Invariants:
    - A Menu cannot be deleted while any MenuItem references it; the
      menu_items.menu_id FK has no ON DELETE action, so the store refuses too
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base


class Menu(Base):
    """Menu row — parent of MenuItem."""
    __tablename__ = "menus"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)

    items: Mapped[list["MenuItem"]] = relationship(
        "MenuItem", back_populates="menu",
    )
