"""MenuItem ORM — a dish on one menu, with stock level and price."""

from sqlalchemy import ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base


class MenuItem(Base):
    """MenuItem row — always belongs to a Menu (menu_id FK)."""
    __tablename__ = "menu_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    inventory: Mapped[float] = mapped_column(Numeric, nullable=False)
    price: Mapped[float] = mapped_column(Numeric, nullable=False)
    menu_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("menus.id"), nullable=False, index=True,
    )

    menu: Mapped["Menu"] = relationship("Menu", back_populates="items")
