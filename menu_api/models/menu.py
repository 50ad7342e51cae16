from decimal import Decimal
from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from menu_api.models.base import Base, TimestampModel, UUIDModel


class Menu(UUIDModel, Base, TimestampModel):
    __tablename__ = "menu"

    title: Mapped[str] = mapped_column(String(32))
    text: Mapped[str] = mapped_column(Text)
    price: Mapped[Decimal]
    ingredients: Mapped[str] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(Text)
    category_id: Mapped[UUID] = mapped_column(ForeignKey("category.id"), index=True)

    category = relationship("Category", back_populates="items")

    __table_args__ = (Index("menu_created_at_id_idx", "created_at", "id"),)
