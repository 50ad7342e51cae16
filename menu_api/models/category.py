from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from menu_api.models.base import Base, TimestampModel, UUIDModel


class Category(UUIDModel, Base, TimestampModel):
    __tablename__ = "category"

    name: Mapped[str] = mapped_column(String(255), unique=True)

    # Deleting a category removes its items in CategoryService, not through the ORM
    items = relationship("Menu", back_populates="category")
