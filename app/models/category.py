import uuid

from app.models import Base
from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship


def name_key(name: str) -> str:
    """Lookup key for names that must be unique regardless of letter case."""
    return name.casefold()


class Category(Base):
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    name_key = Column(String, nullable=False, unique=True)

    subcategories = relationship("Subcategory", back_populates="category", lazy="raise")
    events = relationship("Event", back_populates="category", lazy="raise")
