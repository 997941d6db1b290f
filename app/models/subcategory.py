import uuid

from app.models import Base
from sqlalchemy import Column, String, Uuid, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

class Subcategory(Base):
    __tablename__ = "subcategories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    name_key = Column(String, nullable=False)
    category_id = Column(Uuid, ForeignKey("categories.id"), nullable=False, index=True)

    category = relationship("Category", back_populates="subcategories", lazy="raise")
    events = relationship("Event", back_populates="subcategory", lazy="raise")

    __table_args__ = (
        UniqueConstraint('category_id', 'name_key', name='uq_subcategory_category_name_key'),
    )
