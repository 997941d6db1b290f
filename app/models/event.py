import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Uuid, ForeignKey
from sqlalchemy.orm import relationship
from app.models import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    venue = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    category_id = Column(Uuid, ForeignKey("categories.id"), nullable=False, index=True)
    subcategory_id = Column(Uuid, ForeignKey("subcategories.id"), nullable=False, index=True)
    contact_phone = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc), index=True)

    category = relationship("Category", back_populates="events", lazy="raise")
    subcategory = relationship("Subcategory", back_populates="events", lazy="raise")
