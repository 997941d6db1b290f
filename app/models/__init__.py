from sqlalchemy.orm import declarative_base

Base = declarative_base()

from app.models.category import Category  # noqa: E402,F401
from app.models.subcategory import Subcategory  # noqa: E402,F401
from app.models.event import Event  # noqa: E402,F401
