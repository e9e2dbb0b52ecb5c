"""Model module imports for SQLAlchemy metadata registration."""

from app.db.models.contact import Base
from app.db.models.contact import Contact

__all__ = [
    "Base",
    "Contact",
]
