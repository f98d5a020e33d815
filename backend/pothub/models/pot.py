from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from pothub.core.database import Base


class Pot(Base):
    __tablename__ = "pots"
    # Ids are never reused, even after the newest pot is deleted.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<Pot(id={self.id}, name={self.name})>"
