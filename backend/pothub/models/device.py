from sqlalchemy import Column, Integer, String

from pothub.core.database import Base


class Device(Base):
    __tablename__ = "devices"

    id = Column(String, primary_key=True)
    type = Column(String, nullable=False)
    status = Column(String, nullable=False)
    pot_id = Column(Integer, nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Device(id={self.id}, type={self.type}, status={self.status}, pot_id={self.pot_id})>"
