from sqlalchemy import Column, Float, Integer, String

from pothub.core.database import Base


class Sensor(Base):
    __tablename__ = "sensors"

    id = Column(String, primary_key=True)
    type = Column(String, nullable=False)
    value = Column(Float, nullable=False)
    status = Column(String, nullable=False)
    # Soft reference to pots.id; pot deletion leaves it in place.
    pot_id = Column(Integer, nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Sensor(id={self.id}, type={self.type}, value={self.value}, pot_id={self.pot_id})>"
