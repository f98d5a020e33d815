from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from pothub.core.database import Base


class AuditLog(Base):
    __tablename__ = "audit_log"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    sensor_id = Column(String, nullable=False, default="")
    # Pot actions are recorded here too, keyed by the pot id as a string.
    device_id = Column(String, nullable=False, default="")
    action = Column(String, nullable=False)

    def __repr__(self):
        return f"<AuditLog(sensor={self.sensor_id}, device={self.device_id}, action={self.action})>"
