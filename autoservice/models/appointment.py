from sqlalchemy import Column, String, Numeric, Boolean, ForeignKey, DateTime, Text, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum
from autoservice.database import Base
from autoservice.utils.dates import utcnow

class VehicleType(str, enum.Enum):
    CAR = "car"
    MOTORBIKE = "motorbike"

class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    service_id = Column(UUID(as_uuid=True), ForeignKey("services.id"), nullable=False)

    # Vehicle details
    vehicle_type = Column(SQLEnum(VehicleType), nullable=False)
    vehicle_model = Column(String(100), nullable=False)
    vehicle_plate = Column(String(20), nullable=False)

    # Scheduling
    scheduled_date = Column(DateTime(timezone=True), nullable=False, index=True)
    pickup_required = Column(Boolean, nullable=False, default=False)
    pickup_address = Column(Text)
    dropoff_required = Column(Boolean, nullable=False, default=False)
    dropoff_address = Column(Text)

    status = Column(SQLEnum(AppointmentStatus), nullable=False, default=AppointmentStatus.SCHEDULED, index=True)
    notes = Column(Text)

    # Fixed at booking time from the service's base price
    total_price = Column(Numeric(10, 2), nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)

    # Relationships
    user = relationship("User", back_populates="appointments")
    service = relationship("Service", lazy="selectin")
    report = relationship("ServiceReport", back_populates="appointment", uselist=False)
