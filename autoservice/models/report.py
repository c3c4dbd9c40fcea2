from sqlalchemy import Column, String, Numeric, Integer, ForeignKey, DateTime, Text, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
from autoservice.database import Base
from autoservice.utils.dates import utcnow

class ServiceReport(Base):
    __tablename__ = "service_reports"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # One report per appointment; the unique index makes report creation insert-if-absent
    appointment_id = Column(UUID(as_uuid=True), ForeignKey("appointments.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    service_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    services_performed = Column(JSON, nullable=False, default=list)  # ordered list of strings

    # Billing
    labor_cost = Column(Numeric(10, 2), nullable=False)
    total_cost = Column(Numeric(10, 2), nullable=False)

    next_service_due = Column(DateTime(timezone=True))
    recommendations = Column(Text)
    mechanic_notes = Column(Text)

    # AI narrative
    ai_generated_report = Column(Text)
    generated_at = Column(DateTime(timezone=True))

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)

    # Relationships
    appointment = relationship("Appointment", back_populates="report", lazy="selectin")
    parts_replaced = relationship(
        "ReportPart",
        back_populates="report",
        order_by="ReportPart.position",
        cascade="all, delete-orphan",
        lazy="selectin"
    )

class ReportPart(Base):
    __tablename__ = "report_parts"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    report_id = Column(UUID(as_uuid=True), ForeignKey("service_reports.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    name = Column(String(200), nullable=False)
    cost = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    # Relationships
    report = relationship("ServiceReport", back_populates="parts_replaced")
