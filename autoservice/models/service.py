from sqlalchemy import Column, String, Numeric, Integer, Text, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
import uuid
import enum
from autoservice.database import Base

class ServiceCategory(str, enum.Enum):
    MAINTENANCE = "maintenance"
    REPAIR = "repair"
    WASH = "wash"
    INSPECTION = "inspection"

class ServiceVehicleType(str, enum.Enum):
    CAR = "car"
    MOTORBIKE = "motorbike"
    BOTH = "both"

class Service(Base):
    """Catalog entry. Rows are created by seeding only."""
    __tablename__ = "services"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    base_price = Column(Numeric(10, 2), nullable=False)
    estimated_duration_minutes = Column(Integer, nullable=False)
    category = Column(SQLEnum(ServiceCategory), nullable=False, index=True)
    vehicle_type = Column(SQLEnum(ServiceVehicleType), nullable=False)
