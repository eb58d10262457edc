import enum
from typing import Optional

from pydantic import Field

from marketplace.schemas.base import CamelModel, PartialUpdate, RequestModel


class VehicleType(str, enum.Enum):
    bike = "bike"
    keke = "keke"
    car = "car"
    van = "van"


class Driver(CamelModel):
    id: str
    user_id: str
    full_name: str
    phone_number: str
    vehicle_type: VehicleType
    vehicle_number: str
    vehicle_color: str
    is_available: bool = True
    total_earnings: float = 0.0


class DriverCreate(RequestModel):
    user_id: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=2)
    phone_number: str = Field(..., min_length=10, description="Please enter a valid phone number")
    vehicle_type: VehicleType
    vehicle_number: str = Field(..., min_length=1)
    vehicle_color: str = Field(..., min_length=1)


class DriverUpdate(PartialUpdate):
    NON_NULLABLE = frozenset({
        "full_name", "phone_number", "vehicle_type", "vehicle_number",
        "vehicle_color", "is_available", "total_earnings",
    })

    full_name: Optional[str] = Field(None, min_length=2)
    phone_number: Optional[str] = Field(None, min_length=10)
    vehicle_type: Optional[VehicleType] = None
    vehicle_number: Optional[str] = Field(None, min_length=1)
    vehicle_color: Optional[str] = Field(None, min_length=1)
    is_available: Optional[bool] = None
    total_earnings: Optional[float] = Field(None, ge=0)


class DriverResponse(CamelModel):
    driver: Driver
