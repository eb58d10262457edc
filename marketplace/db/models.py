from sqlalchemy import JSON, Boolean, Column, Float, String

from marketplace.db.database import Base

# Owner references are plain indexed columns: the memory store has no
# referential checks and the SQL store mirrors it.


class User(Base):
    __tablename__ = "users"
    id = Column(String(36), primary_key=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    role = Column(String(20), nullable=False)
    onboarding_complete = Column(Boolean, default=False)


class Vendor(Base):
    __tablename__ = "vendors"
    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), index=True, nullable=False)
    brand_name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    description = Column(String, nullable=True)
    logo_url = Column(String, nullable=True)
    cover_url = Column(String, nullable=True)
    rating = Column(Float, default=0)
    delivery_time = Column(String, default="15-30 min")
    is_popular = Column(Boolean, default=False)


class Product(Base):
    __tablename__ = "products"
    id = Column(String(36), primary_key=True)
    vendor_id = Column(String(36), index=True, nullable=False)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String, nullable=False)
    description = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    in_stock = Column(Boolean, default=True)
    custom_options = Column(JSON, nullable=True)


class Driver(Base):
    __tablename__ = "drivers"
    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), index=True, nullable=False)
    full_name = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)
    vehicle_type = Column(String(10), nullable=False)
    vehicle_number = Column(String, nullable=False)
    vehicle_color = Column(String, nullable=False)
    is_available = Column(Boolean, default=True)
    total_earnings = Column(Float, default=0)


class Order(Base):
    __tablename__ = "orders"
    id = Column(String(36), primary_key=True)
    vendor_id = Column(String(36), index=True, nullable=False)
    driver_id = Column(String(36), index=True, nullable=True)
    customer_name = Column(String, nullable=False)
    customer_address = Column(String, nullable=False)
    items = Column(JSON, nullable=False)
    total_amount = Column(Float, nullable=False)
    status = Column(String(20), default="pending")
