"""
SQLAlchemy-backed entity store. Rows are converted to the same pydantic
entities the memory store hands out, so the API cannot tell them apart.
"""
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from marketplace.db import models
from marketplace.db.database import Base, build_engine, build_session_factory
from marketplace.schemas import Driver, Order, Product, User, Vendor
from marketplace.storage.base import EntityT, Storage, build_entity, merge_entity


class SqlStorage(Storage):

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        if engine is None:
            if database_url is None:
                raise ValueError("SqlStorage needs a database_url or an engine")
            engine = build_engine(database_url)
        self.engine = engine
        self.SessionLocal = build_session_factory(engine)
        Base.metadata.create_all(bind=engine)

    def close(self) -> None:
        self.engine.dispose()

    # --- generic helpers ---

    def _get(self, row_model, entity_model: Type[EntityT], entity_id: str) -> Optional[EntityT]:
        with self.SessionLocal() as db:
            row = db.get(row_model, entity_id)
            return entity_model.model_validate(row) if row is not None else None

    def _find(self, entity_model: Type[EntityT], stmt) -> List[EntityT]:
        with self.SessionLocal() as db:
            return [entity_model.model_validate(row) for row in db.scalars(stmt).all()]

    def _create(self, row_model, entity_model: Type[EntityT], data: Dict[str, Any]) -> EntityT:
        entity = build_entity(entity_model, data)
        with self.SessionLocal() as db:
            db.add(row_model(**entity.model_dump(mode="json")))
            db.commit()
        return entity

    def _update(self, row_model, entity_model: Type[EntityT], entity_id: str,
                updates: Dict[str, Any]) -> Optional[EntityT]:
        with self.SessionLocal() as db:
            row = db.get(row_model, entity_id)
            if row is None:
                return None
            updated = merge_entity(entity_model.model_validate(row), updates)
            for key, value in updated.model_dump(mode="json").items():
                setattr(row, key, value)
            db.commit()
            return updated

    def _delete(self, row_model, entity_id: str) -> bool:
        with self.SessionLocal() as db:
            row = db.get(row_model, entity_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

    # --- users ---

    def get_user(self, user_id: str) -> Optional[User]:
        return self._get(models.User, User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        found = self._find(User, select(models.User).where(models.User.email == email))
        return found[0] if found else None

    def create_user(self, data: Dict[str, Any]) -> User:
        return self._create(models.User, User, data)

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Optional[User]:
        return self._update(models.User, User, user_id, updates)

    def count_users(self) -> int:
        with self.SessionLocal() as db:
            return db.scalar(select(func.count()).select_from(models.User))

    # --- vendors ---

    def get_vendor(self, vendor_id: str) -> Optional[Vendor]:
        return self._get(models.Vendor, Vendor, vendor_id)

    def get_vendor_by_user_id(self, user_id: str) -> Optional[Vendor]:
        found = self._find(Vendor, select(models.Vendor).where(models.Vendor.user_id == user_id))
        return found[0] if found else None

    def create_vendor(self, data: Dict[str, Any]) -> Vendor:
        return self._create(models.Vendor, Vendor, data)

    def update_vendor(self, vendor_id: str, updates: Dict[str, Any]) -> Optional[Vendor]:
        return self._update(models.Vendor, Vendor, vendor_id, updates)

    # --- products ---

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._get(models.Product, Product, product_id)

    def get_products_by_vendor(self, vendor_id: str) -> List[Product]:
        return self._find(Product, select(models.Product).where(models.Product.vendor_id == vendor_id))

    def create_product(self, data: Dict[str, Any]) -> Product:
        return self._create(models.Product, Product, data)

    def update_product(self, product_id: str, updates: Dict[str, Any]) -> Optional[Product]:
        return self._update(models.Product, Product, product_id, updates)

    def delete_product(self, product_id: str) -> bool:
        return self._delete(models.Product, product_id)

    # --- drivers ---

    def get_driver(self, driver_id: str) -> Optional[Driver]:
        return self._get(models.Driver, Driver, driver_id)

    def get_driver_by_user_id(self, user_id: str) -> Optional[Driver]:
        found = self._find(Driver, select(models.Driver).where(models.Driver.user_id == user_id))
        return found[0] if found else None

    def create_driver(self, data: Dict[str, Any]) -> Driver:
        return self._create(models.Driver, Driver, data)

    def update_driver(self, driver_id: str, updates: Dict[str, Any]) -> Optional[Driver]:
        return self._update(models.Driver, Driver, driver_id, updates)

    # --- orders ---

    def get_order(self, order_id: str) -> Optional[Order]:
        return self._get(models.Order, Order, order_id)

    def get_orders_by_vendor(self, vendor_id: str) -> List[Order]:
        return self._find(Order, select(models.Order).where(models.Order.vendor_id == vendor_id))

    def get_orders_by_driver(self, driver_id: str) -> List[Order]:
        return self._find(Order, select(models.Order).where(models.Order.driver_id == driver_id))

    def create_order(self, data: Dict[str, Any]) -> Order:
        return self._create(models.Order, Order, data)

    def update_order(self, order_id: str, updates: Dict[str, Any]) -> Optional[Order]:
        return self._update(models.Order, Order, order_id, updates)

    def delete_order(self, order_id: str) -> bool:
        return self._delete(models.Order, order_id)
