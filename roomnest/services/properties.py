"""
Property listings owned by a single user
"""
import logging
from sqlalchemy.orm import Session
from roomnest.core.errors import (
    AlreadyDeleted,
    Forbidden,
    MissingFields,
    NotDeleted,
    PropertyNotFound,
    ValidationError,
)
from roomnest.models import Property, User
from roomnest.schemas import PropertyCreate, PropertyPatch
from roomnest.utils.datetime_utils import utcnow

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "type", "address", "city", "price_per_month", "available_beds")


class PropertyService:
    def __init__(self, db: Session):
        self.db = db

    def list_properties(self) -> list[Property]:
        return self.db.query(Property).filter(
            Property.is_deleted == False  # noqa: E712
        ).order_by(Property.created_at.desc(), Property.id.desc()).all()

    def get_property(self, property_id: int) -> Property:
        prop = self.db.query(Property).filter(Property.id == property_id).first()
        if not prop or prop.is_deleted:
            raise PropertyNotFound()
        return prop

    def _owned(self, actor: User, property_id: int, action: str) -> Property:
        prop = self.db.query(Property).filter(Property.id == property_id).first()
        if not prop:
            raise PropertyNotFound()
        if prop.owner_id != actor.id:
            raise Forbidden(f"You are not authorized to {action} this property")
        return prop

    def create_property(self, owner: User, data: PropertyCreate) -> Property:
        missing = [name for name in REQUIRED_FIELDS if getattr(data, name) is None]
        if missing:
            raise MissingFields(errors=[f"{name} is required" for name in missing])

        prop = Property(
            owner_id=owner.id,
            title=data.title,
            type=data.type,
            gender=data.gender or "Any",
            address=data.address,
            city=data.city,
            price_per_month=data.price_per_month,
            deposit=data.deposit or 0,
            amenities=data.amenities or [],
            images=data.images or [],
            available_beds=data.available_beds,
            description=data.description or "",
            is_deleted=False,
            created_at=utcnow(),
        )
        self.db.add(prop)
        self.db.commit()
        self.db.refresh(prop)

        logger.info("[PROPERTY] Owner %s created property %s", owner.id, prop.id)
        return prop

    def update_property(self, actor: User, property_id: int, patch: PropertyPatch) -> Property:
        """
        Apply only the fields present in ``patch``
        """
        prop = self._owned(actor, property_id, "update")

        changes = patch.model_dump(exclude_unset=True)
        cleared = [name for name in REQUIRED_FIELDS + ("gender",) if name in changes and changes[name] is None]
        if cleared:
            raise ValidationError(errors=[f"{name} cannot be null" for name in cleared])

        for name, value in changes.items():
            if value is None and name in ("amenities", "images"):
                value = []
            elif value is None and name == "deposit":
                value = 0
            setattr(prop, name, value)

        self.db.commit()
        self.db.refresh(prop)
        return prop

    def delete_property(self, actor: User, property_id: int) -> Property:
        prop = self._owned(actor, property_id, "delete")
        if prop.is_deleted:
            raise AlreadyDeleted()

        prop.is_deleted = True
        prop.deleted_at = utcnow()
        self.db.commit()
        self.db.refresh(prop)

        logger.info("[PROPERTY] Property %s soft-deleted by owner %s", prop.id, actor.id)
        return prop

    def restore_property(self, actor: User, property_id: int) -> Property:
        prop = self._owned(actor, property_id, "restore")
        if not prop.is_deleted:
            raise NotDeleted()

        prop.is_deleted = False
        prop.deleted_at = None
        self.db.commit()
        self.db.refresh(prop)
        return prop
