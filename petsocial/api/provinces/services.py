# petsocial/api/provinces/services.py
import logging
import uuid
from typing import List, Optional

from petsocial.core.errors import NotFoundError
from petsocial.core.validation import FieldErrors
from petsocial.models.lifecycle import Lifecycle
from petsocial.models.province import Province

logger = logging.getLogger(__name__)


class ProvinceService:
    """Province reference data. Read by profiles, managed by admins."""

    def __init__(self, db):
        self.db = db
        self.provinces_ref = self.db.collection('provinces')

    def list(self) -> List[Province]:
        docs = self.provinces_ref.where('status', '==', Lifecycle.ACTIVE.value).stream()
        provinces = [Province.from_dict(doc.to_dict()) for doc in docs]
        return sorted(provinces, key=lambda p: p.name.lower())

    def read(self, province_id: str) -> Optional[Province]:
        """Enabled province or None. Callers decide whether absence is an error."""
        if not province_id:
            return None
        doc = self.provinces_ref.document(province_id).get()
        if not doc.exists:
            return None
        province = Province.from_dict(doc.to_dict())
        return province if province.enabled else None

    def find_by_id(self, province_id: str) -> Province:
        province = self.read(province_id)
        if not province:
            raise NotFoundError("Province not found.")
        return province

    def create(self, name: Optional[str]) -> Province:
        self._validate(name)
        province = Province(province_id=str(uuid.uuid4()), name=name)
        self.provinces_ref.document(province.province_id).set(province.to_dict())
        logger.info(f"Province created (province_id: {province.province_id}, name: {name})")
        return province

    def update(self, province_id: str, name: Optional[str]) -> Province:
        province = self.find_by_id(province_id)
        self._validate(name)
        province.name = name
        self.provinces_ref.document(province_id).set(province.to_dict())
        return province

    def disable(self, province_id: str) -> Province:
        province = self.find_by_id(province_id)
        province.status = Lifecycle.DISABLED
        self.provinces_ref.document(province_id).set(province.to_dict())
        logger.info(f"Province disabled (province_id: {province_id})")
        return province

    @staticmethod
    def _validate(name: Optional[str]):
        errors = FieldErrors()
        if errors.required("name", name):
            errors.max_length("name", name, 256)
        errors.raise_if_any()
