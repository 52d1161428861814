# petsocial/models/province.py
from dataclasses import dataclass
from typing import Any, Dict

from petsocial.models.lifecycle import Lifecycle


@dataclass
class Province:
    """Reference data, Firestore 'provinces' collection."""
    province_id: str
    name: str
    status: Lifecycle = Lifecycle.ACTIVE

    @property
    def enabled(self) -> bool:
        return self.status is Lifecycle.ACTIVE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Province":
        return cls(
            province_id=data['province_id'],
            name=data.get('name') or "",
            status=Lifecycle.parse(data.get('status')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'province_id': self.province_id, 'name': self.name, 'status': self.status.value}
