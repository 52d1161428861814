# petsocial/models/image.py
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Image:
    """Opaque base64 payload, Firestore 'images' collection."""
    image_id: str
    image: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Image":
        return cls(image_id=data['image_id'], image=data.get('image') or "")

    def to_dict(self) -> Dict[str, Any]:
        return {'image_id': self.image_id, 'image': self.image}
