# petsocial/models/profile.py
from dataclasses import dataclass
from typing import Any, Dict, Optional

from petsocial.models.lifecycle import Lifecycle


@dataclass
class Profile:
    """
    Document structure of the Firestore 'profiles' collection.
    Paired with a User through ``user_id``; the profile id usually equals the
    user id but lookups always go through ``user_id``.
    """
    profile_id: Optional[str] = None
    user_id: Optional[str] = None
    name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    province_id: Optional[str] = None
    picture: Optional[str] = None  # image id, replaced by image data when resolved for a response
    status: Lifecycle = Lifecycle.ACTIVE

    @property
    def enabled(self) -> bool:
        return self.status is Lifecycle.ACTIVE

    @classmethod
    def empty(cls) -> "Profile":
        """Zero-value profile returned when a user has none yet."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        return cls(
            profile_id=data.get('profile_id'),
            user_id=data.get('user_id'),
            name=data.get('name') or "",
            phone=data.get('phone') or "",
            email=data.get('email') or "",
            address=data.get('address') or "",
            province_id=data.get('province_id'),
            picture=data.get('picture'),
            status=Lifecycle.parse(data.get('status')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'profile_id': self.profile_id,
            'user_id': self.user_id,
            'name': self.name,
            'phone': self.phone,
            'email': self.email,
            'address': self.address,
            'province_id': self.province_id,
            'picture': self.picture,
            'status': self.status.value,
        }
