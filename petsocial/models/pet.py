# petsocial/models/pet.py
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Dict, Any
from enum import Enum
import logging

from petsocial.models.lifecycle import Lifecycle
from petsocial.utils.datetime_utils import DateTimeUtils


class PetGender(Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


@dataclass
class Pet:
    """
    Firestore 'pets' collection document. Owned by one user and optionally
    tagged on that user's posts.
    """
    pet_id: str
    user_id: str
    name: str
    description: str = ""
    gender: Optional[PetGender] = None
    birth_date: Optional[date] = None
    picture: Optional[str] = None
    status: Lifecycle = Lifecycle.ACTIVE

    @property
    def enabled(self) -> bool:
        return self.status is Lifecycle.ACTIVE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pet":
        """
        Builds a Pet from a Firestore dict: gender strings become PetGender and
        stored timestamps become plain dates.
        """
        processed = data.copy()

        gender_str = processed.get('gender')
        if gender_str and isinstance(gender_str, str):
            try:
                processed['gender'] = PetGender(gender_str)
            except ValueError:
                logging.warning(f"Invalid PetGender value '{gender_str}' for pet {processed.get('pet_id')}.")
                processed['gender'] = None

        birth_date = processed.get('birth_date')
        if isinstance(birth_date, datetime):
            processed['birth_date'] = birth_date.date()
        elif isinstance(birth_date, str):
            try:
                processed['birth_date'] = DateTimeUtils.parse_date_string(birth_date)
            except ValueError:
                processed['birth_date'] = None

        processed['status'] = Lifecycle.parse(processed.get('status'))
        processed['description'] = processed.get('description') or ""
        known = {k: v for k, v in processed.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        return DateTimeUtils.for_firestore({
            'pet_id': self.pet_id,
            'user_id': self.user_id,
            'name': self.name,
            'description': self.description,
            'gender': self.gender.value if self.gender else None,
            'birth_date': self.birth_date,
            'picture': self.picture,
            'status': self.status.value,
        })
