# petsocial/api/pets/services.py
import logging
import uuid
from typing import Dict, Any, List

from petsocial.core.errors import NotFoundError
from petsocial.core.validation import FieldErrors
from petsocial.models.lifecycle import Lifecycle
from petsocial.models.pet import Pet, PetGender
from petsocial.services.image_service import ImageService

logger = logging.getLogger(__name__)


class PetService:
    """Pets owned by users. Posts reference them by id when tagging."""
    def __init__(self, db, image_service: ImageService):
        self.db = db
        self.image_service = image_service
        self.pets_ref = self.db.collection('pets')

    def _save(self, pet: Pet) -> Pet:
        self.pets_ref.document(pet.pet_id).set(pet.to_dict())
        return pet

    @staticmethod
    def _validate(data: Dict[str, Any], is_new: bool):
        errors = FieldErrors()
        name = data.get('name')
        if is_new:
            errors.required("name", name)
        errors.max_length("name", name, 256)
        errors.max_length("description", data.get('description'), 1024)
        gender = data.get('gender')
        if gender and gender not in {g.value for g in PetGender}:
            errors.add("gender", "Invalid value")
        errors.raise_if_any()

    def find_by_id(self, pet_id: str) -> Pet:
        doc = self.pets_ref.document(pet_id).get()
        pet = Pet.from_dict(doc.to_dict()) if doc.exists else None
        if not pet or not pet.enabled:
            raise NotFoundError("Pet not found.")
        return pet

    def get_pet_by_id_and_owner(self, pet_id: str, user_id: str) -> Pet:
        pet = self.find_by_id(pet_id)
        if pet.user_id != user_id:
            raise NotFoundError("Pet not found.")
        return pet

    def find_by_current_user(self, user_id: str) -> List[Pet]:
        docs = (self.pets_ref
                .where('user_id', '==', user_id)
                .where('status', '==', Lifecycle.ACTIVE.value)
                .stream())
        return sorted((Pet.from_dict(doc.to_dict()) for doc in docs), key=lambda p: p.name.lower())

    def create(self, user_id: str, data: Dict[str, Any]) -> Pet:
        self._validate(data, is_new=True)
        new_pet = Pet(
            pet_id=str(uuid.uuid4()),
            user_id=user_id,
            name=data['name'],
            description=data.get('description') or "",
            gender=PetGender(data['gender']) if data.get('gender') else None,
            birth_date=data.get('birth_date'),
        )
        if data.get('picture'):
            new_pet.picture = self.image_service.create(data['picture']).image_id
        self._save(new_pet)
        logger.info(f"Pet registered (pet_id: {new_pet.pet_id}, user_id: {user_id})")
        return new_pet

    def update(self, user_id: str, pet_id: str, data: Dict[str, Any]) -> Pet:
        pet = self.get_pet_by_id_and_owner(pet_id, user_id)
        self._validate(data, is_new=False)

        if data.get('name'):
            pet.name = data['name']
        if data.get('description'):
            pet.description = data['description']
        if data.get('gender'):
            pet.gender = PetGender(data['gender'])
        if data.get('birth_date'):
            pet.birth_date = data['birth_date']
        if data.get('picture'):
            pet.picture = self.image_service.create(data['picture']).image_id

        logger.info(f"Pet profile updated for {pet_id} with fields: {sorted(k for k, v in data.items() if v)}")
        return self._save(pet)

    def remove(self, user_id: str, pet_id: str) -> Pet:
        pet = self.get_pet_by_id_and_owner(pet_id, user_id)
        pet.status = Lifecycle.DISABLED
        return self._save(pet)

    def to_response(self, pet: Pet) -> Dict[str, Any]:
        """Pet as a response dict, picture id replaced by the image payload."""
        return {
            'id': pet.pet_id,
            'user': pet.user_id,
            'name': pet.name,
            'description': pet.description,
            'gender': pet.gender.value if pet.gender else None,
            'birth_date': pet.birth_date,
            'picture': self.image_service.resolve(pet.picture),
            'enabled': pet.enabled,
        }
