# petsocial/api/profiles/services.py
import logging
from typing import Any, Dict, Iterable, List, Optional

from petsocial.api.provinces.services import ProvinceService
from petsocial.core.config import Settings
from petsocial.core.errors import NotFoundError
from petsocial.core.validation import FieldErrors
from petsocial.models.lifecycle import Lifecycle
from petsocial.models.profile import Profile
from petsocial.models.user import User
from petsocial.services.image_service import ImageService

logger = logging.getLogger(__name__)


def _chunks(values: List[str], size: int) -> Iterable[List[str]]:
    for start in range(0, len(values), size):
        yield values[start:start + size]


class ProfileService:
    """
    User profiles. A profile is paired to its user through ``user_id`` and is
    created either at registration or on the first update.
    """

    def __init__(self, db, province_service: ProvinceService, image_service: ImageService,
                 settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or Settings()
        self.province_service = province_service
        self.image_service = image_service
        self.profiles_ref = self.db.collection('profiles')
        self.users_ref = self.db.collection('users')

    def _save(self, profile: Profile) -> Profile:
        self.profiles_ref.document(profile.profile_id).set(profile.to_dict())
        return profile

    def _resolve_picture(self, profile: Profile) -> Profile:
        profile.picture = self.image_service.resolve(profile.picture, self.settings.default_profile_image)
        return profile

    # --- reads ---
    def find_for_user(self, user_id: str) -> Optional[Profile]:
        if not user_id:
            return None
        query = (self.profiles_ref
                 .where('user_id', '==', user_id)
                 .where('status', '==', Lifecycle.ACTIVE.value)
                 .limit(1)
                 .stream())
        doc = next(iter(query), None)
        return Profile.from_dict(doc.to_dict()) if doc else None

    def read(self, user_id: str) -> Profile:
        """Never fails for a missing profile; callers get an empty one instead."""
        return self.find_for_user(user_id) or Profile.empty()

    def find_profile_by_id(self, profile_id: str) -> Profile:
        doc = self.profiles_ref.document(profile_id).get()
        profile = Profile.from_dict(doc.to_dict()) if doc.exists else None
        if not profile or not profile.enabled:
            raise NotFoundError("Profile not found.")
        return profile

    def find_profile_by_query_name(self, query: str, exclude_user_id: Optional[str]) -> List[Profile]:
        """
        Case-insensitive substring search over profile names and user names.
        Firestore has no substring filter, so matching happens here after a
        status-filtered read.
        """
        needle = (query or "").strip().lower()

        active_users = self.users_ref.where('status', '==', Lifecycle.ACTIVE.value).stream()
        matching_user_ids = {
            user.user_id
            for user in (User.from_dict(doc.to_dict()) for doc in active_users)
            if needle in user.name.lower()
        }

        profiles = []
        for doc in self.profiles_ref.where('status', '==', Lifecycle.ACTIVE.value).stream():
            profile = Profile.from_dict(doc.to_dict())
            if profile.user_id == exclude_user_id:
                continue
            if needle in profile.name.lower() or profile.user_id in matching_user_ids:
                profiles.append(self._resolve_picture(profile))

        logger.info(f"Profile search '{query}' -> {len(profiles)} results")
        return sorted(profiles, key=lambda p: p.name.lower())

    def find_for_users(self, user_ids: List[str]) -> List[Profile]:
        """Enabled profiles of the given users, with pictures resolved."""
        profiles = []
        for chunk in _chunks(list(user_ids), self.settings.query_in_limit):
            docs = (self.profiles_ref
                    .where('user_id', 'in', chunk)
                    .where('status', '==', Lifecycle.ACTIVE.value)
                    .stream())
            profiles.extend(self._resolve_picture(Profile.from_dict(doc.to_dict())) for doc in docs)
        return profiles

    def see_profile(self, user_id: str) -> Profile:
        """Public view of somebody's profile with the picture payload in place of its id."""
        return self._resolve_picture(self.read(user_id))

    # --- writes ---
    def create_for_user(self, user_id: str, name: str) -> Profile:
        return self._save(Profile(profile_id=user_id, user_id=user_id, name=name))

    def update_basic_info(self, user_id: str, data: Dict[str, Any]) -> Profile:
        profile = self.find_for_user(user_id)
        is_new = profile is None

        name = data.get('name')
        phone = data.get('phone')
        email = data.get('email')
        address = data.get('address')
        province_id = data.get('province')

        errors = FieldErrors()
        if is_new:
            errors.required("email", email)
        errors.max_length("email", email, 256)
        if is_new:
            errors.required("name", name)
        errors.max_length("name", name, 1024)
        errors.max_length("address", address, 1024)
        errors.max_length("phone", phone, 32)

        province = None
        if province_id:
            province = self.province_service.read(province_id)
            if not province:
                errors.add("province", "Not found.")
        errors.raise_if_any()

        if is_new:
            profile = Profile(profile_id=user_id, user_id=user_id)

        if email:
            profile.email = email
        if name:
            profile.name = name
        if address:
            profile.address = address
        if phone:
            profile.phone = phone
        profile.province_id = province.province_id if province else None

        logger.info(f"Profile {'created' if is_new else 'updated'} (user_id: {user_id})")
        return self._save(profile)

    def update_profile_picture(self, user_id: str, image: Optional[str]) -> Profile:
        errors = FieldErrors()
        if not image or not isinstance(image, str):
            errors.add("image", "Invalid image.")
        errors.raise_if_any()

        profile = self.find_for_user(user_id)
        if not profile:
            profile = Profile(profile_id=user_id, user_id=user_id)

        profile.picture = self.image_service.create(image).image_id
        return self._save(profile)
