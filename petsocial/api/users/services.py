# petsocial/api/users/services.py
import logging
from typing import List, Optional

from petsocial.core.config import Settings
from petsocial.core.errors import AuthorizationError, DomainRuleError, NotFoundError, ValidationError
from petsocial.models.lifecycle import Lifecycle
from petsocial.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """
    User administration (permissions, enable/disable) and the follow graph.

    Every mutation reads the user document, changes it in memory and writes
    the whole document back.
    """

    def __init__(self, db, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or Settings()
        self.users_ref = self.db.collection('users')

    # --- lookups ---
    def _get(self, user_id: str, only_enabled: bool = False) -> Optional[User]:
        if not user_id:
            return None
        doc = self.users_ref.document(user_id).get()
        if not doc.exists:
            return None
        user = User.from_dict(doc.to_dict())
        if only_enabled and not user.enabled:
            return None
        return user

    def _save(self, user: User) -> User:
        self.users_ref.document(user.user_id).set(user.to_dict())
        return user

    def find_by_id(self, user_id: str) -> User:
        user = self._get(user_id)
        if not user:
            raise NotFoundError("User not found.")
        return user

    def find_all(self) -> List[User]:
        users = [User.from_dict(doc.to_dict()) for doc in self.users_ref.stream() if doc.exists]
        return sorted(users, key=lambda u: u.created_at)

    def find_by_login(self, login: str) -> Optional[User]:
        for doc in self.users_ref.where('login', '==', login).stream():
            return User.from_dict(doc.to_dict())
        return None

    # --- authorization ---
    def has_permission(self, user_id: str, permission: str) -> User:
        """Raises unless ``user_id`` is an enabled user holding ``permission``."""
        user = self._get(user_id, only_enabled=True)
        if not user:
            raise NotFoundError("User not found.")
        if not user.has_permission(permission):
            raise AuthorizationError("Insufficient permissions.")
        return user

    def require_admin(self, user_id: str) -> User:
        return self.has_permission(user_id, self.settings.admin_permission)

    # --- administration ---
    def grant(self, user_id: str, permissions) -> User:
        permissions = self._validate_permissions(permissions)
        user = self.find_by_id(user_id)
        user.grant(permissions)
        logger.info(f"Permissions granted (user_id: {user_id}, permissions: {permissions})")
        return self._save(user)

    def revoke(self, user_id: str, permissions) -> User:
        permissions = self._validate_permissions(permissions)
        user = self.find_by_id(user_id)
        user.revoke(permissions)
        logger.info(f"Permissions revoked (user_id: {user_id}, permissions: {permissions})")
        return self._save(user)

    def enable(self, user_id: str) -> User:
        user = self.find_by_id(user_id)
        user.status = Lifecycle.ACTIVE
        logger.info(f"User enabled (user_id: {user_id})")
        return self._save(user)

    def disable(self, user_id: str) -> User:
        user = self.find_by_id(user_id)
        user.status = Lifecycle.DISABLED
        logger.info(f"User disabled (user_id: {user_id})")
        return self._save(user)

    @staticmethod
    def _validate_permissions(permissions) -> List[str]:
        if (not isinstance(permissions, list) or not permissions
                or not all(isinstance(p, str) and p for p in permissions)):
            raise ValidationError.single("permissions", "Invalid value")
        return permissions

    # --- follow graph ---
    def follow(self, user_id: str, target_id: str) -> User:
        """
        Adds ``target_id`` to the caller's following list.
        Following someone already followed is rejected, not ignored.
        Returns the followed user.
        """
        me = self.find_by_id(user_id)
        target = self.find_by_id(target_id)

        if me.is_following(target.user_id):
            raise DomainRuleError("You already follow this user.", fail_at="user-follow")

        me.following.append(target.user_id)
        self._save(me)
        logger.info(f"User {user_id} now follows {target_id}")
        return target

    def unfollow(self, user_id: str, target_id: str) -> User:
        me = self.find_by_id(user_id)
        target = self.find_by_id(target_id)

        if not me.is_following(target.user_id):
            raise DomainRuleError("You do not follow this user, so you cannot unfollow it.", fail_at="user-follow")

        me.following.remove(target.user_id)
        self._save(me)
        logger.info(f"User {user_id} unfollowed {target_id}")
        return target

    def get_following(self, user_id: str) -> List[str]:
        return list(self.find_by_id(user_id).following)
