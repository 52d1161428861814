# petsocial/api/auth/services.py
import uuid
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from petsocial.api.profiles.services import ProfileService
from petsocial.api.users.services import UserService
from petsocial.core.config import Settings
from petsocial.core.errors import AuthenticationError, NotFoundError
from petsocial.core.security import hash_password, verify_password
from petsocial.core.validation import FieldErrors
from petsocial.models.user import User
from petsocial.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)

PASSWORD_MIN = 5
PASSWORD_MAX = 256


class AuthService:
    """Registration, credential checks and the revoked-token list."""

    def __init__(self, db, user_service: UserService, profile_service: ProfileService,
                 settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or Settings()
        self.user_service = user_service
        self.profile_service = profile_service
        self.users_ref = self.db.collection('users')
        self.revoked_tokens_ref = self.db.collection('revoked_tokens')

    # --- registration / sign in ---
    def register(self, data: Dict[str, Any]) -> str:
        """Creates the user with the default permissions plus its paired profile. Returns the user id."""
        name, login, password = data.get('name'), data.get('login'), data.get('password')

        errors = FieldErrors()
        if errors.required("name", name):
            errors.max_length("name", name, 1024)
        errors.length("password", password, PASSWORD_MIN, PASSWORD_MAX)
        if errors.required("login", login) and errors.max_length("login", login, 256):
            if self.user_service.find_by_login(login):
                errors.add("login", "Already registered.")
        errors.raise_if_any()

        user = User(
            user_id=str(uuid.uuid4()),
            login=login,
            name=name,
            password=hash_password(password),
            permissions=list(self.settings.default_permissions),
        )
        self.users_ref.document(user.user_id).set(user.to_dict())
        self.profile_service.create_for_user(user.user_id, name)

        logger.info(f"User registered (user_id: {user.user_id}, login: {login})")
        return user.user_id

    def login(self, data: Dict[str, Any]) -> str:
        login, password = data.get('login'), data.get('password')

        errors = FieldErrors()
        errors.required("password", password)
        errors.required("login", login)
        errors.raise_if_any()

        user = self.user_service.find_by_login(login)
        if not user or not user.enabled:
            logger.warning(f"Sign in rejected, user not found (login: {login})")
            raise AuthenticationError("Invalid login or password.")
        if not verify_password(password, user.password):
            logger.warning(f"Sign in rejected, bad password (user_id: {user.user_id})")
            raise AuthenticationError("Invalid login or password.")

        return user.user_id

    def change_password(self, user_id: str, data: Dict[str, Any]):
        current_password, new_password = data.get('current_password'), data.get('new_password')

        errors = FieldErrors()
        errors.length("current_password", current_password, PASSWORD_MIN, PASSWORD_MAX)
        errors.length("new_password", new_password, PASSWORD_MIN, PASSWORD_MAX)
        errors.raise_if_any()

        user = self.user_service.find_by_id(user_id)
        if not user.enabled:
            raise NotFoundError("User not found.")

        if not verify_password(current_password, user.password):
            raise AuthenticationError("The current password is incorrect.")

        user.password = hash_password(new_password)
        self.users_ref.document(user_id).set(user.to_dict())
        logger.info(f"Password changed (user_id: {user_id})")

    # --- blocklist ---
    def add_token_to_blocklist(self, jti: str, expires: datetime):
        token_data = {
            'revoked_at': DateTimeUtils.now(),
            'expires_at': expires
        }
        self.revoked_tokens_ref.document(jti).set(DateTimeUtils.for_firestore(token_data))

    def is_token_revoked(self, jwt_payload: dict) -> bool:
        jti = jwt_payload.get('jti')
        if not jti:
            return False
        return self.revoked_tokens_ref.document(jti).get().exists

    def logout(self, jwt_payload: dict):
        expires = datetime.fromtimestamp(jwt_payload['exp'], tz=timezone.utc) if jwt_payload.get('exp') else DateTimeUtils.now()
        self.add_token_to_blocklist(jwt_payload['jti'], expires)
        logger.info(f"User signed out (user_id: {jwt_payload.get('sub')}, jti: {jwt_payload['jti'][:8]}...)")
