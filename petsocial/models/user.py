# petsocial/models/user.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from petsocial.models.lifecycle import Lifecycle
from petsocial.utils.datetime_utils import DateTimeUtils


@dataclass
class User:
    """
    Document structure of the Firestore 'users' collection.
    """
    user_id: str
    login: str
    name: str
    password: str  # argon2 hash, never the plain text
    permissions: List[str] = field(default_factory=list)
    following: List[str] = field(default_factory=list)
    status: Lifecycle = Lifecycle.ACTIVE
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @property
    def enabled(self) -> bool:
        return self.status is Lifecycle.ACTIVE

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    def grant(self, permissions: List[str]):
        for permission in permissions:
            if permission not in self.permissions:
                self.permissions.append(permission)

    def revoke(self, permissions: List[str]):
        self.permissions = [p for p in self.permissions if p not in permissions]

    def is_following(self, user_id: str) -> bool:
        return user_id in self.following

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            user_id=data['user_id'],
            login=data.get('login', ''),
            name=data.get('name', ''),
            password=data.get('password', ''),
            permissions=list(data.get('permissions') or []),
            following=list(data.get('following') or []),
            status=Lifecycle.parse(data.get('status')),
            created_at=DateTimeUtils.from_firestore(data.get('created_at')) or DateTimeUtils.now(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return DateTimeUtils.for_firestore({
            'user_id': self.user_id,
            'login': self.login,
            'name': self.name,
            'password': self.password,
            'permissions': list(self.permissions),
            'following': list(self.following),
            'status': self.status.value,
            'created_at': self.created_at,
        })
