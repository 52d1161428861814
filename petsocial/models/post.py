# petsocial/models/post.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from petsocial.models.lifecycle import Lifecycle
from petsocial.utils.datetime_utils import DateTimeUtils


@dataclass
class Post:
    """
    Document structure of the Firestore 'posts' collection.

    ``like_count`` is denormalized from ``likes``; both only change through
    ``like``/``unlike`` so they always agree.
    """
    post_id: str
    user_id: str
    title: str
    description: str = ""
    picture: Optional[str] = None
    likes: List[str] = field(default_factory=list)
    like_count: int = 0
    pets: List[str] = field(default_factory=list)
    status: Lifecycle = Lifecycle.ACTIVE
    created_at: datetime = field(default_factory=DateTimeUtils.now)
    updated_at: datetime = field(default_factory=DateTimeUtils.now)

    @property
    def enabled(self) -> bool:
        return self.status is Lifecycle.ACTIVE

    def is_liked_by(self, user_id: str) -> bool:
        return user_id in self.likes

    def like(self, user_id: str):
        if user_id not in self.likes:
            self.likes.append(user_id)
            self.like_count = len(self.likes)
        self.touch()

    def unlike(self, user_id: str):
        if user_id in self.likes:
            self.likes.remove(user_id)
            self.like_count = len(self.likes)
        self.touch()

    def touch(self):
        self.updated_at = DateTimeUtils.now()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        likes = list(data.get('likes') or [])
        return cls(
            post_id=data['post_id'],
            user_id=data['user_id'],
            title=data.get('title') or "",
            description=data.get('description') or "",
            picture=data.get('picture'),
            likes=likes,
            like_count=int(data.get('like_count', len(likes))),
            pets=list(data.get('pets') or []),
            status=Lifecycle.parse(data.get('status')),
            created_at=DateTimeUtils.from_firestore(data.get('created_at')) or DateTimeUtils.now(),
            updated_at=DateTimeUtils.from_firestore(data.get('updated_at')) or DateTimeUtils.now(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return DateTimeUtils.for_firestore({
            'post_id': self.post_id,
            'user_id': self.user_id,
            'title': self.title,
            'description': self.description,
            'picture': self.picture,
            'likes': list(self.likes),
            'like_count': self.like_count,
            'pets': list(self.pets),
            'status': self.status.value,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        })
