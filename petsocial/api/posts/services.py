# petsocial/api/posts/services.py
import logging
import uuid
from typing import Optional, Dict, Any, List

from petsocial.api.users.services import UserService
from petsocial.core.config import Settings
from petsocial.core.errors import NotFoundError
from petsocial.core.validation import FieldErrors
from petsocial.models.lifecycle import Lifecycle
from petsocial.models.post import Post
from petsocial.services.image_service import ImageService

logger = logging.getLogger(__name__)

TITLE_MIN = 2
DESCRIPTION_MAX = 2014


def _newest_first(posts: List[Post]) -> List[Post]:
    return sorted(posts, key=lambda p: p.created_at, reverse=True)


class PostService:
    """
    Posts, likes and the feed.

    A post is never removed: deleting flips its status to DISABLED and every
    listing reads ACTIVE posts only.
    """
    def __init__(self, db, user_service: UserService, image_service: ImageService,
                 settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or Settings()
        self.user_service = user_service
        self.image_service = image_service
        self.posts_ref = self.db.collection('posts')

    def _active(self):
        return self.posts_ref.where('status', '==', Lifecycle.ACTIVE.value)

    def _save(self, post: Post) -> Post:
        self.posts_ref.document(post.post_id).set(post.to_dict())
        return post

    def _find_active(self, post_id: str, owner_id: Optional[str] = None) -> Post:
        doc = self.posts_ref.document(post_id).get() if post_id else None
        post = Post.from_dict(doc.to_dict()) if doc is not None and doc.exists else None
        if not post or not post.enabled or (owner_id is not None and post.user_id != owner_id):
            raise NotFoundError("Post not found.")
        return post

    @staticmethod
    def _validate(data: Dict[str, Any], is_new: bool):
        errors = FieldErrors()
        title = data.get('title')
        if is_new or title:
            errors.length("title", title, TITLE_MIN)
        errors.max_length("description", data.get('description'), DESCRIPTION_MAX)
        pets = data.get('pets')
        if pets is not None and (not isinstance(pets, list) or not all(isinstance(p, str) and p for p in pets)):
            errors.add("pets", "Invalid value")
        errors.raise_if_any()

    # --- reads ---
    def find_all(self) -> List[Post]:
        return _newest_first([Post.from_dict(doc.to_dict()) for doc in self._active().stream()])

    def find_by_id(self, post_id: str) -> Post:
        return self._find_active(post_id)

    def find_all_by_user_id(self, user_id: str) -> List[Post]:
        docs = self._active().where('user_id', '==', user_id).stream()
        return _newest_first([Post.from_dict(doc.to_dict()) for doc in docs])

    def find_my_feed_posts(self, user_id: str) -> List[Post]:
        """Enabled posts of everyone ``user_id`` follows, newest first. The caller's own posts never appear."""
        following = [f for f in self.user_service.get_following(user_id) if f != user_id]
        posts: List[Post] = []
        limit = self.settings.query_in_limit
        for start in range(0, len(following), limit):
            chunk = following[start:start + limit]
            docs = self._active().where('user_id', 'in', chunk).stream()
            posts.extend(Post.from_dict(doc.to_dict()) for doc in docs)
        return _newest_first(posts)

    def find_post_by_like_amount(self, threshold: int) -> List[Post]:
        docs = self._active().where('like_count', '>=', threshold).stream()
        return _newest_first([Post.from_dict(doc.to_dict()) for doc in docs])

    # --- writes ---
    def publish(self, user_id: str, data: Dict[str, Any]) -> Post:
        self._validate(data, is_new=True)

        picture = None
        if data.get('picture'):
            picture = self.image_service.create(data['picture']).image_id

        post = Post(
            post_id=str(uuid.uuid4()),
            user_id=user_id,
            title=data['title'],
            description=data.get('description') or "",
            picture=picture,
            pets=list(data.get('pets') or []),
        )
        self._save(post)
        logger.info(f"Post published (post_id: {post.post_id}, user_id: {user_id})")
        return post

    def update_post(self, user_id: str, post_id: str, data: Dict[str, Any]) -> Post:
        post = self._find_active(post_id, owner_id=user_id)
        self._validate(data, is_new=False)

        if data.get('picture'):
            post.picture = self.image_service.create(data['picture']).image_id
        if data.get('title'):
            post.title = data['title']
        if data.get('description'):
            post.description = data['description']
        if data.get('pets') is not None:
            post.pets = list(data['pets'])

        post.touch()
        return self._save(post)

    def delete_post(self, user_id: str, post_id: str) -> Post:
        post = self._find_active(post_id, owner_id=user_id)
        post.status = Lifecycle.DISABLED
        post.touch()
        logger.info(f"Post deleted (post_id: {post_id}, user_id: {user_id})")
        return self._save(post)

    def toggle_like(self, user_id: str, post_id: str) -> Post:
        """Removes the user's like when present, adds it otherwise."""
        post = self._find_active(post_id)
        if post.is_liked_by(user_id):
            post.unlike(user_id)
        else:
            post.like(user_id)
        return self._save(post)

    def like(self, user_id: str, post_id: str) -> Post:
        return self.toggle_like(user_id, post_id)

    def dislike(self, user_id: str, post_id: str) -> Post:
        # Same toggle as like(): disliking a post the user never liked likes it.
        return self.toggle_like(user_id, post_id)
