# petsocial/services/image_service.py
import uuid
import logging
from typing import Optional

from petsocial.core.errors import NotFoundError, ValidationError
from petsocial.models.image import Image

logger = logging.getLogger(__name__)


class ImageService:
    """
    Stores base64 image payloads in the Firestore 'images' collection.
    Profiles and posts keep only the returned id; the payload is looked up
    again when a response needs the picture itself.
    """

    def __init__(self, db):
        self.db = db
        self.images_ref = self.db.collection('images')

    def create(self, image: Optional[str]) -> Image:
        if not image or not isinstance(image, str):
            raise ValidationError.single("image", "Invalid image.")

        new_image = Image(image_id=str(uuid.uuid4()), image=image)
        self.images_ref.document(new_image.image_id).set(new_image.to_dict())
        logger.info(f"Image stored (image_id: {new_image.image_id}, size: {len(image)})")
        return new_image

    def find_by_id(self, image_id: str) -> Image:
        doc = self.images_ref.document(image_id).get()
        if not doc.exists:
            raise NotFoundError(f"Image not found: {image_id}")
        return Image.from_dict(doc.to_dict())

    def resolve(self, image_id: Optional[str], default: Optional[str] = None) -> Optional[str]:
        """Returns the payload behind ``image_id``, or ``default`` when no picture is set."""
        if not image_id:
            return default
        return self.find_by_id(image_id).image
