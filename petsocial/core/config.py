# petsocial/core/config.py

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Mapping, Tuple


class Config:
    """Common settings shared by every environment.

    Values are read from the environment when the object is constructed, so
    ``create_app`` decides when configuration is loaded (after ``load_dotenv``).
    """
    DEBUG = False
    TESTING = False

    def __init__(self):
        # Signing key for the bearer tokens handed out on sign-up / sign-in.
        self.JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
        self.JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES_HOURS', 24)))
        self.FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')
        self.DEFAULT_PROFILE_IMAGE = os.getenv('DEFAULT_PROFILE_IMAGE', '/assets/default_profile_image.jpg')
        self.API_PREFIX = os.getenv('API_PREFIX', '/v1')


class DevelopmentConfig(Config):
    DEBUG = True

    def __init__(self):
        super().__init__()
        self.FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH', self.FIREBASE_CREDENTIALS_PATH)


class TestingConfig(Config):
    TESTING = True

    def __init__(self):
        super().__init__()
        self.JWT_SECRET_KEY = self.JWT_SECRET_KEY or 'testing-secret-key-with-enough-length'
        self.FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH', self.FIREBASE_CREDENTIALS_PATH)


class ProductionConfig(Config):
    pass


config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)


@dataclass(frozen=True)
class Settings:
    """Typed view of the values the domain services depend on."""

    default_profile_image: str = '/assets/default_profile_image.jpg'
    default_permissions: Tuple[str, ...] = ('user',)
    admin_permission: str = 'admin'
    # Firestore rejects 'in' filters with more than 30 values.
    query_in_limit: int = 30

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "Settings":
        return cls(
            default_profile_image=config.get('DEFAULT_PROFILE_IMAGE') or cls.default_profile_image,
        )
