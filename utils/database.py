"""
Firebase Realtime Database connection for A2A Billing.
Every result leaves the scraper through this module.
"""

import json
import logging
from typing import Any

import firebase_admin
from firebase_admin import credentials, db
from firebase_admin.exceptions import FirebaseError

from .errors import ConfigurationError, StoreWriteError

logger = logging.getLogger(__name__)

APP_NAME = "a2a-billing"


def load_firebase_config(raw_config: str) -> dict:
    """Parse the ``FIREBASE_CONFIG`` JSON blob.

    The blob must contain ``databaseURL``. ``serviceAccount`` may hold the
    service account key, inline or as a path to its JSON file.

    Raises:
        ConfigurationError: If the blob is not a JSON object or lacks
            ``databaseURL``.
    """
    try:
        config = json.loads(raw_config)
    except (TypeError, json.JSONDecodeError) as e:
        raise ConfigurationError("FIREBASE_CONFIG", f"not valid JSON ({e})") from e

    if not isinstance(config, dict):
        raise ConfigurationError("FIREBASE_CONFIG", "expected a JSON object")
    if not config.get("databaseURL"):
        raise ConfigurationError("FIREBASE_CONFIG", "missing 'databaseURL'")
    return config


def _credentials_from(config: dict):
    service_account = config.get("serviceAccount")
    if service_account:
        return credentials.Certificate(service_account)
    return credentials.ApplicationDefault()


class FirebaseDatabase:
    """Writes scalar values to fixed paths in the Realtime Database"""

    def __init__(self, raw_config: str):
        config = load_firebase_config(raw_config)
        try:
            self.app = firebase_admin.get_app(APP_NAME)
        except ValueError:
            self.app = firebase_admin.initialize_app(
                _credentials_from(config),
                {"databaseURL": config["databaseURL"]},
                name=APP_NAME,
            )

    def set(self, path: str, value: Any) -> None:
        """Overwrite the value stored at *path*.

        Raises:
            StoreWriteError: If the database rejects the write.
        """
        logger.debug(f"Writing {value!r} to {path}")
        try:
            db.reference(path, app=self.app).set(value)
        except FirebaseError as e:
            raise StoreWriteError(path, str(e)) from e
