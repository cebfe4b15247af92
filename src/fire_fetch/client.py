from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import firebase_admin
from firebase_admin import credentials, db

from .errors import InitError

logger = logging.getLogger(__name__)


class DatabaseReader(Protocol):
    """Read access to a tree-structured database."""

    def get(self, path: str) -> Any:
        """Return the fully materialized value at ``path``."""
        ...

    def get_shallow(self, path: str) -> Any:
        """Return the value at ``path`` with nested objects collapsed to ``True``."""
        ...


class RealtimeDatabaseClient:
    """Firebase Realtime Database reader using the Firebase Admin SDK."""

    def __init__(
        self,
        database_url: str,
        service_account_path: str,
        app_name: Optional[str] = None,
    ) -> None:
        self.database_url = database_url.rstrip("/")
        self.service_account_path = service_account_path
        self.app_name = app_name or f"fire_fetch_{id(self)}"
        self._app: Optional[firebase_admin.App] = None
        self._initialize_app()

    def _initialize_app(self) -> None:
        """Initialize a named Firebase Admin SDK app authenticated with the service account."""
        try:
            existing_app = firebase_admin.get_app(self.app_name)
            firebase_admin.delete_app(existing_app)
            logger.debug(f"Deleted existing Firebase app: {self.app_name}")
        except ValueError:
            pass  # App doesn't exist

        try:
            cred = credentials.Certificate(self.service_account_path)
            self._app = firebase_admin.initialize_app(cred, {
                'databaseURL': self.database_url
            }, name=self.app_name)
        except Exception as e:
            logger.debug(f"Failed to initialize Firebase app: {e}")
            raise InitError("Error initializing app", e) from e

        logger.info(f"Initialized Firebase app: {self.app_name}")
        logger.info(f"Database URL: {self.database_url}")

    def reference(self, path: str) -> db.Reference:
        if self._app is None:
            raise InitError("Error initializing database client", RuntimeError("client is closed"))
        try:
            return db.reference(path, app=self._app)
        except Exception as e:
            logger.debug(f"Failed to create reference for {path}: {e}")
            raise InitError("Error initializing database client", e) from e

    def get(self, path: str) -> Any:
        ref = self.reference(path)
        logger.info(f"Reading {path}")
        return ref.get()

    def get_shallow(self, path: str) -> Any:
        ref = self.reference(path)
        logger.info(f"Reading {path} (shallow)")
        return ref.get(shallow=True)

    def close(self) -> None:
        """Delete the Firebase app."""
        if self._app:
            try:
                firebase_admin.delete_app(self._app)
                logger.debug(f"Deleted Firebase app: {self.app_name}")
            except ValueError as e:
                logger.debug(f"Error deleting Firebase app: {e}")
            finally:
                self._app = None

    def __enter__(self) -> RealtimeDatabaseClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
