from __future__ import annotations

import base64
import binascii
import json
import logging
import threading
from typing import Any, Optional

import google.auth
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from platecraft.shared.config.settings import settings

log = logging.getLogger("google_auth")

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"


class CredentialsError(RuntimeError):
    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.details = details if details is not None else message


class GoogleCredentialProvider:
    """
    Lazily loads Google Cloud credentials once per process and hands out
    fresh bearer tokens. Service account JSON passed as base64 wins over
    Application Default Credentials.
    """

    def __init__(
        self,
        *,
        credentials_base64: Optional[str] = None,
        project_id: Optional[str] = None,
        scopes: Optional[list] = None,
    ) -> None:
        self._credentials_base64 = credentials_base64 if credentials_base64 is not None else settings.GOOGLE_CREDENTIALS_BASE64
        self._configured_project = project_id if project_id is not None else settings.GOOGLE_CLOUD_PROJECT_ID
        self._scopes = scopes or [CLOUD_PLATFORM_SCOPE]
        self._credentials = None
        self._project: Optional[str] = None
        self._lock = threading.Lock()

    def _load(self) -> None:
        if self._credentials_base64:
            log.info("Setting up credentials from base64 environment variable")
            try:
                info = json.loads(base64.b64decode(self._credentials_base64).decode("utf-8"))
            except (binascii.Error, UnicodeDecodeError, ValueError) as e:
                raise CredentialsError(f"GOOGLE_CREDENTIALS_BASE64 is not valid base64 JSON: {e}") from e
            try:
                creds = service_account.Credentials.from_service_account_info(info, scopes=self._scopes)
            except (ValueError, KeyError) as e:
                raise CredentialsError(f"Invalid service account credentials: {e}") from e
            project = info.get("project_id")
        else:
            try:
                creds, project = google.auth.default(scopes=self._scopes)
            except GoogleAuthError as e:
                raise CredentialsError(f"Google Cloud authentication not available: {e}") from e
        self._credentials = creds
        self._project = self._configured_project or project

    def _ensure_loaded(self) -> None:
        if self._credentials is None:
            self._load()

    def project_id(self) -> str:
        with self._lock:
            self._ensure_loaded()
            if not self._project:
                raise CredentialsError("Google Cloud project ID could not be determined")
            return self._project

    def access_token(self) -> str:
        with self._lock:
            self._ensure_loaded()
            if not self._credentials.valid:
                try:
                    self._credentials.refresh(Request())
                except GoogleAuthError as e:
                    raise CredentialsError(f"Failed to refresh Google Cloud access token: {e}") from e
            return self._credentials.token

    def initialize(self) -> bool:
        """Eagerly load credentials and fetch a token; logs instead of raising."""
        try:
            self.access_token()
            project = self.project_id()
        except CredentialsError:
            log.error("Failed to initialize Google Cloud authentication", exc_info=True)
            return False
        log.info("Google Cloud authentication successful (project=%s)", project)
        return True
