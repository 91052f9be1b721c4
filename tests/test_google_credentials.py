import base64
import json

import pytest
from google.auth.exceptions import DefaultCredentialsError, RefreshError

from platecraft.shared.auth import google_credentials
from platecraft.shared.auth.google_credentials import (
    CLOUD_PLATFORM_SCOPE,
    CredentialsError,
    GoogleCredentialProvider,
)

SA_INFO = {"type": "service_account", "project_id": "sa-project", "client_email": "svc@sa-project.iam.gserviceaccount.com"}


class StubCredentials:
    def __init__(self, fail_refresh=False):
        self.valid = False
        self.token = None
        self.refreshes = 0
        self.fail_refresh = fail_refresh

    def refresh(self, request):
        if self.fail_refresh:
            raise RefreshError("invalid_grant")
        self.refreshes += 1
        self.token = f"token-{self.refreshes}"
        self.valid = True


@pytest.fixture
def stub(monkeypatch):
    creds = StubCredentials()
    calls = {}

    def from_info(info, scopes=None):
        calls["info"] = info
        calls["scopes"] = scopes
        return creds

    monkeypatch.setattr(google_credentials.service_account.Credentials, "from_service_account_info", from_info)
    monkeypatch.setattr(google_credentials, "Request", lambda: object())
    creds.calls = calls
    return creds


def _b64(info):
    return base64.b64encode(json.dumps(info).encode("utf-8")).decode("ascii")


def test_base64_service_account(stub):
    provider = GoogleCredentialProvider(credentials_base64=_b64(SA_INFO), project_id="")

    assert provider.project_id() == "sa-project"
    assert provider.access_token() == "token-1"
    assert stub.calls["info"] == SA_INFO
    assert stub.calls["scopes"] == [CLOUD_PLATFORM_SCOPE]


def test_token_is_cached_until_invalid(stub):
    provider = GoogleCredentialProvider(credentials_base64=_b64(SA_INFO), project_id="")

    assert provider.access_token() == "token-1"
    assert provider.access_token() == "token-1"
    stub.valid = False
    assert provider.access_token() == "token-2"


def test_configured_project_wins(stub):
    provider = GoogleCredentialProvider(credentials_base64=_b64(SA_INFO), project_id="configured")
    assert provider.project_id() == "configured"


def test_invalid_base64(stub):
    provider = GoogleCredentialProvider(credentials_base64="not base64!!", project_id="")
    with pytest.raises(CredentialsError, match="GOOGLE_CREDENTIALS_BASE64"):
        provider.project_id()


def test_refresh_failure(monkeypatch):
    monkeypatch.setattr(
        google_credentials.service_account.Credentials,
        "from_service_account_info",
        lambda info, scopes=None: StubCredentials(fail_refresh=True),
    )
    monkeypatch.setattr(google_credentials, "Request", lambda: object())
    provider = GoogleCredentialProvider(credentials_base64=_b64(SA_INFO), project_id="")

    with pytest.raises(CredentialsError, match="refresh"):
        provider.access_token()
    assert provider.initialize() is False


def test_application_default_credentials(monkeypatch):
    creds = StubCredentials()
    monkeypatch.setattr(google_credentials.google.auth, "default", lambda scopes=None: (creds, "adc-project"))
    monkeypatch.setattr(google_credentials, "Request", lambda: object())
    provider = GoogleCredentialProvider(credentials_base64="", project_id="")

    assert provider.initialize() is True
    assert provider.project_id() == "adc-project"
    assert provider.access_token() == "token-1"


def test_missing_application_default_credentials(monkeypatch):
    def no_adc(scopes=None):
        raise DefaultCredentialsError("Could not automatically determine credentials")

    monkeypatch.setattr(google_credentials.google.auth, "default", no_adc)
    provider = GoogleCredentialProvider(credentials_base64="", project_id="")

    with pytest.raises(CredentialsError, match="not available"):
        provider.project_id()
    assert provider.initialize() is False


def test_missing_project(monkeypatch):
    monkeypatch.setattr(google_credentials.google.auth, "default", lambda scopes=None: (StubCredentials(), None))
    provider = GoogleCredentialProvider(credentials_base64="", project_id="")

    with pytest.raises(CredentialsError, match="project ID"):
        provider.project_id()
