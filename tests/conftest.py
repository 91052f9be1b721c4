import pytest
from fastapi.testclient import TestClient

from platecraft.app import create_app
from platecraft.features.food_images.infra.vertex_imagen import ImagenError


class FakeCredentials:
    def __init__(self, project="test-project", token="tok-123", error=None):
        self.project = project
        self.token = token
        self.error = error

    def access_token(self):
        if self.error:
            raise self.error
        return self.token

    def project_id(self):
        if self.error:
            raise self.error
        return self.project

    def initialize(self):
        return self.error is None


class FakeImagen:
    def __init__(self, image_b64="iVBORw0KGgo=", error=None):
        self.image_b64 = image_b64
        self.error = error
        self.prompts = []

    async def predict(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.image_b64


@pytest.fixture
def credentials():
    return FakeCredentials()


@pytest.fixture
def imagen():
    return FakeImagen()


@pytest.fixture
def client(credentials, imagen):
    return TestClient(create_app(credentials=credentials, imagen_client=imagen))


@pytest.fixture
def failing_imagen():
    return FakeImagen(error=ImagenError("Permission denied", details={"error": {"code": 403}}))
