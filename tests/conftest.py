import io
import os

import pytest

from shopfront import create_app
from shopfront.config import Settings

ADMIN_PASSWORD = "first-password"


@pytest.fixture
def settings(tmp_path):
    """Settings rooted in a temporary directory with a cheap hash method."""
    return Settings(
        data_dir=os.path.join(tmp_path, "data"),
        upload_dir=os.path.join(tmp_path, "uploads"),
        secret_key="test-secret",
        initial_password=ADMIN_PASSWORD,
        password_hash_method="pbkdf2:sha256:1000",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(password=ADMIN_PASSWORD):
        return client.post("/adminF/login", data={"password": password})
    return _login


@pytest.fixture
def image():
    """Build a multipart file tuple for the test client."""
    def _image(name="photo.png", content=b"\x89PNG fake image"):
        return (io.BytesIO(content), name)
    return _image
