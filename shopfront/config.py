import os
from dataclasses import dataclass, field
from datetime import timedelta

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
PROJECT_ROOT = os.path.dirname(BASE_DIR)

DEFAULT_PORT = 3000
DEFAULT_SESSION_SECRET = "super-secret-session"

# Used only when ADMIN_PASSWORD is not provided on first boot.
DEFAULT_ADMIN_PASSWORD = "change-me-now"

SESSION_LIFETIME = timedelta(hours=1)
MIN_PASSWORD_LENGTH = 6

UPLOAD_URL_PREFIX = "/uploads"
ALLOWED_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}

PASSWORD_HASH_METHOD = "scrypt:32768:8:1"


@dataclass
class Settings:
    data_dir: str
    upload_dir: str
    port: int = DEFAULT_PORT
    secret_key: str = DEFAULT_SESSION_SECRET
    initial_password: str = DEFAULT_ADMIN_PASSWORD
    password_hash_method: str = PASSWORD_HASH_METHOD
    max_upload_bytes: int = 2 * 1024 * 1024
    session_lifetime: timedelta = SESSION_LIFETIME
    allowed_extensions: set = field(default_factory=lambda: set(ALLOWED_EXTENSIONS))
    using_default_secret: bool = False
    using_default_password: bool = False

    @property
    def products_path(self):
        return os.path.join(self.data_dir, "products.json")

    @property
    def config_path(self):
        return os.path.join(self.data_dir, "config.json")

    @classmethod
    def from_env(cls, root=None, environ=None):
        env = os.environ if environ is None else environ
        root = root or PROJECT_ROOT

        secret = env.get("SESSION_SECRET")
        password = env.get("ADMIN_PASSWORD")

        return cls(
            data_dir=env.get("DATA_DIR", os.path.join(root, "data")),
            upload_dir=env.get("UPLOAD_FOLDER", os.path.join(root, "uploads")),
            port=int(env.get("PORT", DEFAULT_PORT)),
            secret_key=secret or DEFAULT_SESSION_SECRET,
            initial_password=password or DEFAULT_ADMIN_PASSWORD,
            max_upload_bytes=int(env.get("MAX_UPLOAD_MB", "2")) * 1024 * 1024,
            using_default_secret=not secret,
            using_default_password=not password,
        )
