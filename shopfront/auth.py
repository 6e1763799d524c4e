import os
from functools import wraps

from flask import redirect, session, url_for
from werkzeug.security import check_password_hash, generate_password_hash

from shopfront.config import MIN_PASSWORD_LENGTH
from shopfront.database import load_json, save_json


class InvalidPassword(ValueError):
    pass


# -----------------------------
# ADMIN CONFIG (JSON)
# -----------------------------
class ConfigStore:
    def __init__(self, path, hash_method):
        self.path = path
        self.hash_method = hash_method

    def get(self):
        config = load_json(self.path, None)
        if not isinstance(config, dict):
            return None
        return config

    def ensure_default(self, password):
        """Write the first password hash if no config exists. Returns True if written."""
        if os.path.exists(self.path):
            return False

        save_json(self.path, {"passwordHash": self._hash(password)})
        return True

    def set_password(self, new_password):
        if not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
            raise InvalidPassword(
                f"New password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        config = self.get() or {}
        config["passwordHash"] = self._hash(new_password)
        save_json(self.path, config)

    def verify(self, password):
        config = self.get()
        if not config or not config.get("passwordHash"):
            return False
        return check_password_hash(config["passwordHash"], password or "")

    def _hash(self, password):
        return generate_password_hash(password, method=self.hash_method)


# -----------------------------
# SESSION GATE
# -----------------------------
def is_admin():
    return bool(session.get("is_admin"))


def login_admin():
    session.clear()
    session.permanent = True
    session["is_admin"] = True


def logout_admin():
    session.clear()


def admin_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not is_admin():
            return redirect(url_for("admin.admin_login"))
        return view(*args, **kwargs)
    return wrapped
