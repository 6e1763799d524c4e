import logging
import os
import time
import uuid

from werkzeug.utils import secure_filename

from shopfront.config import UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)


class UnsupportedImage(ValueError):
    pass


def _extension(filename):
    return os.path.splitext(secure_filename(filename or ""))[1].lower()


def save_upload(image_file, settings):
    """Store an uploaded image under a generated name and return its URL path.

    The original filename only contributes its extension.
    """
    if not image_file or not getattr(image_file, "filename", ""):
        return None

    extension = _extension(image_file.filename)
    if extension.lstrip(".") not in settings.allowed_extensions:
        allowed = ", ".join(sorted(settings.allowed_extensions)).upper()
        raise UnsupportedImage(f"Unsupported image format. Upload {allowed} files.")

    filename = f"{int(time.time() * 1000)}-{uuid.uuid4()}{extension}"
    image_file.save(os.path.join(settings.upload_dir, filename))
    return f"{UPLOAD_URL_PREFIX}/{filename}"


def upload_file_path(image_path, settings):
    """Map a stored ``/uploads/...`` path back to a file inside the upload root."""
    prefix = UPLOAD_URL_PREFIX + "/"
    if not image_path or not image_path.startswith(prefix):
        return None

    root = os.path.abspath(settings.upload_dir)
    target = os.path.abspath(os.path.join(root, image_path[len(prefix):]))
    if os.path.dirname(target) != root:
        return None
    return target


def discard_upload(image_path, settings):
    target = upload_file_path(image_path, settings)
    if not target:
        return

    try:
        os.remove(target)
    except FileNotFoundError:
        return
    except OSError as e:
        # best-effort; the file is just left behind
        logger.debug("Could not remove %s: %s", target, e)
