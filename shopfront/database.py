import json
import logging
import os

logger = logging.getLogger(__name__)


def load_json(path, default):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return default
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s, using fallback: %s", path, e)
        return default


def save_json(path, data):
    tmp_path = path + ".tmp"
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    os.replace(tmp_path, path)


def init_db(settings, config_store):
    """Create the data and upload folders, an empty catalog and the admin config."""
    os.makedirs(settings.data_dir, exist_ok=True)
    os.makedirs(settings.upload_dir, exist_ok=True)

    if not os.path.exists(settings.products_path):
        save_json(settings.products_path, [])

    if config_store.ensure_default(settings.initial_password):
        if settings.using_default_password:
            logger.warning(
                "Config created with the default admin password; "
                "set ADMIN_PASSWORD or change it from the dashboard"
            )
        else:
            logger.info("Config created with the password from ADMIN_PASSWORD")
