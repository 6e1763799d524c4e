from flask import Flask

from shopfront.auth import ConfigStore
from shopfront.config import Settings
from shopfront.database import init_db
from shopfront.products import ProductStore


def create_app(settings=None):
    settings = settings or Settings.from_env()

    app = Flask(
        __name__,
        template_folder="templates"
    )

    # -----------------------------
    # SESSION
    # -----------------------------
    if settings.using_default_secret:
        app.logger.warning("SESSION_SECRET not set, using the built-in fallback")

    app.secret_key = settings.secret_key
    app.permanent_session_lifetime = settings.session_lifetime

    # -----------------------------
    # APP CONFIG
    # -----------------------------
    app.config["SETTINGS"] = settings
    app.config["UPLOAD_FOLDER"] = settings.upload_dir
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes

    # -----------------------------
    # STORES
    # -----------------------------
    config_store = ConfigStore(settings.config_path, settings.password_hash_method)
    app.extensions["config_store"] = config_store
    app.extensions["product_store"] = ProductStore(settings.products_path)

    init_db(settings, config_store)
    app.logger.info(
        "Data in %s, uploads in %s", settings.data_dir, settings.upload_dir
    )

    # -----------------------------
    # BLUEPRINTS
    # -----------------------------
    from shopfront.routes import main
    app.register_blueprint(main)

    from shopfront.admin_routes import admin
    app.register_blueprint(admin)

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(_):
        return "Not Found", 404

    return app
