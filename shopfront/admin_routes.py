from flask import Blueprint, current_app, redirect, render_template, request, url_for

from shopfront.auth import (
    InvalidPassword,
    admin_required,
    is_admin,
    login_admin,
    logout_admin,
)
from shopfront.products import ProductNotFound
from shopfront.uploads import UnsupportedImage, discard_upload, save_upload

admin = Blueprint("admin", __name__, url_prefix="/adminF")


# -----------------------------
# HELPERS
# -----------------------------
def _products():
    return current_app.extensions["product_store"]


def _config():
    return current_app.extensions["config_store"]


def _settings():
    return current_app.config["SETTINGS"]


def _dashboard(message=None, error=None):
    return render_template(
        "admin/dashboard.html",
        products=_products().list(),
        message=message,
        error=error
    )


# -----------------------------
# ADMIN LOGIN / LOGOUT
# -----------------------------
@admin.route("", methods=["GET"])
def admin_login():
    if is_admin():
        return redirect(url_for("admin.admin_dashboard"))
    return render_template("admin/login.html", error=None)


@admin.route("/login", methods=["POST"])
def admin_login_submit():
    if not _config().get():
        return render_template("admin/login.html", error="Config not found")

    if _config().verify(request.form.get("password")):
        login_admin()
        return redirect(url_for("admin.admin_dashboard"))

    current_app.logger.warning("Failed admin login from %s", request.remote_addr)
    return render_template("admin/login.html", error="Invalid password")


@admin.route("/logout", methods=["POST"])
def admin_logout():
    logout_admin()
    return redirect(url_for("admin.admin_login"))


# -----------------------------
# DASHBOARD
# -----------------------------
@admin.route("/dashboard")
@admin_required
def admin_dashboard():
    return _dashboard()


# -----------------------------
# PRODUCTS (JSON)
# -----------------------------
@admin.route("/products", methods=["POST"])
@admin_required
def add_product():
    try:
        image_path = save_upload(request.files.get("image"), _settings())
    except UnsupportedImage as e:
        return _dashboard(error=str(e))

    product = _products().add(request.form.get("description", ""), image_path)
    current_app.logger.info("Product %s created", product["id"])
    return redirect(url_for("admin.admin_dashboard"))


@admin.route("/products/<product_id>", methods=["POST"])
@admin_required
def edit_product(product_id):
    try:
        image_path = save_upload(request.files.get("image"), _settings())
    except UnsupportedImage as e:
        return _dashboard(error=str(e))

    try:
        _, replaced = _products().update(
            product_id,
            description=request.form.get("description"),
            image_path=image_path
        )
    except ProductNotFound:
        discard_upload(image_path, _settings())
        return "Not found", 404

    # record is written first, the old file goes second
    discard_upload(replaced, _settings())
    current_app.logger.info("Product %s updated", product_id)
    return redirect(url_for("admin.admin_dashboard"))


@admin.route("/products/<product_id>/delete", methods=["POST"])
@admin_required
def delete_product(product_id):
    try:
        product = _products().remove(product_id)
    except ProductNotFound:
        return "Not found", 404

    discard_upload(product.get("imagePath"), _settings())
    current_app.logger.info("Product %s deleted", product_id)
    return redirect(url_for("admin.admin_dashboard"))


# -----------------------------
# PASSWORD
# -----------------------------
@admin.route("/password", methods=["POST"])
@admin_required
def change_password():
    try:
        _config().set_password(request.form.get("newPassword"))
    except InvalidPassword as e:
        return _dashboard(error=str(e))

    current_app.logger.info("Admin password changed")
    return _dashboard(message="Password updated successfully")
