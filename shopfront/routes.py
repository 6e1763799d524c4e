from flask import Blueprint, current_app, render_template, send_from_directory

main = Blueprint("main", __name__)


# -----------------------
# HOME
# -----------------------
@main.route("/")
def home():
    products = current_app.extensions["product_store"].list()
    return render_template("index.html", products=products)


# -----------------------
# UPLOADED IMAGES
# -----------------------
@main.route("/uploads/<path:filename>")
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
