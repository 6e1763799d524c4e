import uuid

from shopfront.database import load_json, save_json


class ProductNotFound(LookupError):
    pass


class ProductStore:
    """Product catalog kept as a JSON array, newest first.

    Every mutation rewrites the whole file. There is no locking: two admin
    requests racing on the same file lose one update (last write wins).
    """

    def __init__(self, path):
        self.path = path

    def list(self):
        products = load_json(self.path, [])
        if not isinstance(products, list):
            return []
        return [p for p in products if isinstance(p, dict)]

    def get(self, product_id):
        return next((p for p in self.list() if p.get("id") == product_id), None)

    def add(self, description, image_path=None):
        products = self.list()
        existing = {p.get("id") for p in products}

        product_id = str(uuid.uuid4())
        while product_id in existing:
            product_id = str(uuid.uuid4())

        product = {
            "id": product_id,
            "imagePath": image_path,
            "description": (description or "").strip(),
        }
        products.insert(0, product)
        save_json(self.path, products)
        return product

    def update(self, product_id, description=None, image_path=None):
        """Apply a partial edit.

        Blank descriptions are ignored and the image only changes when a new
        path is given. Returns ``(product, replaced_image_path)``; the caller
        removes the replaced file once this write has happened.
        """
        products = self.list()
        product = next((p for p in products if p.get("id") == product_id), None)
        if product is None:
            raise ProductNotFound(product_id)

        description = (description or "").strip()
        if description:
            product["description"] = description

        replaced = None
        if image_path:
            replaced = product.get("imagePath")
            product["imagePath"] = image_path

        save_json(self.path, products)
        return product, replaced

    def remove(self, product_id):
        products = self.list()
        product = next((p for p in products if p.get("id") == product_id), None)
        if product is None:
            raise ProductNotFound(product_id)

        save_json(self.path, [p for p in products if p.get("id") != product_id])
        return product
