from common.stores import load_store
from shop.stores.interfaces import ProductStore


def get_product_store() -> ProductStore:
    return load_store("SHOP", "PRODUCT_STORE", "shop")
