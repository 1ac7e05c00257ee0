from common.stores import load_store
from signups.stores.interfaces import SignupStore


def get_signup_store() -> SignupStore:
    return load_store("SIGNUPS", "STORE", "signups")
