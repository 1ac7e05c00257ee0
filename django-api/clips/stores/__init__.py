from clips.stores.interfaces import ClipStore
from common.stores import load_store


def get_clip_store() -> ClipStore:
    return load_store("CLIPS", "STORE", "clips")
