import hashlib
import uuid


def sha1_text(s: str) -> str:
    return hashlib.sha1(s.encode("utf-8")).hexdigest()


def random_id() -> str:
    return str(uuid.uuid4())
