"""Content hashing so consumers can detect changed note bodies"""

import hashlib


def sha256(content: str) -> str:
    return hashlib.sha256(content.encode('utf-8')).hexdigest()
