"""Slug generation for note identifiers"""

import re
import unicodedata


def slugify(text: str) -> str:
    """Fold text to ASCII and return a lowercase, hyphen-separated slug.

    Note stems like 'Café Notes' become 'cafe-notes'.
    """
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = re.sub(r'[^\w\s-]', '', text.lower())
    return re.sub(r'[\s_-]+', '-', text).strip('-')
