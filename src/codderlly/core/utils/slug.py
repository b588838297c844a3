"""URL slugs for article file names"""

import re
import unicodedata


def slugify(text: str) -> str:
    """Fold text to ASCII and return a lowercase, hyphen-separated slug."""
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = re.sub(r'[^\w\s-]', '', text.lower())
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')
