from slugify import slugify


def normalize_slug(text):
    """
    Lowercase, ASCII-transliterated, hyphen-separated, trimmed.
    Idempotent: normalize_slug(normalize_slug(x)) == normalize_slug(x).
    """
    return slugify(text or "", lowercase=True, separator="-")
