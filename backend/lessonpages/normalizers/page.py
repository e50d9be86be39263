from .block import normalize_block


def normalize_page(page, blocks=None, admin=False):
    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "audience": page.audience,
        "updated_at": page.updated_at.isoformat(),
    }

    if admin:
        data["status"] = page.status
        data["created_at"] = page.created_at.isoformat()

    if blocks is not None:
        ordered = sorted(blocks, key=lambda b: b.position)
        data["blocks"] = [normalize_block(b, admin=admin) for b in ordered]

    return data
