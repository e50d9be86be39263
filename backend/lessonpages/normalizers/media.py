def normalize_media(media):
    return {
        "id": media.id,
        "filename": media.filename,
        "original_name": media.original_name,
        "mimetype": media.mimetype,
        "size": media.size,
        "url": media.url,
        "created_at": media.created_at.isoformat(),
    }
