from lessonpages.domain.blocks import decode_payload


def normalize_block(block, admin=False):
    base = {
        "id": block.id,
        "type": block.type,
        "position": block.position,
        "data": decode_payload(block.type, block.data_json).to_dict(),
    }

    if admin:
        base["page_id"] = block.page_id
        base["created_at"] = block.created_at.isoformat()
        base["updated_at"] = block.updated_at.isoformat()

    return base
