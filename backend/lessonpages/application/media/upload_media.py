from flask import current_app
from lessonpages.models.media import Media
from lessonpages.domain.exceptions import StorageFault
from lessonpages.domain.policy import AuthContext, MEDIA_UPLOAD, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action
from lessonpages.utils.media import delete_file, save_file


def upload_media(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    file,
) -> Media:
    """
    Store an uploaded file and record its metadata.

    If the row cannot be written the stored file is removed again.
    """
    authorize(ctx, MEDIA_UPLOAD)

    stored_name, url, size = save_file(file)

    media = Media()
    media.filename = stored_name
    media.original_name = file.filename
    media.mimetype = file.mimetype or "application/octet-stream"
    media.size = size
    media.url = url

    try:
        with repo.transaction():
            repo.add(media)
            repo.flush()

            log_action(
                action="media.upload",
                entity_type="media",
                entity_id=media.id,
                actor_id=ctx.id,
                payload={"filename": stored_name, "size": size},
            )
    except Exception:
        try:
            delete_file(stored_name)
        except StorageFault:
            # The row error is the one the caller sees
            current_app.logger.warning(f"Orphaned upload {stored_name} left on disk")
        raise

    return media
