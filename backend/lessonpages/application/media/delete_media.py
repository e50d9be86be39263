from lessonpages.domain.policy import AuthContext, MEDIA_DELETE, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action
from lessonpages.utils.media import delete_file


def delete_media(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    media_id: str,
) -> None:
    """
    Remove a media row and its stored file as one unit.

    The row delete is flushed first and only committed once the file is
    gone, so a failed file removal rolls the row back (StorageFault).
    A file that is already missing does not block the row delete.
    """
    authorize(ctx, MEDIA_DELETE)

    media = repo.require_media(media_id)
    filename = media.filename

    with repo.transaction():
        repo.delete(media)
        repo.flush()

        removed = delete_file(filename)

        log_action(
            action="media.delete",
            entity_type="media",
            entity_id=media_id,
            actor_id=ctx.id,
            payload={"filename": filename, "file_removed": removed},
        )
