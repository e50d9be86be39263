from __future__ import annotations

import io
import os

import pytest
from werkzeug.datastructures import FileStorage

from lessonpages.application.media.delete_media import delete_media
from lessonpages.application.media.upload_media import upload_media
from lessonpages.domain.exceptions import ConflictError, ForbiddenError, StorageFault, ValidationError


def png_upload(name: str = "wiring diagram.png") -> FileStorage:
    return FileStorage(
        stream=io.BytesIO(b"\x89PNG\r\n\x1a\n" + b"0" * 24),
        filename=name,
        content_type="image/png",
    )


def test_upload_records_metadata_and_stores_file(repo, editor_ctx, upload_dir) -> None:
    media = upload_media(repo=repo, ctx=editor_ctx, file=png_upload())

    assert media.original_name == "wiring diagram.png"
    assert media.mimetype == "image/png"
    assert media.size == 32
    assert media.filename.endswith(".png")
    assert media.url == f"/uploads/{media.filename}"
    assert (upload_dir / media.filename).read_bytes().startswith(b"\x89PNG")
    assert [m.id for m in repo.list_media()] == [media.id]


def test_disallowed_extension_is_rejected(repo, editor_ctx, upload_dir) -> None:
    with pytest.raises(ValidationError):
        upload_media(repo=repo, ctx=editor_ctx, file=png_upload("payload.exe"))
    assert repo.list_media() == []


def test_missing_file_is_rejected(repo, editor_ctx) -> None:
    with pytest.raises(ValidationError):
        upload_media(repo=repo, ctx=editor_ctx, file=None)


def test_editor_cannot_delete_media(repo, editor_ctx, upload_dir) -> None:
    media = upload_media(repo=repo, ctx=editor_ctx, file=png_upload())

    with pytest.raises(ForbiddenError):
        delete_media(repo=repo, ctx=editor_ctx, media_id=media.id)

    assert (upload_dir / media.filename).exists()


def test_admin_delete_removes_row_and_file(repo, admin_ctx, upload_dir) -> None:
    media = upload_media(repo=repo, ctx=admin_ctx, file=png_upload())
    media_id, stored = media.id, media.filename

    delete_media(repo=repo, ctx=admin_ctx, media_id=media_id)

    assert repo.get_media(media_id) is None
    assert not (upload_dir / stored).exists()


def test_already_missing_file_still_deletes_row(repo, admin_ctx, upload_dir) -> None:
    media = upload_media(repo=repo, ctx=admin_ctx, file=png_upload())
    media_id = media.id
    os.remove(upload_dir / media.filename)

    delete_media(repo=repo, ctx=admin_ctx, media_id=media_id)

    assert repo.get_media(media_id) is None


def test_failed_file_removal_keeps_the_row(repo, admin_ctx, upload_dir, monkeypatch) -> None:
    media = upload_media(repo=repo, ctx=admin_ctx, file=png_upload())
    media_id, stored = media.id, media.filename

    def refuse(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr("lessonpages.utils.media.os.remove", refuse)

    with pytest.raises(StorageFault):
        delete_media(repo=repo, ctx=admin_ctx, media_id=media_id)

    assert repo.get_media(media_id) is not None
    assert (upload_dir / stored).exists()


def test_failed_row_write_removes_the_stored_file(repo, editor_ctx, upload_dir, monkeypatch) -> None:
    def collide():
        raise ConflictError("Resource already exists.")

    monkeypatch.setattr(repo, "flush", collide)

    with pytest.raises(ConflictError):
        upload_media(repo=repo, ctx=editor_ctx, file=png_upload())

    assert repo.list_media() == []
    assert list(upload_dir.iterdir()) == []


def test_failed_cleanup_does_not_mask_the_row_error(repo, editor_ctx, upload_dir, monkeypatch) -> None:
    def collide():
        raise ConflictError("Resource already exists.")

    def refuse(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(repo, "flush", collide)
    monkeypatch.setattr("lessonpages.utils.media.os.remove", refuse)

    with pytest.raises(ConflictError):
        upload_media(repo=repo, ctx=editor_ctx, file=png_upload())

    assert repo.list_media() == []
    assert len(list(upload_dir.iterdir())) == 1
