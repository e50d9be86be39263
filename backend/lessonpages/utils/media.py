import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app
from lessonpages.domain.exceptions import StorageFault, ValidationError

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg', 'mp4', 'mov', 'webm', 'pdf'}


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def upload_folder():
    return current_app.config.get('UPLOAD_FOLDER', 'uploads')


def save_file(file):
    """
    Store an uploaded werkzeug FileStorage.

    Returns (stored_filename, public_url, size_in_bytes).
    """
    if not file or not file.filename:
        raise ValidationError("No file uploaded")

    filename = secure_filename(file.filename)
    if not allowed_file(filename):
        raise ValidationError("File type not allowed")

    ext = filename.rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    folder = upload_folder()
    os.makedirs(folder, exist_ok=True)
    file_path = os.path.join(folder, unique_filename)

    try:
        file.save(file_path)
    except OSError as exc:
        current_app.logger.error(f"Failed to store upload {filename}: {exc}")
        raise StorageFault("Could not store the uploaded file.") from exc

    prefix = current_app.config.get('UPLOAD_URL_PREFIX', '/uploads').rstrip('/')
    return unique_filename, f"{prefix}/{unique_filename}", os.path.getsize(file_path)


def delete_file(filename):
    """
    Deletes a stored upload by its stored filename.

    Returns False when the file is already gone; raises StorageFault when
    it exists but cannot be removed.
    """
    if not filename:
        return False

    file_path = os.path.join(upload_folder(), os.path.basename(filename))

    if not os.path.exists(file_path):
        current_app.logger.warning(f"Upload {filename} already missing on disk")
        return False

    try:
        os.remove(file_path)
        return True
    except OSError as e:
        current_app.logger.error(f"Failed to delete file {file_path}: {e}")
        raise StorageFault("Could not delete the stored file.") from e
