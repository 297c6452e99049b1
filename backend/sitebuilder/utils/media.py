import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app
from sitebuilder.domain.exceptions import ValidationError, field_error

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'}
UPLOADS_URL_PREFIX = "/uploads"


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def save_file(file, field="thumbnail"):
    """
    Store an uploaded image under UPLOAD_FOLDER with a random name.
    Returns the public URL the file is served from.
    """
    filename = secure_filename(file.filename or "")
    if not allowed_file(filename):
        raise ValidationError(
            "File type not allowed",
            errors=[field_error(field, "Only image uploads are allowed")]
        )

    ext = filename.rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    upload_folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(upload_folder, exist_ok=True)
    file_path = os.path.join(upload_folder, unique_filename)

    file.save(file_path)
    current_app.logger.info("Stored upload %s", unique_filename)

    return f"{UPLOADS_URL_PREFIX}/{unique_filename}"


def iter_upload_files(upload_folder):
    """
    Yield (absolute_path, relative_posix_path) for every file below
    upload_folder. A missing folder yields nothing.
    """
    if not upload_folder or not os.path.isdir(upload_folder):
        return

    for root, dirs, files in os.walk(upload_folder):
        dirs.sort()
        for name in sorted(files):
            path = os.path.join(root, name)
            relative = os.path.relpath(path, upload_folder).replace(os.sep, "/")
            yield path, relative
