"""
Temporary storage for uploads and generated documents.

Every request gets its own id. Uploads are staged as
``<UPLOAD_FOLDER>/<request_id><ext>`` and outputs are written under
``<OUTPUT_FOLDER>/<request_id>/``, so two requests never share a path.
"""
import logging
import os
import shutil
import time
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

from werkzeug.datastructures import FileStorage

from docupper.models import ConversionJob, UploadedFile, detect_extension

# Child of the Flask app logger, usable after the request context is gone
logger = logging.getLogger(__name__)


def new_request_id() -> str:
    return uuid.uuid4().hex


def ensure_dirs(*folders: str) -> None:
    for folder in folders:
        os.makedirs(folder, exist_ok=True)


def save_upload(file: FileStorage, upload_folder: str, request_id: str) -> UploadedFile:
    """Stage an incoming upload on disk."""
    ensure_dirs(upload_folder)
    extension = detect_extension(file.filename)
    path = os.path.join(upload_folder, f"{request_id}{extension}")
    try:
        file.save(path)
    except Exception:
        remove_file(path)
        raise
    return UploadedFile(original_filename=file.filename, path=path, extension=extension)


def output_path(output_folder: str, request_id: str, upload: UploadedFile) -> str:
    """Reserve the per-request path the converted document is written to."""
    folder = os.path.join(output_folder, request_id)
    ensure_dirs(folder)
    return os.path.join(folder, upload.output_name)


@contextmanager
def staged_conversion(
    file: FileStorage,
    upload_folder: str,
    output_folder: str,
    retain_output: bool = False,
) -> Iterator[ConversionJob]:
    """Stage an upload and reserve its output path for one conversion.

    The staged upload is always deleted on exit. The output folder is deleted
    too, unless the conversion succeeded and ``retain_output`` is set; a
    failed conversion never leaves a partial output behind.
    """
    request_id = new_request_id()
    upload = None
    out_path = None
    succeeded = False
    try:
        upload = save_upload(file, upload_folder, request_id)
        out_path = output_path(output_folder, request_id, upload)
        yield ConversionJob(request_id=request_id, upload=upload, output_path=out_path)
        succeeded = True
    finally:
        if upload is not None:
            remove_file(upload.path)
        if not (succeeded and retain_output):
            discard_output(out_path)


def remove_file(path: Optional[str]) -> None:
    """Delete a file, logging instead of raising on failure."""
    if not path:
        return
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove {path}: {e}")


def discard_output(path: Optional[str]) -> None:
    """Delete a generated document together with its request folder."""
    if not path:
        return
    folder = os.path.dirname(path)
    try:
        shutil.rmtree(folder)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove output folder {folder}: {e}")


def purge_outputs(output_folder: str, max_age_seconds: int, now: Optional[float] = None) -> int:
    """Remove retained request folders older than ``max_age_seconds``.

    Returns the number of folders removed.
    """
    if not os.path.isdir(output_folder):
        return 0
    now = time.time() if now is None else now
    removed = 0
    for entry in sorted(os.listdir(output_folder)):
        folder = os.path.join(output_folder, entry)
        if not os.path.isdir(folder):
            continue
        if now - os.path.getmtime(folder) < max_age_seconds:
            continue
        shutil.rmtree(folder, ignore_errors=True)
        removed += 1
    return removed
