"""
Conversion Blueprint - upload page and upload handler
"""
import io

from flask import Blueprint, current_app, render_template, request, send_file

from docupper import services, storage
from docupper.errors import ConversionError, MissingFileError, ProcessingError
from docupper.models import detect_extension

api_bp = Blueprint('api', __name__)


@api_bp.errorhandler(ConversionError)
def handle_conversion_error(error: ConversionError):
    return error.message, error.status_code, {"Content-Type": "text/plain; charset=utf-8"}


# ============ Routes ============

@api_bp.route("/", methods=["GET"])
def index():
    return render_template("index.html", accept=",".join(services.SUPPORTED_EXTENSIONS))


@api_bp.route("/upload", methods=["POST"])
def upload():
    file = request.files.get("file")
    if not file or not (file.filename or "").strip():
        current_app.logger.info("Upload rejected: no file")
        raise MissingFileError()

    extension = detect_extension(file.filename)
    try:
        converter = services.get_converter(extension)
    except ConversionError:
        current_app.logger.info(f"Upload rejected: unsupported format '{extension}' ({file.filename})")
        raise

    cfg = current_app.config
    try:
        with storage.staged_conversion(
            file,
            cfg["UPLOAD_FOLDER"],
            cfg["OUTPUT_FOLDER"],
            retain_output=cfg.get("RETAIN_OUTPUTS", False),
        ) as job:
            current_app.logger.info(
                f"Converting {job.upload.original_filename} as {extension} ({job.request_id})"
            )
            services.convert(job.upload, job.output_path, cfg)
            # Read before the output folder is cleaned up on exit
            with open(job.output_path, "rb") as f:
                payload = io.BytesIO(f.read())
    except ProcessingError:
        current_app.logger.exception(f"Conversion failed for {file.filename}")
        raise
    except Exception as e:
        current_app.logger.exception(f"Conversion failed for {file.filename}")
        raise ProcessingError(f"{type(e).__name__}: {e}") from e

    return send_file(
        payload,
        as_attachment=True,
        download_name=job.upload.output_name,
        mimetype=converter.mimetype,
    )
