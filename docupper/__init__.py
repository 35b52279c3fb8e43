"""
docupper Application Factory
"""
import os
from datetime import datetime, timezone

import click
from flask import Flask, jsonify

from docupper.config import get_config

# Version info
APP_VERSION = os.environ.get("APP_VERSION", "2026.10")
BUILD_TIME = os.environ.get("BUILD_TIME", "")
GIT_COMMIT = os.environ.get("GIT_COMMIT", "")


def create_app(config_name=None, overrides=None):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    if overrides:
        app.config.update(overrides)

    # Relative folders resolve against the working directory at startup
    for key in ("UPLOAD_FOLDER", "OUTPUT_FOLDER"):
        app.config[key] = os.path.abspath(app.config[key])

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO").upper())

    from docupper import storage
    storage.ensure_dirs(app.config["UPLOAD_FOLDER"], app.config["OUTPUT_FOLDER"])

    # Register blueprints
    from docupper.api import api_bp
    app.register_blueprint(api_bp)

    @app.errorhandler(413)
    def too_large(error):
        return "File too large", 413, {"Content-Type": "text/plain; charset=utf-8"}

    # Health check endpoint
    @app.route('/healthz')
    def healthz():
        """Health check for load balancers and monitoring"""
        font_ready = os.path.isfile(app.config["PDF_FONT_PATH"])
        folders_ready = all(
            os.access(app.config[key], os.W_OK) for key in ("UPLOAD_FOLDER", "OUTPUT_FOLDER")
        )
        return jsonify({
            "status": "ok" if font_ready and folders_ready else "degraded",
            "version": app.config.get("APP_VERSION", APP_VERSION),
            "font_ready": font_ready,
            "folders_ready": folders_ready,
            "timestamp": datetime.now(timezone.utc).isoformat()
        })

    # Version endpoint
    @app.route('/version')
    def version():
        """Version and build info"""
        from docupper.services import SUPPORTED_EXTENSIONS
        return jsonify({
            "version": app.config.get("APP_VERSION", APP_VERSION),
            "build_time": app.config.get("BUILD_TIME", BUILD_TIME),
            "git_commit": app.config.get("GIT_COMMIT", GIT_COMMIT),
            "formats": list(SUPPORTED_EXTENSIONS),
        })

    @app.cli.command("purge-outputs")
    @click.option("--max-age", type=int, default=None,
                  help="Age in seconds after which retained outputs are removed.")
    def purge_outputs_command(max_age):
        """Remove retained output folders older than the TTL."""
        max_age = app.config["OUTPUT_TTL_SECONDS"] if max_age is None else max_age
        removed = storage.purge_outputs(app.config["OUTPUT_FOLDER"], max_age)
        app.logger.info(f"Purged {removed} output folder(s) older than {max_age}s")
        click.echo(f"Removed {removed} output folder(s)")

    return app
