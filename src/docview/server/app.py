"""Flask application: viewer page plus the list/read/render JSON API"""

import logging
from pathlib import Path

from flask import Flask, jsonify, render_template, request

from docview.config import Settings, load_config
from docview.core.fs import FileAccessError, list_dir, read_file
from docview.core.render import render_document, render_source


logger = logging.getLogger(__name__)


def create_app(settings: Settings = None) -> Flask:
    """Build the viewer app for settings.root_dir. State is re-read from disk on every request."""
    settings = settings or load_config()
    root = Path(settings.root_dir).expanduser().resolve()

    app = Flask(__name__)
    app.config["DOCVIEW_SETTINGS"] = settings
    app.config["DOCVIEW_ROOT"] = root

    @app.after_request
    def no_cache(response):
        response.headers["Cache-Control"] = "no-cache"
        return response

    @app.errorhandler(FileAccessError)
    def file_access_error(e: FileAccessError):
        logger.info("%s %s -> %d %s", request.method, request.full_path, e.status, e)
        return jsonify({"error": str(e)}), e.status

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.get("/")
    def index():
        return render_template("index.html", root=root.as_posix(), open_file=request.args.get("file", ""))

    @app.get("/api/list")
    def api_list():
        listing = list_dir(request.args.get("path"), root)
        return jsonify(listing.model_dump())

    @app.get("/api/read")
    def api_read():
        doc = read_file(request.args.get("path"), root, settings.max_file_size)
        return jsonify(doc.model_dump(exclude={"html"}))

    @app.get("/api/render")
    def api_render():
        doc = read_file(request.args.get("path"), root, settings.max_file_size)
        if doc.content is not None:
            if request.args.get("view") == "source":
                doc.html = render_source(doc.content, doc.ext)
            else:
                doc.html = render_document(doc.content, doc.ext, max_depth=settings.max_quote_depth)
        return jsonify(doc.model_dump())

    return app
