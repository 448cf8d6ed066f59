"""JSON error responses for the API."""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from transapi.errors import NotFound, TranslationApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app):

    @app.errorhandler(NotFound)
    def handle_not_found(e):
        return jsonify({'error': str(e)}), 404

    @app.errorhandler(TranslationApiError)
    def handle_engine_error(e):
        logger.error(f"{type(e).__name__}: {e}")
        return jsonify({'error': str(e)}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error")
        return jsonify({'error': str(e)}), 500
