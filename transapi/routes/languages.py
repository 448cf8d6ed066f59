"""Language routes."""

from flask import Blueprint, jsonify

from transapi import db
from transapi.errors import store_errors
from transapi.models import Language

languages_bp = Blueprint('languages', __name__)


@languages_bp.route('', methods=['GET'])
def get_languages():
    """List the registered languages."""
    with store_errors(db.session):
        languages = Language.query.order_by(Language.code).all()

    return jsonify([language.to_dict() for language in languages]), 200
