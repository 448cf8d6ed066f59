"""Translation routes.

POST creates the string and translation when needed; PUT only updates a
translation that already exists. Either way the domain is queued for
re-export once the change is stored.
"""

from flask import Blueprint, request, jsonify

from transapi import get_export_queue, get_resolver
from transapi.services.updates import create_or_update_translation

translations_bp = Blueprint('translations', __name__)


@translations_bp.route('/<domain_name>/strings/<string_name>/translations/<lang>', methods=['POST', 'PUT'])
def set_translation(domain_name, string_name, lang):
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or not isinstance(data.get('content'), str):
        return jsonify({'error': 'Could not decode request: a "content" string is required'}), 400

    result = create_or_update_translation(
        get_resolver(),
        domain_name,
        string_name,
        lang,
        data['content'],
        allow_create=request.method == 'POST'
    )

    get_export_queue().enqueue(domain_name)

    return jsonify({
        'result': 'ok',
        'created': result.created,
        'translation': result.translation.to_dict()
    }), 201 if result.created else 200
