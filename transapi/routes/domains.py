"""Domain routes: listing, full domain trees and export to XLIFF."""

from flask import Blueprint, current_app, jsonify

from transapi.services.exporter import export_domain, list_domains, load_domain

domains_bp = Blueprint('domains', __name__)


@domains_bp.route('', methods=['GET'])
def get_domains():
    """List the names of all domains."""
    domains = list_domains()

    return jsonify({
        'domains': [domain.name for domain in domains]
    }), 200


@domains_bp.route('/<name>', methods=['GET'])
def get_domain(name):
    """Get a domain with all its strings and their translations."""
    domain = load_domain(name)
    return jsonify(domain.to_dict(include_strings=True)), 200


@domains_bp.route('/<name>/export', methods=['POST'])
def export(name):
    """Write the domain to XLIFF files in the export directory, one per language."""
    paths = export_domain(
        name,
        current_app.config['EXPORT_DIR'],
        source_language=current_app.config['XLIFF_SOURCE_LANGUAGE'],
    )

    return jsonify({
        'result': 'ok',
        'files': [path.name for path in paths]
    }), 200
