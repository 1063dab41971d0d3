from flask import Blueprint, request, jsonify
import logging
from linkcleaner.services.launcher import build_item, render_items

logger = logging.getLogger(__name__)

bp = Blueprint('main', __name__)


# ──── REST API ─────────────────────────────────────────────────────────────
@bp.route('/api/clean')
def api_clean():
    """
    REST — clean the product link given in ?q=.
    Returns the same {"items": [...]} document the command line prints; a
    missing or unparseable link comes back as an invalid row, not an HTTP error.
    """
    query = request.args.get('q')
    item = build_item(query)
    return jsonify(render_items([item]))


@bp.route('/health')
def health():
    return jsonify({'status': 'ok'})
