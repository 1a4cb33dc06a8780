from flask import Blueprint, request, jsonify, current_app
import logging

from piercecalc.utils import dxf_reader, pierce
from piercecalc.utils.normalizer import MalformedEntityError

upload_bp = Blueprint('upload', __name__)


def _engine_options():
    return {
        "precision": current_app.config.get('SNAP_PRECISION'),
        "ordering": current_app.config.get('LOOP_ORDERING'),
    }


def _compute(entities):
    try:
        result = pierce.compute_drawing(entities, **_engine_options())
    except MalformedEntityError as e:
        logging.warning(f"Malformed entity: {e}")
        return jsonify({"error": f"Malformed entity: {e}"}), 400
    # Drawing units are taken as inches; conversion factor is 1.
    return jsonify(result.to_dict()), 200


@upload_bp.route('/upload', methods=['POST'])
def upload_dxf():
    body = request.get_json(silent=True) or {}
    dxf_content = body.get('dxfContent') if isinstance(body, dict) else None
    if not dxf_content or not isinstance(dxf_content, str):
        return jsonify({"error": "No DXF content provided"}), 400
    logging.info(f"/upload received {len(dxf_content)} characters of DXF content")

    try:
        entities = dxf_reader.read_dxf_entities(dxf_content)
    except dxf_reader.DxfParseError as e:
        logging.warning(f"Error parsing DXF: {e}")
        return jsonify({"error": f"Error parsing DXF: {e}"}), 400
    return _compute(entities)


@upload_bp.route('/compute', methods=['POST'])
def compute_entities():
    body = request.get_json(silent=True) or {}
    entities = body.get('entities') if isinstance(body, dict) else None
    if not isinstance(entities, list):
        return jsonify({"error": "Request body must contain an 'entities' list"}), 400
    if not all(isinstance(entity, dict) for entity in entities):
        return jsonify({"error": "Malformed entity: every entity must be an object"}), 400
    logging.info(f"/compute received {len(entities)} entities")
    return _compute(entities)


@upload_bp.route('/health', methods=['GET'])
def health():
    return jsonify({"status": "ok"}), 200
