from flask import Blueprint, current_app, jsonify, request

from ..exceptions import MockServerError, StorageIOError
from ..extensions import get_records

bp = Blueprint("collections", __name__)


def _empty(code: int):
    return jsonify({}), code


def _preflight():
    resp = jsonify({})
    # flask-cors answers real preflights itself; plain OPTIONS still gets the advertisement
    if "Access-Control-Request-Method" not in request.headers:
        resp.headers["Access-Control-Allow-Methods"] = ", ".join(current_app.config["CORS_ALLOW_METHODS"])
        resp.headers["Access-Control-Allow-Headers"] = ", ".join(current_app.config["CORS_ALLOW_HEADERS"])
    return resp


@bp.get("/")
def get_document():
    try:
        return jsonify(get_records().document())
    except MockServerError as e:
        current_app.logger.warning("Unable to load document: %s", e)
        return _empty(404)


@bp.get("/<name>", provide_automatic_options=False)
def list_collection(name):
    try:
        return jsonify(get_records().list_collection(name))
    except MockServerError as e:
        current_app.logger.info("GET /%s: %s", name, e)
        return _empty(404)


@bp.get("/<name>/<record_id>", provide_automatic_options=False)
def get_record(name, record_id):
    try:
        return jsonify(get_records().find_by_id(name, record_id))
    except MockServerError as e:
        current_app.logger.info("GET /%s/%s: %s", name, record_id, e)
        return _empty(404)


@bp.post("/<name>", provide_automatic_options=False)
def create_record(name):
    try:
        record = get_records().insert(name, request.get_data(as_text=True))
    except StorageIOError:
        current_app.logger.exception("Failed to save new record in %s", name)
        return _empty(500)
    except MockServerError as e:
        current_app.logger.info("POST /%s rejected: %s", name, e)
        return _empty(422)
    current_app.logger.info("Created %s/%s", name, record["id"])
    return jsonify(record), 201


@bp.route("/<name>/<record_id>", methods=["PUT", "PATCH"], provide_automatic_options=False)
def replace_record(name, record_id):
    try:
        record = get_records().replace_by_id(name, record_id, request.get_data(as_text=True))
    except StorageIOError:
        current_app.logger.exception("Failed to save %s/%s", name, record_id)
        return _empty(500)
    except MockServerError as e:
        current_app.logger.info("%s /%s/%s rejected: %s", request.method, name, record_id, e)
        return _empty(422)
    current_app.logger.info("Replaced %s/%s", name, record["id"])
    return jsonify(record)


@bp.delete("/<name>/<record_id>", provide_automatic_options=False)
def delete_record(name, record_id):
    try:
        record = get_records().delete_by_id(name, record_id)
    except StorageIOError:
        current_app.logger.exception("Failed to save after deleting %s/%s", name, record_id)
        return _empty(500)
    except MockServerError as e:
        current_app.logger.info("DELETE /%s/%s rejected: %s", name, record_id, e)
        return _empty(422)
    current_app.logger.info("Deleted %s/%s", name, record_id)
    return jsonify(record)


@bp.route("/<name>", methods=["OPTIONS"])
def collection_options(name):
    return _preflight()


@bp.route("/<name>/<record_id>", methods=["OPTIONS"])
def record_options(name, record_id):
    return _preflight()
