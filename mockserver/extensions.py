# mockserver/extensions.py
from flask import current_app
from flask_cors import CORS

from .storage.records import RecordStore

# Configured per app in create_app
cors = CORS()

EXTENSION_KEY = "record_store"


def init_records(app, store) -> RecordStore:
    records = RecordStore(store)
    app.extensions[EXTENSION_KEY] = records
    return records


def get_records() -> RecordStore:
    return current_app.extensions[EXTENSION_KEY]
