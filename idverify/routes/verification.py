"""
Verification routes for the web widget
Public lookup endpoint returning an HTML fragment per person
"""

from flask import Blueprint, current_app, make_response, request

from idverify.errors import NotFoundError, StoreError, ValidationError
from idverify.lookup import LookupResolver, extract_web_input, validate
from idverify.rendering import render_web_fragment
from idverify.routes import get_audit_log, get_store

verification_bp = Blueprint('verification', __name__)


def _empty(status):
    response = make_response('', status)
    response.headers.pop('Content-Type', None)
    return response


@verification_bp.route('/verify', methods=['GET'])
def verify():
    """
    Look up a person by national ID.
    400 for a missing or malformed id, 404 when unknown, 500 on store failure.
    """
    audit_log = get_audit_log()
    try:
        lookup = validate(extract_web_input(request.args, audit_log), audit_log)
        record = LookupResolver(get_store(), audit_log).resolve(lookup)
        fragment = render_web_fragment(record)
    except ValidationError:
        return _empty(400)
    except NotFoundError:
        return _empty(404)
    except StoreError as e:
        current_app.logger.error(f"Database error during web lookup: {e}")
        return _empty(500)

    response = make_response(fragment, 200)
    response.headers['Content-Type'] = 'text/html; charset=utf-8'
    return response
