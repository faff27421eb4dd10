"""
Telephony (IVR) webhook
Always answers 200 with a TwiML document; the caller cannot act on HTTP status.
"""

from flask import Blueprint, current_app, make_response, request

from idverify.errors import MalformedRequestError, NotFoundError, StoreError, ValidationError
from idverify.lookup import LookupResolver, extract_telephony_input, validate
from idverify.rendering import (
    render_voice_invalid_format,
    render_voice_match,
    render_voice_no_input,
    render_voice_no_match,
)
from idverify.routes import get_audit_log, get_store

telephony_bp = Blueprint('telephony', __name__)


def _twiml(document):
    response = make_response(document, 200)
    response.headers['Content-Type'] = 'application/xml'
    return response


@telephony_bp.route('/twilio/verify', methods=['POST'])
def twilio_verify():
    audit_log = get_audit_log()
    try:
        lookup = extract_telephony_input(request.form, audit_log)
    except (ValidationError, MalformedRequestError):
        return _twiml(render_voice_no_input())

    try:
        validate(lookup, audit_log)
    except ValidationError:
        return _twiml(render_voice_invalid_format())

    try:
        record = LookupResolver(get_store(), audit_log).resolve(lookup)
        document = render_voice_match(lookup, record)
    except NotFoundError:
        return _twiml(render_voice_no_match())
    except StoreError as e:
        current_app.logger.error(f"Database error during telephony lookup: {e}")
        return _twiml(render_voice_no_match())

    return _twiml(document)
