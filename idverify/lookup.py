"""
Request normalization and lookup resolution.

Flow per request: extract the identifier from the channel's request shape,
validate it, then resolve it against the person store. Every terminal
outcome is written to the audit log before control returns to the route.
"""

import re
from dataclasses import dataclass
from urllib.parse import parse_qsl

from idverify import audit
from idverify.errors import MalformedRequestError, NotFoundError, StoreError, ValidationError

WEB = 'web'
TELEPHONY = 'telephony'

MAX_IDENTIFIER_LENGTH = 50
# Shorter telephony identifiers are exact-match only
MIN_PREFIX_LENGTH = 9

# Probed in order; first non-empty value wins
TELEPHONY_FIELDS = (
    'Digits', 'digits', 'DIGITS',
    'SpeechResult', 'speechresult', 'speechResult', 'SPEECHRESULT',
)
NESTED_BODY_FIELD = 'body'

_WHITESPACE = re.compile(r'\s+')
_IDENTIFIER = re.compile(r'^[A-Za-z0-9]+$')


@dataclass(frozen=True)
class LookupRequest:
    channel: str
    raw: str
    identifier: str


def strip_whitespace(value):
    return _WHITESPACE.sub('', value or '')


def _probe(fields):
    for name in TELEPHONY_FIELDS:
        value = fields.get(name)
        if value and value.strip():
            return value
    return None


def parse_nested_body(value):
    """
    Parse a URL-encoded sub-document, optionally prefixed with '?'.

    Empty segments and bare keys are tolerated; a body without a single
    key=value pair, or one that does not decode, is malformed.
    """
    text = value.strip()
    if text.startswith('?'):
        text = text[1:]
    if '=' not in text:
        raise MalformedRequestError(f"Nested body has no key=value pair: {text!r}")
    try:
        return dict(parse_qsl(text, keep_blank_values=True, errors='strict'))
    except ValueError as exc:
        raise MalformedRequestError(f"Unparseable nested body: {exc}") from exc


def extract_web_input(args, audit_log):
    """
    Build a LookupRequest from the web query parameters.
    Raises ValidationError(NO_INPUT) when ``id`` is absent or blank.
    """
    raw = args.get('id') or ''
    identifier = strip_whitespace(raw)
    if not identifier:
        audit_log.record(audit.NO_INPUT, 'web: missing id parameter')
        raise ValidationError(audit.NO_INPUT, raw, 'ID is required')
    return LookupRequest(WEB, raw, identifier)


def extract_telephony_input(form, audit_log):
    """
    Build a LookupRequest from a telephony webhook form.

    Probes the DTMF / speech field aliases directly, then inside the nested
    ``body`` field. Raises MalformedRequestError for an unparseable nested
    body and ValidationError(NO_INPUT) when nothing usable was sent.
    """
    raw = _probe(form)
    if raw is None and form.get(NESTED_BODY_FIELD):
        try:
            nested = parse_nested_body(form[NESTED_BODY_FIELD])
        except MalformedRequestError as exc:
            audit_log.record(audit.INVALID_BODY, f'telephony: {exc}')
            raise
        raw = _probe(nested)

    identifier = strip_whitespace(raw)
    if not identifier:
        audit_log.record(audit.NO_INPUT, 'telephony: no digits or speech result provided')
        raise ValidationError(audit.NO_INPUT, raw or '', 'No input provided')
    return LookupRequest(TELEPHONY, raw, identifier)


def is_valid_identifier(identifier):
    return (
        0 < len(identifier) <= MAX_IDENTIFIER_LENGTH
        and _IDENTIFIER.match(identifier) is not None
    )


def validate(request, audit_log):
    """Reject identifiers over 50 chars or outside [A-Za-z0-9]."""
    if not is_valid_identifier(request.identifier):
        audit_log.record(
            audit.INVALID_FORMAT,
            f'{request.channel}: rejected identifier {request.identifier!r}',
        )
        raise ValidationError(audit.INVALID_FORMAT, request.identifier, 'Invalid ID format')
    return request


class LookupResolver:
    """
    Tiered lookup over a PersonStore.

    Web requests use an exact match only. Telephony requests fall back to a
    single prefix match on an exact miss, provided the identifier has at
    least MIN_PREFIX_LENGTH characters. This covers identifiers keyed with a
    trailing letter (e.g. ``123456789`` -> ``123456789v``).
    """

    def __init__(self, store, audit_log):
        self.store = store
        self.audit_log = audit_log

    def resolve(self, request):
        identifier = request.identifier
        try:
            record = self.store.get(identifier)
            if (
                record is None
                and request.channel == TELEPHONY
                and len(identifier) >= MIN_PREFIX_LENGTH
            ):
                record = self.store.find_by_prefix(identifier)
        except StoreError as exc:
            self.audit_log.record(
                audit.STORE_ERROR, f'{request.channel}: lookup of {identifier!r} failed: {exc}'
            )
            raise

        if record is None:
            self.audit_log.record(audit.NOT_FOUND, f'{request.channel}: no match for {identifier!r}')
            raise NotFoundError(identifier)

        self.audit_log.record(
            audit.LOOKUP_SUCCESS,
            f'{request.channel}: {identifier!r} matched {record.national_id!r}; '
            f'name={record.full_name!r} category={record.category!r} remark={record.remark!r}',
        )
        return record
