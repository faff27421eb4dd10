"""
Channel-specific output: HTML fragments for the web widget and TwiML
documents for the telephony webhook.
"""

import html
import re

from flask import current_app, render_template

from idverify.errors import IntegrityFault
from idverify.models import STAFF, STUDENT

COMPLETED_COURSES = (
    'Introduction to Basic Psychology (One Hour Workshop)',
    'Introduction to Career Guidance (One Hour Workshop)',
    'Introduction to Basic Counselling (One Hour Workshop)',
    'Introduction to Basic IT (One Hour Workshop)',
    'Introduction to Basic Business Management (One Hour Workshop)',
    'Introduction to Basic Spoken English (One Hour Workshop)',
    'Introduction to Memory Boosting (One Hour Workshop)',
    'Introduction to Basic Personality Development (One Hour Workshop)',
    'Introduction to Entrepreneurship (One Hour Workshop)',
    'Introduction to Basic Body Language (One Hour Workshop)',
    'Introduction to Basic Counselling Skills (One Hour Workshop)',
    'Introduction to Basic Human Resource Management (One Hour Workshop)',
    'Introduction to Basic Teaching Methodologies (One Hour Workshop)',
    'Introduction to Basic Marketing Management (One Hour Workshop)',
)

SPOKEN_CHARACTERS = {
    '0': 'zero', '1': 'one', '2': 'two', '3': 'three', '4': 'four',
    '5': 'five', '6': 'six', '7': 'seven', '8': 'eight', '9': 'nine',
    'v': 'vee', 'V': 'vee',
}

SPOKEN_CATEGORIES = {STUDENT: 'student', STAFF: 'staff member'}

MSG_NO_MATCH = 'Sorry, no match found for the entered number.'
MSG_INVALID_FORMAT = 'Invalid input format. Please use only numbers or letters.'
MSG_NO_INPUT = 'Sorry, we did not receive any input.'

_BREAK = re.compile(r'<\s*br\s*/?\s*>', re.IGNORECASE)
_TAG = re.compile(r'<[^>]*>')
_WHITESPACE = re.compile(r'\s+')
_REPEATED_PERIODS = re.compile(r'(\.\s*){2,}')


def spell_identifier(identifier):
    """'123v' -> 'one two three vee'"""
    return ' '.join(SPOKEN_CHARACTERS.get(char, char) for char in identifier)


def speakable_remark(remark):
    """Strip markup from a remark; line breaks become sentence ends."""
    if not remark:
        return ''
    text = _BREAK.sub('. ', remark)
    text = _TAG.sub(' ', text)
    text = html.unescape(text)
    text = _WHITESPACE.sub(' ', text).strip()
    text = _REPEATED_PERIODS.sub('. ', text).strip()
    return text.lstrip('. ').strip()


def spoken_category(category):
    try:
        return SPOKEN_CATEGORIES[category]
    except KeyError:
        raise IntegrityFault(f"Unrecognized category {category!r}") from None


def render_web_fragment(record):
    """HTML fragment for a resolved record; the template is picked by category."""
    if record.is_student:
        return render_template('verification/student.html', record=record, courses=COMPLETED_COURSES)
    if record.category == STAFF:
        return render_template('verification/staff.html', record=record)
    raise IntegrityFault(f"Unrecognized category {record.category!r}")


def _voice_response(messages, sign_off=True):
    if sign_off:
        organization = current_app.config.get('ORGANIZATION_NAME', 'Hogwarts')
        messages = list(messages) + [f'Thank You For Contacting {organization}.']
    return render_template('twiml/response.xml', messages=messages)


def render_voice_match(request, record):
    messages = [
        f'You entered {spell_identifier(request.identifier)}. '
        f'The name is {record.full_name}, and it is verified to be a {spoken_category(record.category)}.'
    ]
    remark = speakable_remark(record.remark)
    if remark:
        messages.append(f'Remarks: {remark}')
    return _voice_response(messages)


def render_voice_no_match():
    return _voice_response([MSG_NO_MATCH])


def render_voice_invalid_format():
    return _voice_response([MSG_INVALID_FORMAT], sign_off=False)


def render_voice_no_input():
    return _voice_response([MSG_NO_INPUT])
