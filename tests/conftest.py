"""Shared fixtures: an in-memory app seeded with a few people."""

import pytest

from idverify import create_app, db
from idverify.models import Person, PersonRecord

from helpers import RecordingAuditLog


PEOPLE = [
    dict(national_id='AB123', full_name='Jane Doe', category='student', remark=''),
    dict(national_id='123456789v', full_name='Kamal Perera', category='student', remark=None),
    dict(national_id='998877vvv1', full_name='Nimali Silva', category='staff', remark='Librarian'),
    dict(
        national_id='ST001',
        full_name='Albus Dumbledore',
        category='staff',
        remark='Headmaster<br>Order of Merlin, <b>First Class</b>',
    ),
    dict(national_id='XSS1', full_name='<script>alert(1)</script>', category='student'),
]

TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    'ALLOWED_ORIGIN': 'https://hogwarts-legacy.info',
    'ORGANIZATION_NAME': 'Hogwarts',
}


@pytest.fixture
def audit_log():
    return RecordingAuditLog()


@pytest.fixture
def app(audit_log):
    app = create_app(dict(TEST_CONFIG), audit_log=audit_log)
    with app.app_context():
        for person in PEOPLE:
            db.session.add(Person(**person))
        db.session.commit()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_client(audit_log):
    """Client factory for apps backed by a FakeStore"""
    apps = []

    def _make(store):
        app = create_app(dict(TEST_CONFIG), store=store, audit_log=audit_log)
        apps.append(app)
        return app.test_client()

    yield _make
    for app in apps:
        with app.app_context():
            db.drop_all()


@pytest.fixture
def jane():
    return PersonRecord('AB123', 'Jane Doe', 'student')
