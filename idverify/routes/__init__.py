from flask import current_app


def get_store():
    return current_app.extensions['idverify']['store']


def get_audit_log():
    return current_app.extensions['idverify']['audit_log']
