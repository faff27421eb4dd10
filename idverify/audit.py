"""
Audit trail of request outcomes.

The sink is a capability with a single method, ``record(kind, detail)``.
Contract: ``record`` never raises. The database implementation logs its own
failures to the operational logger and drops the event; it does not retry.
"""

import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from idverify.models import AuditEvent

logger = logging.getLogger(__name__)

NO_INPUT = 'NO_INPUT'
INVALID_BODY = 'INVALID_BODY'
INVALID_FORMAT = 'INVALID_FORMAT'
LOOKUP_SUCCESS = 'LOOKUP_SUCCESS'
NOT_FOUND = 'NOT_FOUND'
STORE_ERROR = 'STORE_ERROR'
STARTUP_ERROR = 'STARTUP_ERROR'


def resolve_timezone(name):
    """ZoneInfo for name, falling back to UTC when the zone is unknown."""
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.warning(f"Unknown audit timezone {name!r}, falling back to UTC: {exc}")
        return timezone.utc


class AuditLog:
    """Base sink. Subclasses implement _write; record swallows their failures."""

    def __init__(self, tz=timezone.utc):
        self.tz = tz

    def now(self):
        return datetime.now(self.tz)

    def record(self, kind, detail=''):
        try:
            self._write(self.now(), kind, detail)
        except Exception as exc:
            logger.warning(f"Dropped audit event {kind}: {exc}")

    def _write(self, timestamp, kind, detail):
        raise NotImplementedError


class NullAuditLog(AuditLog):
    """Discards every event"""

    def _write(self, timestamp, kind, detail):
        pass


class SqlAuditLog(AuditLog):
    """Appends AuditEvent rows through the Flask-SQLAlchemy session"""

    def __init__(self, db, tz=timezone.utc):
        super().__init__(tz)
        self.db = db

    def _write(self, timestamp, kind, detail):
        event = AuditEvent(timestamp=timestamp, error_type=kind[:50], remark=detail)
        try:
            self.db.session.add(event)
            self.db.session.commit()
        except Exception:
            self.db.session.rollback()
            raise
