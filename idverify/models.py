from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.dialects import mysql

from idverify import db
from idverify.errors import IntegrityFault

STUDENT = 'student'
STAFF = 'staff'
CATEGORIES = (STUDENT, STAFF)


class Person(db.Model):
    """Registered person. Maintained by an external admin process; read-only here."""
    __tablename__ = 'people'

    national_id = db.Column(db.String(50), primary_key=True)
    full_name = db.Column(db.String(100), nullable=False)
    category = db.Column(db.Enum(*CATEGORIES, name='category'), nullable=False)
    remark = db.Column(db.Text().with_variant(mysql.LONGTEXT(), 'mysql'))

    def __repr__(self):
        return f'<Person {self.national_id}>'


class AuditEvent(db.Model):
    """Append-only audit trail of request outcomes"""
    __tablename__ = 'errors'

    id = db.Column(db.BigInteger().with_variant(db.Integer, 'sqlite'), primary_key=True, autoincrement=True)
    timestamp = db.Column(db.DateTime(timezone=True), nullable=False, index=True,
                          default=lambda: datetime.now(timezone.utc))
    error_type = db.Column(db.String(50), nullable=False, index=True)
    remark = db.Column(db.Text)

    def __repr__(self):
        return f'<AuditEvent {self.error_type} @ {self.timestamp}>'


@dataclass(frozen=True)
class PersonRecord:
    national_id: str
    full_name: str
    category: str
    remark: str = ''

    @classmethod
    def from_model(cls, person):
        """Copy a Person row; unknown categories are a data-integrity fault."""
        if person.category not in CATEGORIES:
            raise IntegrityFault(
                f"Person {person.national_id!r} has unrecognized category {person.category!r}"
            )
        return cls(
            national_id=person.national_id,
            full_name=person.full_name,
            category=person.category,
            remark=person.remark or '',
        )

    @property
    def is_student(self):
        return self.category == STUDENT
