"""
Person store: the read-only query interface over the people table.
Handlers receive an instance through app.extensions rather than a global.
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from idverify.errors import IntegrityFault, StoreError
from idverify.models import Person, PersonRecord


class PersonStore:
    """Exact and prefix lookups backed by a Flask-SQLAlchemy session"""

    def __init__(self, db):
        self.db = db

    def get(self, national_id):
        """Exact match. Returns a PersonRecord or None."""
        return self._first(select(Person).where(Person.national_id == national_id).limit(1))

    def find_by_prefix(self, prefix):
        """First record (by national_id) whose id starts with prefix, or None."""
        query = (
            select(Person)
            .where(Person.national_id.startswith(prefix, autoescape=True))
            .order_by(Person.national_id)
            .limit(1)
        )
        return self._first(query)

    def _first(self, query):
        try:
            person = self.db.session.execute(query).scalars().first()
        except LookupError as exc:
            # Enum column holding a value outside the declared set
            self.db.session.rollback()
            raise IntegrityFault(str(exc)) from exc
        except SQLAlchemyError as exc:
            self.db.session.rollback()
            raise StoreError(str(exc)) from exc

        if person is None:
            return None
        return PersonRecord.from_model(person)
