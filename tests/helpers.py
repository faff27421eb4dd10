from idverify.audit import AuditLog


class RecordingAuditLog(AuditLog):
    """Keeps events in memory so tests can assert on them"""

    def __init__(self):
        super().__init__()
        self.events = []

    def _write(self, timestamp, kind, detail):
        self.events.append((timestamp, kind, detail))

    def kinds(self):
        return [kind for _, kind, _ in self.events]

    def details(self, kind):
        return [detail for _, k, detail in self.events if k == kind]


class FakeStore:
    """In-memory store double that counts queries and can fail on demand"""

    def __init__(self, records=(), error=None):
        self.records = {record.national_id: record for record in records}
        self.error = error
        self.calls = []

    def get(self, national_id):
        self.calls.append(('get', national_id))
        if self.error:
            raise self.error
        return self.records.get(national_id)

    def find_by_prefix(self, prefix):
        self.calls.append(('find_by_prefix', prefix))
        if self.error:
            raise self.error
        matches = sorted(key for key in self.records if key.startswith(prefix))
        return self.records[matches[0]] if matches else None
