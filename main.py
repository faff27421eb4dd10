import logging
import sys

from idverify import create_app
from idverify.audit import STARTUP_ERROR
from idverify.config import tls_files
from idverify.errors import ConfigError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("idverify.main")


def build_app():
    """Create the app or exit; without database settings there is nowhere to audit."""
    try:
        return create_app()
    except ConfigError as e:
        logger.critical(f"Startup failed: {e}")
        sys.exit(1)


def require_tls(app):
    """Return (cert_file, key_file); on failure record STARTUP_ERROR and exit."""
    try:
        return tls_files()
    except ConfigError as e:
        app.logger.critical(f"Startup failed: {e}")
        with app.app_context():
            app.extensions['idverify']['audit_log'].record(STARTUP_ERROR, str(e))
        sys.exit(1)


app = build_app()
cert_file, key_file = require_tls(app)


if __name__ == "__main__":
    port = app.config['PORT']
    app.logger.info(f"Server started on :{port} with SSL")
    app.run(host='0.0.0.0', port=port, ssl_context=(cert_file, key_file))
