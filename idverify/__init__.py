from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from dotenv import load_dotenv

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
cors = CORS()


def create_app(config_overrides=None, store=None, audit_log=None):
    """
    Application factory.

    ``store`` and ``audit_log`` default to the SQL-backed implementations;
    tests pass doubles. Unless ``config_overrides`` carries a database URI the
    settings come from the environment (ConfigError when incomplete).
    """
    from idverify.config import DEFAULTS, load_settings

    app = Flask(__name__)

    # Configuration
    if config_overrides and 'SQLALCHEMY_DATABASE_URI' in config_overrides:
        app.config.update(DEFAULTS)
    else:
        app.config.update(load_settings())
    app.config.update(config_overrides or {})

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    from idverify import models  # noqa: F401  registers tables with metadata
    from idverify.audit import SqlAuditLog, resolve_timezone
    from idverify.store import PersonStore

    # Create tables
    with app.app_context():
        db.create_all()

    if audit_log is None:
        audit_log = SqlAuditLog(db, resolve_timezone(app.config.get('AUDIT_TIMEZONE')))
    app.extensions['idverify'] = {
        'store': store if store is not None else PersonStore(db),
        'audit_log': audit_log,
    }

    # Register blueprints
    from idverify.routes.verification import verification_bp
    from idverify.routes.telephony import telephony_bp

    app.register_blueprint(verification_bp)
    app.register_blueprint(telephony_bp)

    # Only the widget origin may read lookups; the webhook is not browser-invoked
    cors.init_app(app, resources={
        r'^/verify$': {
            'origins': [app.config['ALLOWED_ORIGIN']],
            'methods': ['GET'],
            'allow_headers': ['Content-Type', 'Accept'],
        },
    })

    return app
