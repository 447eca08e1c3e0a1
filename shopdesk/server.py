import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS

from shopdesk.config import DevConfig
from shopdesk.extensions import db

logger = logging.getLogger(__name__)


def configure_logging(app):
    """File + console logging; console only while testing."""
    handlers = [logging.StreamHandler()]
    if not app.config.get('TESTING'):
        logs_dir = app.config['LOGS_DIR']
        os.makedirs(logs_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(logs_dir, 'app.log')))

    logging.basicConfig(
        level=logging.DEBUG if app.config.get('DEBUG') else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=handlers,
    )


def register_blueprints(app):
    from shopdesk.api.customer import customer_bp
    from shopdesk.api.expense import expense_bp
    from shopdesk.api.invoice import invoice_bp
    from shopdesk.api.item import item_bp
    from shopdesk.api.settings import settings_bp
    from shopdesk.api.vendor import vendor_bp

    for bp in (item_bp, vendor_bp, customer_bp, invoice_bp, expense_bp, settings_bp):
        app.register_blueprint(bp, url_prefix='/api')


def create_app(config_object=DevConfig):
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app)

    uri = app.config.get('SQLALCHEMY_DATABASE_URI') or ''
    if uri.startswith('sqlite:///') and ':memory:' not in uri:
        os.makedirs(os.path.dirname(uri[len('sqlite:///'):]), exist_ok=True)

    db.init_app(app)
    logger.info("Database connected: %s", "sqlite" if uri.startswith("sqlite") else "non-sqlite")

    CORS(app, supports_credentials=True, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', [])}})

    with app.app_context():
        # models must be imported before create_all
        from shopdesk.models import customer, expense, invoice, item, settings, vendor  # noqa: F401
        db.create_all()

    register_blueprints(app)

    @app.route('/health')
    def health_check():
        return jsonify({'status': 'ok', 'database': db.describe()})

    return app


if __name__ == '__main__':
    app = create_app()
    logger.info("Starting shopdesk server...")
    app.run(host=app.config.get('FLASK_HOST', '0.0.0.0'), port=app.config.get('FLASK_PORT', 5000))
