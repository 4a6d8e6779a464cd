from flask import Flask
from .extensions import db, migrate, login_manager, csrf, limiter
from .config import get_config, parse_tolerance
from .errors import LedgerError, NoData


def create_app(config_name=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(get_config(config_name))
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    if app.config["LEDGER_CLASS_DIGITS"] not in (1, 2):
        raise ValueError("LEDGER_CLASS_DIGITS must be 1 or 2")
    app.config["BALANCE_TOLERANCE"] = parse_tolerance(app.config["BALANCE_TOLERANCE"])

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)
    limiter.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        from .models.user import User
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return {"error": "Authentification requise"}, 401

    register_error_handlers(app)

    # Ensure models are imported so Alembic sees them during 'flask db migrate'
    with app.app_context():
        from . import models  # noqa: F401

    # Blueprints
    from .blueprints.auth.routes import auth_bp
    from .blueprints.companies.routes import companies_bp
    from .blueprints.accounting.routes import accounting_bp
    from .blueprints.reports.routes import reports_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(companies_bp)
    app.register_blueprint(accounting_bp)
    app.register_blueprint(reports_bp)

    @app.route("/health")
    def health():
        return {"status": "ok"}

    return app


def register_error_handlers(app):
    @app.errorhandler(LedgerError)
    def handle_ledger_error(e):
        if isinstance(e, NoData):
            app.logger.info(f"No data: {e.message}")
            return "", 204
        if e.status_code >= 500:
            app.logger.error(f"Ledger failure: {e!r}")
        return e.to_dict(), e.status_code

    @app.errorhandler(404)
    def handle_not_found(e):
        return {"error": "Ressource introuvable"}, 404

    @app.errorhandler(429)
    def handle_rate_limit(e):
        return {"error": "Trop de requêtes", "details": str(e.description)}, 429

    @app.errorhandler(500)
    def handle_server_error(e):
        app.logger.exception("Unhandled server error")
        return {"error": "Erreur serveur"}, 500

# For flask run:
# export FLASK_APP="ledgertrack.app:create_app"
# flask run --debug
