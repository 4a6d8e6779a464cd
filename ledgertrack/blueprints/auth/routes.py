from flask import current_app, request
from flask_login import login_user, logout_user, login_required, current_user
from flask_wtf.csrf import generate_csrf
from werkzeug.security import generate_password_hash, check_password_hash
from ...extensions import db, limiter
from ...models.user import User
from . import auth_bp


def _credentials():
    data = request.get_json(silent=True) or request.form
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    return data, email, password


@auth_bp.route("/csrf", methods=["GET"])
def csrf_token():
    return {"csrfToken": generate_csrf()}


@auth_bp.route("/login", methods=["POST"])
@limiter.limit("10/minute")
def login():
    _, email, password = _credentials()
    user = User.query.filter_by(email=email).first()
    if user and check_password_hash(user.password_hash, password):
        login_user(user)
        return user.to_summary()
    current_app.logger.warning(f"Failed login attempt for {email!r}")
    return {"error": "Identifiants invalides"}, 401


@auth_bp.route("/register", methods=["POST"])
@limiter.limit("10/minute")
def register():
    data, email, password = _credentials()
    if not email or not password:
        return {"error": "Email et mot de passe requis"}, 400
    if User.query.filter_by(email=email).first():
        return {"error": "Email déjà enregistré"}, 409
    u = User(email=email, name=data.get("name"), password_hash=generate_password_hash(password))
    db.session.add(u); db.session.commit()
    return u.to_summary(), 201


@auth_bp.route("/me", methods=["GET"])
@login_required
def me():
    return current_user.to_summary()


@auth_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return {"success": True}
