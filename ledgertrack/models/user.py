from datetime import datetime
from flask_login import UserMixin
from ..extensions import db


class User(UserMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    name = db.Column(db.String(128))
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(32), default="USER", nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_summary(self):
        return {"id": self.id, "name": self.name, "email": self.email}
