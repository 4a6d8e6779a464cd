from datetime import datetime
from ..extensions import db


class Company(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(128), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    sector = db.Column(db.String(128))
    tagline = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_summary(self):
        return {"id": self.id, "name": self.name, "slug": self.slug}

    def to_dict(self):
        return {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "sector": self.sector,
            "tagline": self.tagline,
        }
