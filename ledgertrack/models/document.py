from datetime import datetime
from ..extensions import db


class Document(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    label = db.Column(db.String(255))
    file_url = db.Column(db.String(512))
    type = db.Column(db.String(64))
    number = db.Column(db.String(64))
    date = db.Column(db.Date)
    company_id = db.Column(db.Integer, db.ForeignKey("company.id"), index=True)
    uploaded_by_id = db.Column(db.Integer, db.ForeignKey("user.id"), index=True)
    # An entry links to at most one supporting document
    accounting_entry_id = db.Column(
        db.String(36), db.ForeignKey("accounting_entry.id", ondelete="SET NULL"), index=True
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    accounting_entry = db.relationship("AccountingEntry", back_populates="documents")

    def to_dict(self):
        return {
            "id": self.id,
            "label": self.label,
            "fileUrl": self.file_url,
            "type": self.type,
            "number": self.number,
            "date": self.date.isoformat() if self.date else None,
        }
