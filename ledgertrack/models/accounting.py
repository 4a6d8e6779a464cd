import enum
import uuid
from datetime import date, datetime

from ..extensions import db


class EntryType(str, enum.Enum):
    PRODUCT = "PRODUCT"
    EXPENSE = "EXPENSE"


class AccountingEntry(db.Model):
    __tablename__ = "accounting_entry"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    type = db.Column(db.Enum(EntryType, name="entry_type"), nullable=False, index=True)
    amount = db.Column(db.Numeric(14, 2), nullable=False, default=0)
    label = db.Column(db.String(255))
    debit_account = db.Column(db.String(32), index=True)
    credit_account = db.Column(db.String(32), index=True)
    company_id = db.Column(db.Integer, db.ForeignKey("company.id"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False, default=date.today, index=True)
    journal_code = db.Column(db.String(16))
    reference = db.Column(db.String(64))
    document_type = db.Column(db.String(64))
    document_number = db.Column(db.String(64))
    document_date = db.Column(db.Date)
    created_by_id = db.Column(db.Integer, db.ForeignKey("user.id"), index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    company = db.relationship("Company", lazy="joined")
    created_by = db.relationship("User", lazy="joined")
    documents = db.relationship("Document", back_populates="accounting_entry", lazy="selectin")

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.type.value if self.type else None,
            "amount": float(self.amount) if self.amount is not None else 0,
            "label": self.label,
            "debitAccount": self.debit_account,
            "creditAccount": self.credit_account,
            "companyId": self.company_id,
            "date": self.date.isoformat() if self.date else None,
            "journalCode": self.journal_code,
            "reference": self.reference,
            "documentType": self.document_type,
            "documentNumber": self.document_number,
            "documentDate": self.document_date.isoformat() if self.document_date else None,
            "createdById": self.created_by_id,
            "company": self.company.to_summary() if self.company else None,
            "createdBy": self.created_by.to_summary() if self.created_by else None,
            "documents": [d.to_dict() for d in self.documents],
        }
