"""
Strict input schemas for the ledger.

Request bodies and query strings are validated here, at the boundary, so that
an unknown entry type or a missing company is reported before the store is
ever touched.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import InvalidCompany, InvalidPayload, InvalidType
from ..models.accounting import EntryType


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def parse_date(value: Any) -> Optional[date]:
    """Accept dates, datetimes, ISO strings and French day-first strings."""
    value = _blank_to_none(value)
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid date: {value!r}")
    try:
        return date_parser.isoparse(value.strip()).date()
    except ValueError:
        pass
    try:
        return date_parser.parse(value, dayfirst=True).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date: {value!r}") from e


class EntryFilter(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    company_slug: Optional[str] = Field(None, alias="companySlug")
    start_date: Optional[date] = Field(None, alias="startDate")
    end_date: Optional[date] = Field(None, alias="endDate")
    account_class: Optional[str] = Field(None, alias="accountClass")
    entry_type: Optional[EntryType] = Field(None, alias="type")

    @field_validator("company_slug", "account_class", mode="before")
    @classmethod
    def _strip(cls, v):
        v = _blank_to_none(v)
        return v.strip() if isinstance(v, str) else v

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _dates(cls, v):
        return parse_date(v)

    @field_validator("entry_type", mode="before")
    @classmethod
    def _type(cls, v):
        return _blank_to_none(v)

    @classmethod
    def from_args(cls, args) -> "EntryFilter":
        """Build a filter from a query-string mapping (e.g. ``request.args``)."""
        try:
            return cls.model_validate(dict(args.items()) if hasattr(args, "items") else args)
        except ValidationError as e:
            if any(err["loc"] and err["loc"][0] == "type" for err in e.errors()):
                raise InvalidType() from e
            raise InvalidPayload(_first_error(e)) from e

    def without_account_class(self) -> "EntryFilter":
        return self.model_copy(update={"account_class": None})


class EntryInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: EntryType
    amount: Decimal = Field(..., ge=0, allow_inf_nan=False)
    company_slug: str = Field(..., alias="companySlug", min_length=1)
    label: Optional[str] = None
    entry_date: Optional[date] = Field(None, alias="date")
    journal_code: Optional[str] = Field(None, alias="journalCode")
    reference: Optional[str] = None
    debit_account: Optional[str] = Field(None, alias="debitAccount")
    credit_account: Optional[str] = Field(None, alias="creditAccount")
    document_type: Optional[str] = Field(None, alias="documentType")
    document_number: Optional[str] = Field(None, alias="documentNumber")
    document_date: Optional[date] = Field(None, alias="documentDate")
    document_id: Optional[int] = Field(None, alias="documentId")

    @field_validator(
        "company_slug", "label", "journal_code", "reference", "debit_account",
        "credit_account", "document_type", "document_number", mode="before",
    )
    @classmethod
    def _strip(cls, v):
        v = _blank_to_none(v)
        return v.strip() if isinstance(v, str) else v

    @field_validator("amount", mode="before")
    @classmethod
    def _amount(cls, v):
        if isinstance(v, str):
            v = v.strip().replace(" ", "").replace(",", ".")
        return v

    @field_validator("entry_date", "document_date", mode="before")
    @classmethod
    def _dates(cls, v):
        return parse_date(v)

    @field_validator("document_id", mode="before")
    @classmethod
    def _document_id(cls, v):
        return _blank_to_none(v)

    @classmethod
    def parse(cls, data) -> "EntryInput":
        """Validate a request body, mapping failures onto the ledger errors."""
        if not isinstance(data, dict):
            raise InvalidPayload("Corps de requête JSON attendu")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            fields = {err["loc"][0] for err in e.errors() if err["loc"]}
            if "companySlug" in fields or "company_slug" in fields:
                raise InvalidCompany() from e
            if "type" in fields:
                raise InvalidType() from e
            raise InvalidPayload(_first_error(e)) from e


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]
