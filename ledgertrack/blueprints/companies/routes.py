from flask import jsonify
from flask_login import login_required

from ...errors import NotFound
from ...ledger import EntryFilter, compute_pnl
from ...models.company import Company
from ..accounting.helpers import entry_query, request_filter
from . import companies_bp


def _get_company(slug):
    slug = (slug or "").lower().strip()
    company = Company.query.filter_by(slug=slug).first()
    if company is None:
        raise NotFound("Entreprise introuvable")
    return company


@companies_bp.route("", methods=["GET"])
def list_companies():
    companies = Company.query.order_by(Company.name.asc()).all()
    return jsonify([c.to_dict() for c in companies])


@companies_bp.route("/<slug>", methods=["GET"])
def detail(slug):
    return _get_company(slug).to_dict()


@companies_bp.route("/<slug>/summary", methods=["GET"])
@login_required
def summary(slug):
    """Revenue, expense and balance over every entry of the company."""
    company = _get_company(slug)
    entries = entry_query().find(EntryFilter(company_slug=company.slug))
    report = compute_pnl(entries)
    return {
        "companyId": company.id,
        "companySlug": company.slug,
        "companyName": company.name,
        "revenus": float(report.total_revenue),
        "depenses": float(report.total_expense),
        "solde": float(report.net_result),
    }


@companies_bp.route("/<slug>/transactions", methods=["GET"])
@login_required
def transactions(slug):
    """Entries of one company, most recent first; ``type``/``startDate``/``endDate`` narrow it."""
    company = _get_company(slug)
    criteria = request_filter().model_copy(update={"company_slug": company.slug})
    entries = entry_query().find(criteria, newest_first=True)
    return jsonify([e.to_dict() for e in entries])
