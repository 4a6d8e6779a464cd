import os
from ledgertrack.app import create_app
from ledgertrack.extensions import db
from ledgertrack.models import Company

GROUP_COMPANIES = [
    {"slug": "africanut-fish-market", "name": "AFRICANUT FISH MARKET",
     "sector": "Aquaculture", "tagline": "Production piscicole & services"},
    {"slug": "magaton-provender", "name": "MAGATON PROVENDER",
     "sector": "Agro-industrie", "tagline": "Aliments & intrants"},
    {"slug": "nouvelle-academie-numerique-africaine", "name": "NOUVELLE ACADEMIE NUMERIQUE AFRICAINE",
     "sector": "Education & Numérique", "tagline": "Formation & digital"},
    {"slug": "africanut-media", "name": "AFRICANUT MEDIA",
     "sector": "Média & Communication", "tagline": "Contenus du groupe"},
]


def seed_companies():
    """Insert the group companies when the company table is empty."""
    if Company.query.count() > 0:
        return 0
    db.session.add_all(Company(**data) for data in GROUP_COMPANIES)
    db.session.commit()
    return len(GROUP_COMPANIES)


if __name__ == "__main__":
    # Create a Flask app instance
    app = create_app()

    # Ensure the instance folder exists
    if not os.path.exists(app.instance_path):
        os.makedirs(app.instance_path)
        print(f"Instance folder created at: {app.instance_path}")

    with app.app_context():
        print("Creating database tables...")
        db.create_all()
        print("Database tables created successfully.")
        seeded = seed_companies()
        if seeded:
            print(f"Seeded {seeded} group companies.")
