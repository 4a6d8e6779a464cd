"""
Error taxonomy for the ledger. Every error carries the HTTP status the
application layer answers with and a message that is safe to show a client.
"""


class LedgerError(Exception):
    status_code = 500
    message = "Erreur serveur"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"error": self.message}


class InvalidCompany(LedgerError):
    status_code = 400
    message = "Entreprise invalide"


class InvalidType(LedgerError):
    status_code = 400
    message = "Type invalide (PRODUCT ou EXPENSE requis)"


class InvalidPayload(LedgerError):
    status_code = 400
    message = "Données invalides"


class NotFound(LedgerError):
    status_code = 404
    message = "Élément non trouvé"


class NoData(LedgerError):
    """Raised when a report is requested over an empty entry set."""

    status_code = 204
    message = "Aucune écriture trouvée"


class StoreFailure(LedgerError):
    status_code = 500
    message = "Erreur serveur"
