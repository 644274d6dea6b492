"""
Erreurs du CMS — registre, modèle de document, adaptateur de stockage.

Chaque erreur porte un `code` (renvoyé tel quel dans le JSON d'erreur de l'API)
et un `status` HTTP utilisé par `register_error_handlers`.
"""
from typing import List, Optional


class CmsError(Exception):
    code   = "CmsError"
    status = 400


class UnknownBlockType(CmsError):
    code = "UnknownBlockType"

    def __init__(self, block_type: str):
        self.block_type = block_type
        super().__init__(f"Type de bloc inconnu : {block_type!r}")


class NotFound(CmsError):
    code   = "NotFound"
    status = 404

    def __init__(self, what: str, ident: str):
        self.ident = ident
        super().__init__(f"{what} introuvable : {ident}")


class InvalidPath(CmsError):
    code = "InvalidPath"

    def __init__(self, block_type: str, path: str, reason: str = "chemin non éditable"):
        self.block_type = block_type
        self.path = path
        super().__init__(f"{block_type}.{path} : {reason}")


class BlockValidationError(CmsError):
    """Props refusées par le schéma du type (champ requis absent, enum hors liste…)."""
    code = "ValidationError"

    def __init__(self, block_type: str, issues: List["object"]):
        self.block_type = block_type
        self.issues = issues
        detail = "; ".join(f"{i.path or '<props>'}: {i.message}" for i in issues)
        super().__init__(f"Props invalides pour {block_type} — {detail}")


class Unauthorized(CmsError):
    code   = "Unauthorized"
    status = 401

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Session admin requise")


class StoreUnavailable(CmsError):
    """Échec transitoire du stockage — l'appelant peut réessayer."""
    code   = "StoreUnavailable"
    status = 503
