from .set_derivation_service import SetDerivationService

__all__ = ["SetDerivationService"]
