"""
ドメイン層

動物カタログ・譲渡台帳・フォームバリデーションロジックを提供します。
"""

from .models import ALL_SPECIES, SPECIES_CHOICES, Animal, AdoptionRequest, SortKey, ViewCriteria
from .catalog_store import CatalogStore
from .adoption_ledger import AdoptionLedger
from .validation import (
    FormValidationError,
    InvalidInputError,
    EmptyMessageError,
    NonPositiveAmountError,
)

__all__ = [
    "ALL_SPECIES",
    "SPECIES_CHOICES",
    "Animal",
    "AdoptionRequest",
    "SortKey",
    "ViewCriteria",
    "CatalogStore",
    "AdoptionLedger",
    "FormValidationError",
    "InvalidInputError",
    "EmptyMessageError",
    "NonPositiveAmountError",
]
