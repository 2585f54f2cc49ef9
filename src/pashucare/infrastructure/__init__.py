"""
インフラストラクチャ層

ローカルストレージへの永続化、外部向けアクションのスタブなどの外部システム依存を提供します。
"""

from .local_storage import LocalStorage, MemoryStorage, StorageCorruptionError
from .ledger_store import LedgerStore, ADOPTED_ANIMALS_KEY
from .outreach_client import OutreachClient

__all__ = [
    "LocalStorage",
    "MemoryStorage",
    "StorageCorruptionError",
    "LedgerStore",
    "ADOPTED_ANIMALS_KEY",
    "OutreachClient",
]
