"""
オーケストレーション層

利用者操作の受付と、カタログ・台帳・一時表示状態の調整を提供します。
"""

from .adoption_app import AdoptionApp, AdoptionDialog, FlashLevel, FlashMessage, SiteStats, ViewModel

__all__ = ["AdoptionApp", "AdoptionDialog", "FlashLevel", "FlashMessage", "SiteStats", "ViewModel"]
