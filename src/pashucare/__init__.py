"""
pashucare

PashuCare 動物福祉サイトの譲渡カタログ・譲渡申請台帳を提供します。
"""

__version__ = "0.1.0"
