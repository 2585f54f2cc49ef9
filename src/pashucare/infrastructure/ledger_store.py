"""
譲渡台帳ストア

譲渡申請履歴をローカルストレージの固定キーに JSON 配列として永続化します。
"""

import json
import logging
from typing import List, Optional, Union

from pydantic import ValidationError

from ..domain.models import AdoptionRequest
from .local_storage import LocalStorage, MemoryStorage, StorageCorruptionError


ADOPTED_ANIMALS_KEY = "adopted_animals"


class LedgerStore:
    """
    譲渡台帳の永続化ポート

    申請リスト全体を1つのキーに上書き保存し、起動時に読み込みます。
    """

    def __init__(
        self,
        storage: Optional[Union[LocalStorage, MemoryStorage]] = None,
        key: str = ADOPTED_ANIMALS_KEY
    ):
        """
        LedgerStore を初期化

        Args:
            storage: キーバリューストア。None の場合は MemoryStorage を使用。
            key: 保存先キー
        """
        self.storage = storage if storage is not None else MemoryStorage()
        self.key = key
        self.logger = logging.getLogger(__name__)

    def load(self) -> List[AdoptionRequest]:
        """
        保存済みの申請履歴を読み込み

        Returns:
            List[AdoptionRequest]: 申請履歴（未保存・破損時は空リスト）

        Note: 破損データは警告ログのみ記録し、呼び出し元には例外をスローしない
        """
        try:
            raw = self.storage.get_item(self.key)
            if raw is None:
                return []
            return self._decode(raw)
        except StorageCorruptionError as e:
            self.logger.warning(
                f"Stored adoption requests are corrupted, starting with empty ledger: {str(e)}",
                extra={"key": self.key}
            )
            return []

    def save(self, requests: List[AdoptionRequest]) -> None:
        """
        申請履歴全体を保存（既存の値は上書き）

        Args:
            requests: 申請履歴（新しい順）
        """
        payload = [request.to_storage() for request in requests]
        self.storage.set_item(self.key, json.dumps(payload, ensure_ascii=False))
        self.logger.debug(f"Saved {len(requests)} adoption requests", extra={"key": self.key})

    def _decode(self, raw: str) -> List[AdoptionRequest]:
        """
        保存値を AdoptionRequest リストに変換

        Raises:
            StorageCorruptionError: JSON として不正、配列でない、またはスキーマ不一致の場合
        """
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            raise StorageCorruptionError(f"JSON パースに失敗しました: {e}", key=self.key)

        if not isinstance(data, list):
            raise StorageCorruptionError(
                f"配列ではありません: {type(data).__name__}", key=self.key
            )

        try:
            return [AdoptionRequest.model_validate(item) for item in data]
        except ValidationError as e:
            raise StorageCorruptionError(f"スキーマ検証に失敗しました: {e}", key=self.key)
