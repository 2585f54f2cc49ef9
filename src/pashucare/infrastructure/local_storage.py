"""
ローカルストレージ

ブラウザの localStorage 相当の永続キーバリューストアを提供します。
キー・値ともに文字列で、値の上書きは常にキー単位の全置換です。
"""

import json
import logging
from typing import Dict, Optional
from pathlib import Path


class StorageCorruptionError(Exception):
    """
    ストレージ破損例外

    保存済みデータが読み取れない（JSON として不正、想定外の構造など）場合を表します。
    """

    def __init__(self, message: str, key: Optional[str] = None):
        """
        Args:
            message: エラーメッセージ
            key: 破損が検出されたキー（ファイル全体の場合は None）
        """
        super().__init__(message)
        self.key = key


class MemoryStorage:
    """
    メモリ上のキーバリューストア

    テストや一時セッション用に LocalStorage と同じインターフェースを提供します。
    """

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class LocalStorage:
    """
    ファイルに永続化するキーバリューストア

    キーと文字列値の対応を1つの JSON オブジェクトとしてファイルに保存します。
    """

    DEFAULT_STORAGE_FILE = Path("storage") / "local_storage.json"

    def __init__(self, storage_file: Optional[Path] = None):
        """
        LocalStorage を初期化

        Args:
            storage_file: 保存先ファイル。None の場合は "storage/local_storage.json" を使用。
        """
        self.storage_file = Path(storage_file) if storage_file else self.DEFAULT_STORAGE_FILE
        self.storage_file.parent.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger(__name__)

    def get_item(self, key: str) -> Optional[str]:
        """
        キーに対応する値を取得

        Returns:
            Optional[str]: 保存済みの値（未保存の場合は None）

        Raises:
            StorageCorruptionError: ストレージファイルが読み取れない場合
        """
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        """
        キーに値を保存（既存の値は上書き）

        Note: ストレージファイルが破損している場合は、他のキーを破棄して書き直す
        """
        try:
            items = self._read_all()
        except StorageCorruptionError as e:
            self.logger.warning(
                f"Overwriting corrupted storage file: {self.storage_file}",
                extra={"error": str(e)}
            )
            items = {}
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        """キーを削除（存在しない場合は何もしない）"""
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)

    def _read_all(self) -> Dict[str, str]:
        """
        ストレージファイル全体を読み込み

        Raises:
            StorageCorruptionError: JSON として不正、またはオブジェクトでない場合
        """
        if not self.storage_file.exists():
            return {}

        try:
            with open(self.storage_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageCorruptionError(f"ストレージファイルを読み取れません: {e}")

        if not isinstance(data, dict):
            raise StorageCorruptionError(
                f"ストレージファイルの形式が不正です: {type(data).__name__}"
            )
        return data

    def _write_all(self, items: Dict[str, str]) -> None:
        """
        ストレージファイル全体を書き込み

        Note:
            - ensure_ascii=False で日本語・記号をそのまま保存
            - indent=2 で人間が読みやすい形式に整形
        """
        with open(self.storage_file, "w", encoding="utf-8") as f:
            json.dump(items, f, ensure_ascii=False, indent=2)
