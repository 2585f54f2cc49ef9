"""シードファイル読み込み"""

import json
from typing import List
from pathlib import Path

from ..domain.models import Animal


def load_seed(seed_file: Path) -> List[Animal]:
    """
    JSON ファイルから初期表示用の動物リストを読み込み

    Args:
        seed_file: 動物オブジェクトの JSON 配列を含むファイル

    Returns:
        List[Animal]: 動物リスト（ファイル内の順序）

    Raises:
        json.JSONDecodeError: JSON パースに失敗した場合
        ValueError: 配列でない場合、または ID が重複している場合
        pydantic.ValidationError: 動物データが不正な場合
    """
    with open(seed_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"シードファイルは配列である必要があります: {seed_file}")

    animals = [Animal(**item) for item in data]

    ids = [animal.id for animal in animals]
    if len(ids) != len(set(ids)):
        raise ValueError(f"シードファイルに重複した ID があります: {seed_file}")

    return animals
