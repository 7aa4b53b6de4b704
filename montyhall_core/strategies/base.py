"""
Base class for Strategies in Monty Hall Simulator

参加者の戦略（Strategy）の抽象基底クラス
"""

from abc import ABC, abstractmethod
from typing import Protocol

from ..config import Strategy


class StrategyProtocol(Protocol):
    """戦略が満たすべきインターフェース（静的型チェック用）"""

    def final_pick(self, opened_door: int, a_pick: int) -> int:
        """最終的に選ぶドアを決定"""
        ...


class BaseStrategy(ABC):
    """
    戦略抽象基底クラス

    全ての戦略はこのクラスを継承して実装する。
    ドア番号の検証は呼び出し側（change_door）で済んでいる前提。
    """

    # サブクラスで定義必須
    name: str = ""
    strategy: Strategy

    @abstractmethod
    def final_pick(self, opened_door: int, a_pick: int) -> int:
        """
        最終的に選ぶドアを決定

        Args:
            opened_door: 司会者が開けたドア
            a_pick: 参加者の最初の選択

        Returns:
            最終選択のドア（1〜3）
        """
        pass
