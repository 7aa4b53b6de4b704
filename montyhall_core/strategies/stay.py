"""
Stay Strategy for Monty Hall Simulator

維持戦略: 最初の選択を変えない
"""

from .base import BaseStrategy
from .registry import register_strategy
from ..config import Strategy


@register_strategy(Strategy.STAY)
class StayStrategy(BaseStrategy):
    """最初に選んだドアをそのまま最終選択とする"""

    name = "Stay"

    def final_pick(self, opened_door: int, a_pick: int) -> int:
        """最初の選択をそのまま返す"""
        return a_pick
