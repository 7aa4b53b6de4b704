"""
Switch Strategy for Monty Hall Simulator

変更戦略: 開けられたドアでも最初の選択でもない残りのドアに変える
"""

from .base import BaseStrategy
from .registry import register_strategy
from ..config import DOORS, Strategy
from ..exceptions import InvalidArgumentError


@register_strategy(Strategy.SWITCH)
class SwitchStrategy(BaseStrategy):
    """
    変更戦略

    3枚のドアのうち、開けられたドアと最初の選択を除くと
    残りは必ず1枚に定まる。
    """

    name = "Switch"

    def final_pick(self, opened_door: int, a_pick: int) -> int:
        """
        残りのドアを返す

        Raises:
            InvalidArgumentError: 開けられたドアと最初の選択が同じ場合
                （残りのドアが一意に定まらない）
        """
        if opened_door == a_pick:
            raise InvalidArgumentError(
                f"開けられたドアと最初の選択が同じです: {opened_door}"
            )
        remaining = [d for d in DOORS if d != opened_door and d != a_pick]
        return remaining[0]
