"""
Strategy registry for Monty Hall Simulator

戦略クラスの登録・取得機構（プラグインパターン）
"""

from typing import Callable, Dict, List, Type

from .base import BaseStrategy
from ..config import Strategy
from ..exceptions import InvalidArgumentError


# 戦略クラスの登録用辞書
_STRATEGY_REGISTRY: Dict[Strategy, Type[BaseStrategy]] = {}


def register_strategy(
    strategy: Strategy
) -> Callable[[Type[BaseStrategy]], Type[BaseStrategy]]:
    """
    戦略クラスを登録するデコレータ

    Usage:
        @register_strategy(Strategy.STAY)
        class StayStrategy(BaseStrategy):
            ...

    Raises:
        ValueError: 同じStrategyが既に登録されている場合
    """
    def decorator(cls: Type[BaseStrategy]) -> Type[BaseStrategy]:
        if strategy in _STRATEGY_REGISTRY:
            existing = _STRATEGY_REGISTRY[strategy]
            raise ValueError(
                f"Strategy {strategy} is already registered by {existing.__name__}"
            )
        cls.strategy = strategy
        _STRATEGY_REGISTRY[strategy] = cls
        return cls

    return decorator


def _coerce_strategy(strategy: object) -> Strategy:
    """Strategyまたは値文字列（"stay"/"switch"）をStrategyに変換"""
    if isinstance(strategy, Strategy):
        return strategy
    if isinstance(strategy, str):
        try:
            return Strategy(strategy.strip().lower())
        except ValueError:
            pass
    available = [s.value for s in _STRATEGY_REGISTRY]
    raise InvalidArgumentError(
        f"Unknown strategy: {strategy!r}. Available strategies: {available}"
    )


def get_strategy(strategy: Strategy | str) -> BaseStrategy:
    """
    登録された戦略をインスタンス化して取得

    Args:
        strategy: 戦略の種別（Strategyまたは "stay"/"switch"）

    Returns:
        戦略インスタンス

    Raises:
        InvalidArgumentError: 未登録の戦略
    """
    key = _coerce_strategy(strategy)
    if key not in _STRATEGY_REGISTRY:
        available = [s.value for s in _STRATEGY_REGISTRY]
        raise InvalidArgumentError(
            f"Unknown strategy: {key}. Available strategies: {available}"
        )
    return _STRATEGY_REGISTRY[key]()


def list_strategies() -> List[Strategy]:
    """登録済みのStrategy一覧を取得"""
    return list(_STRATEGY_REGISTRY.keys())


def is_registered(strategy: Strategy) -> bool:
    """指定したStrategyが登録済みか確認"""
    return strategy in _STRATEGY_REGISTRY
