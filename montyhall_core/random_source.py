"""
Random sources for Monty Hall Simulator

乱数源の抽象化（「有限集合から一様に1要素を選ぶ」能力のみ）
"""

from typing import Any, Iterable, List, Protocol, Sequence, TypeVar
import numpy as np

from .exceptions import InvalidArgumentError, RandomSourceExhaustedError


T = TypeVar("T")


class RandomSource(Protocol):
    """乱数源が満たすべきインターフェース（静的型チェック用）"""

    def choice(self, options: Sequence[T]) -> T:
        """optionsから一様ランダムに1要素を選択"""
        ...


class NumpyRandomSource:
    """
    numpy Generatorによる乱数源

    シードを指定すれば同じ系列を再現できる。
    """

    def __init__(self, seed: int | None = None) -> None:
        """
        Args:
            seed: 乱数シード（Noneなら非決定的）
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def choice(self, options: Sequence[T]) -> T:
        """
        optionsから一様ランダムに1要素を選択

        Args:
            options: 候補（空であってはならない）

        Returns:
            選択された要素（numpy型ではなく元の要素そのもの）

        Raises:
            InvalidArgumentError: 候補が空の場合
        """
        if len(options) == 0:
            raise InvalidArgumentError("候補が空です")
        return options[int(self.rng.integers(0, len(options)))]


class ScriptedRandomSource:
    """
    固定の値列を順に返す乱数源

    既知のゲームを再生するために使う。各値は呼び出し時の候補に
    含まれていなければならない。
    """

    def __init__(self, values: Iterable[Any]) -> None:
        """
        Args:
            values: 返す値の列（choice呼び出し順）
        """
        self.values: List[Any] = list(values)
        self.position = 0

    @property
    def n_consumed(self) -> int:
        """消費済みの値の数"""
        return self.position

    @property
    def n_remaining(self) -> int:
        """未消費の値の数"""
        return len(self.values) - self.position

    def choice(self, options: Sequence[T]) -> T:
        """
        次のスクリプト値を返す

        Raises:
            RandomSourceExhaustedError: 値を使い切った場合
            InvalidArgumentError: 値が候補に含まれない場合
        """
        if self.position >= len(self.values):
            raise RandomSourceExhaustedError(len(self.values))

        value = self.values[self.position]
        # True == 1 なので型も一致させる
        if not any(value == o and type(value) is type(o) for o in options):
            raise InvalidArgumentError(
                f"スクリプト値が候補に含まれません: {value!r} not in {list(options)}"
            )
        self.position += 1
        return value

    def reset(self) -> None:
        """先頭から再生し直す"""
        self.position = 0
