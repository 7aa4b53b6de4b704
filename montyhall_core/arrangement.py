"""
Prize arrangement for Monty Hall Simulator

3枚のドアの裏の景品配置（car 1台、goat 2頭）を生成・保持
"""

from collections import Counter
from dataclasses import dataclass
from numbers import Integral
from typing import List, Sequence, Tuple

from .config import DOORS, Prize
from .exceptions import InvalidArrangementError, InvalidDoorError
from .random_source import RandomSource


# 正しい配置のラベル構成（goatは区別しない）
_EXPECTED_COUNTS = Counter({Prize.GOAT: 2, Prize.CAR: 1})


def validate_door(door: object, name: str = "door") -> int:
    """
    ドア番号を検証してintで返す

    Args:
        door: ドア番号（1〜3）
        name: エラーメッセージ用の引数名

    Returns:
        ドア番号（int）

    Raises:
        InvalidDoorError: 整数でない、または範囲外の場合
    """
    # boolはIntegralに含まれるので除外
    if isinstance(door, bool) or not isinstance(door, Integral):
        raise InvalidDoorError(door, name)
    if int(door) not in DOORS:
        raise InvalidDoorError(door, name)
    return int(door)


def _to_prize(label: object) -> Prize:
    """ラベル（Prizeまたは文字列）をPrizeに変換"""
    if isinstance(label, Prize):
        return label
    if isinstance(label, str):
        try:
            return Prize(label.strip().lower())
        except ValueError:
            pass
    raise InvalidArrangementError(f"不明な景品ラベル: {label!r}")


@dataclass(frozen=True)
class PrizeArrangement:
    """1試行分の景品配置（イミュータブル）"""

    prizes: Tuple[Prize, ...]  # ドア1〜3の順

    def __post_init__(self) -> None:
        """バリデーション"""
        if isinstance(self.prizes, (str, bytes)):
            raise InvalidArrangementError(
                f"景品配置は3要素の列である必要があります: {self.prizes!r}"
            )
        try:
            prizes = tuple(_to_prize(p) for p in self.prizes)
        except TypeError as e:
            raise InvalidArrangementError(
                f"景品配置は3要素の列である必要があります: {self.prizes!r}"
            ) from e

        if len(prizes) != len(DOORS):
            raise InvalidArrangementError(
                f"景品配置の長さは{len(DOORS)}である必要があります: {len(prizes)}"
            )
        if Counter(prizes) != _EXPECTED_COUNTS:
            raise InvalidArrangementError(
                "景品配置はgoat 2つとcar 1つである必要があります: "
                f"{[p.value for p in prizes]}"
            )

        # frozenなのでobject.__setattr__で正規化後の値を格納
        object.__setattr__(self, "prizes", prizes)

    @classmethod
    def from_labels(cls, labels: Sequence[object]) -> "PrizeArrangement":
        """
        ラベル列から配置を作成

        Args:
            labels: "car"/"goat" またはPrizeの列（ドア1〜3の順）

        Returns:
            景品配置
        """
        if isinstance(labels, PrizeArrangement):
            return labels
        if isinstance(labels, (str, bytes)):
            raise InvalidArrangementError(
                f"景品配置は3要素の列である必要があります: {labels!r}"
            )
        try:
            return cls(tuple(labels))
        except TypeError as e:
            raise InvalidArrangementError(f"景品配置を解釈できません: {labels!r}") from e

    @classmethod
    def with_car_at(cls, car_door: int) -> "PrizeArrangement":
        """指定ドアにcar、残りにgoatを置いた配置"""
        car_door = validate_door(car_door, "car_door")
        return cls(tuple(
            Prize.CAR if door == car_door else Prize.GOAT
            for door in DOORS
        ))

    @classmethod
    def all_arrangements(cls) -> List["PrizeArrangement"]:
        """あり得る全配置（3通り、carのドア順）"""
        return [cls.with_car_at(door) for door in DOORS]

    def prize_at(self, door: int) -> Prize:
        """
        指定ドアの景品を取得

        Raises:
            InvalidDoorError: ドア番号が範囲外の場合
        """
        door = validate_door(door)
        return self.prizes[door - 1]

    def __getitem__(self, door: int) -> Prize:
        return self.prize_at(door)

    def __len__(self) -> int:
        return len(self.prizes)

    @property
    def car_door(self) -> int:
        """carのあるドア"""
        return DOORS[self.prizes.index(Prize.CAR)]

    @property
    def goat_doors(self) -> Tuple[int, ...]:
        """goatのあるドア（昇順）"""
        return tuple(
            door for door, prize in zip(DOORS, self.prizes)
            if prize is Prize.GOAT
        )

    @property
    def labels(self) -> Tuple[str, ...]:
        """ラベル文字列のタプル"""
        return tuple(p.value for p in self.prizes)

    def __str__(self) -> str:
        return " ".join(self.labels)


def as_arrangement(game: object) -> PrizeArrangement:
    """PrizeArrangementまたはラベル列を検証済みの配置に変換"""
    if isinstance(game, PrizeArrangement):
        return game
    if isinstance(game, Sequence):
        return PrizeArrangement.from_labels(game)
    raise InvalidArrangementError(f"景品配置を解釈できません: {game!r}")


def create_game(random_source: RandomSource) -> PrizeArrangement:
    """
    ランダムな景品配置を生成

    carのドアを一様に選ぶことで、区別できない3通りの配置が等確率になる。

    Args:
        random_source: 乱数源

    Returns:
        景品配置
    """
    car_door = random_source.choice(DOORS)
    return PrizeArrangement.with_car_at(car_door)
