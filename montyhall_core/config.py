"""
Configuration classes for Monty Hall Simulator
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .exceptions import ConfigurationError, InvalidTrialCountError


# ドア番号（1始まり、3枚固定）
DOORS: Tuple[int, int, int] = (1, 2, 3)


class Prize(Enum):
    """ドアの裏にある景品"""
    GOAT = "goat"
    CAR = "car"


class Strategy(Enum):
    """司会者がドアを開けた後の参加者の戦略"""
    STAY = "stay"      # 最初の選択を維持
    SWITCH = "switch"  # 残りのドアに変更


class Outcome(Enum):
    """ゲーム結果"""
    WIN = "WIN"
    LOSE = "LOSE"


@dataclass(frozen=True)
class SimulationConfig:
    """シミュレーション全体の設定（イミュータブル）"""

    # ユーザ指定パラメータ
    n_trials: int = field(default=100)               # 試行数（0以上）
    random_seed: int | None = None                   # 再現性用シード（オプション）

    # 集計表示
    decimals: int = field(default=2)                 # 勝率の丸め桁数

    def __post_init__(self) -> None:
        """バリデーション"""
        # 試行数チェック（boolはintのサブクラスなので明示的に除外）
        if isinstance(self.n_trials, bool) or not isinstance(self.n_trials, int):
            raise InvalidTrialCountError(self.n_trials)
        if self.n_trials < 0:
            raise InvalidTrialCountError(self.n_trials)

        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise ConfigurationError(
                f"random_seedは整数である必要があります: {self.random_seed!r}"
            )
        if self.random_seed is not None and self.random_seed < 0:
            raise ConfigurationError(
                f"random_seedは0以上である必要があります: {self.random_seed}"
            )

        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ConfigurationError(
                f"decimalsは整数である必要があります: {self.decimals!r}"
            )
        if self.decimals < 0:
            raise ConfigurationError(
                f"decimalsは0以上である必要があります: {self.decimals}"
            )

    @property
    def n_records(self) -> int:
        """結果テーブルの行数（1試行につき戦略数ぶん）"""
        return self.n_trials * len(Strategy)

    def to_dict(self) -> dict:
        """設定を辞書形式に変換"""
        return {
            "n_trials": self.n_trials,
            "n_doors": len(DOORS),
            "strategies": [s.value for s in Strategy],
            "random_seed": self.random_seed,
            "decimals": self.decimals,
        }
