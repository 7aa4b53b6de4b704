"""
Exception classes for Monty Hall Simulator
"""


class MontyHallError(Exception):
    """シミュレータの基底例外クラス"""
    pass


class InvalidArgumentError(MontyHallError, ValueError):
    """ゲーム関数に不正な引数が渡された"""
    pass


class InvalidArrangementError(InvalidArgumentError):
    """景品配置が不正（長さ・ラベル構成）"""
    pass


class InvalidDoorError(InvalidArgumentError):
    """ドア番号が範囲外"""
    def __init__(self, door: object, name: str = "door") -> None:
        self.door = door
        self.name = name
        super().__init__(
            f"{name}は1〜3の整数である必要があります: {door!r}"
        )


class RandomSourceExhaustedError(InvalidArgumentError):
    """スクリプト乱数源の値を使い切った"""
    def __init__(self, n_values: int) -> None:
        self.n_values = n_values
        super().__init__(
            f"スクリプト乱数源の値({n_values}個)を使い切りました"
        )


class ConfigurationError(MontyHallError, ValueError):
    """設定パラメータに関するエラー"""
    pass


class InvalidTrialCountError(ConfigurationError):
    """試行数が不正（負数または整数以外）"""
    def __init__(self, n_trials: object) -> None:
        self.n_trials = n_trials
        super().__init__(
            f"試行数は0以上の整数である必要があります: {n_trials!r}"
        )
