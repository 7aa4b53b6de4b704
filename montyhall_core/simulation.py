"""
Simulation engine for Monty Hall Simulator

シミュレーションの実行エンジン
"""

from typing import Callable, List

from .arrangement import create_game
from .config import SimulationConfig, Strategy
from .game import change_door, determine_winner, open_goat_door, select_door
from .random_source import NumpyRandomSource, RandomSource
from .results import OutcomeRecord, SimulationResults


def play_game(
    random_source: RandomSource,
    trial_id: int = 0
) -> List[OutcomeRecord]:
    """
    1試行を実行し、両戦略の結果を返す

    同じ配置・同じ最初の選択・同じ開示ドアから、最終選択だけを
    戦略ごとに変えて判定する。

    乱数の消費順: carのドア → 最初の選択 →（最初の選択がcarの場合のみ）開けるドア

    Args:
        random_source: 乱数源
        trial_id: 試行ID

    Returns:
        [STAYのレコード, SWITCHのレコード]
    """
    game = create_game(random_source)
    first_pick = select_door(random_source)
    opened_door = open_goat_door(game, first_pick, random_source)

    records: List[OutcomeRecord] = []
    for strategy in (Strategy.STAY, Strategy.SWITCH):
        final_pick = change_door(strategy, opened_door, first_pick)
        records.append(OutcomeRecord(
            trial_id=trial_id,
            strategy=strategy,
            outcome=determine_winner(final_pick, game),
            car_door=game.car_door,
            initial_pick=first_pick,
            opened_door=opened_door,
            final_pick=final_pick,
        ))

    return records


class SimulationEngine:
    """シミュレーション実行エンジン"""

    def __init__(
        self,
        config: SimulationConfig,
        progress_callback: Callable[[int, int], None] | None = None,
        random_source: RandomSource | None = None
    ) -> None:
        """
        Args:
            config: シミュレーション設定
            progress_callback: 進捗コールバック (current, total) -> None
            random_source: 乱数源（省略時はconfig.random_seedのnumpy Generator）
        """
        self.config = config
        self.progress_callback = progress_callback

        # 乱数源
        if random_source is None:
            random_source = NumpyRandomSource(config.random_seed)
        self.random_source = random_source

    def run(self) -> SimulationResults:
        """
        全試行を実行

        Returns:
            シミュレーション結果（1試行につきSTAY/SWITCHの2レコード、生成順）
        """
        n_trials = self.config.n_trials
        records: List[OutcomeRecord] = []

        for trial_id in range(n_trials):
            if self.progress_callback:
                self.progress_callback(trial_id, n_trials)

            records.extend(self.run_one_trial(trial_id))

        if self.progress_callback:
            self.progress_callback(n_trials, n_trials)

        config_summary = self.config.to_dict()

        return SimulationResults(records=records, config_summary=config_summary)

    def run_one_trial(self, trial_id: int = 0) -> List[OutcomeRecord]:
        """
        単一試行を実行

        Args:
            trial_id: 試行ID

        Returns:
            [STAYのレコード, SWITCHのレコード]
        """
        return play_game(self.random_source, trial_id)


def run_one_trial(random_source: RandomSource | None = None) -> List[OutcomeRecord]:
    """
    1試行だけ実行する

    Args:
        random_source: 乱数源（省略時はシードなしのnumpy Generator）

    Returns:
        [STAYのレコード, SWITCHのレコード]
    """
    if random_source is None:
        random_source = NumpyRandomSource()
    return play_game(random_source)


def run_simulation(
    n: int,
    random_seed: int | None = None,
    random_source: RandomSource | None = None,
    progress_callback: Callable[[int, int], None] | None = None
) -> SimulationResults:
    """
    n試行を実行して結果を返す

    試行数の検証は試行開始前に行う。

    Args:
        n: 試行数（0以上の整数）
        random_seed: 再現性用シード（random_source指定時は無視）
        random_source: 乱数源
        progress_callback: 進捗コールバック

    Returns:
        シミュレーション結果（compute_proportions()で戦略ごとの勝敗割合）

    Raises:
        InvalidTrialCountError: nが負数または整数でない場合
    """
    config = SimulationConfig(n_trials=n, random_seed=random_seed)
    engine = SimulationEngine(
        config,
        progress_callback=progress_callback,
        random_source=random_source,
    )
    return engine.run()
