"""
Tests for SimulationEngine
"""

import pytest

from montyhall_core.config import Outcome, SimulationConfig, Strategy
from montyhall_core.exceptions import (
    ConfigurationError,
    InvalidTrialCountError,
    RandomSourceExhaustedError,
)
from montyhall_core.random_source import NumpyRandomSource, ScriptedRandomSource
from montyhall_core.simulation import (
    SimulationEngine,
    play_game,
    run_one_trial,
    run_simulation,
)


@pytest.fixture
def simple_config() -> SimulationConfig:
    """シンプルな設定を作成"""
    return SimulationConfig(n_trials=50, random_seed=42)


class TestPlayGame:
    """単一試行のテスト"""

    def test_one_record_per_strategy(self) -> None:
        """STAYとSWITCHのレコードを1つずつ返す"""
        records = play_game(NumpyRandomSource(1))
        assert len(records) == 2
        assert [r.strategy for r in records] == [Strategy.STAY, Strategy.SWITCH]

    def test_records_share_game(self) -> None:
        """両レコードは同じ配置・同じ最初の選択・同じ開示ドアを共有"""
        source = NumpyRandomSource(5)
        for _ in range(100):
            stay, switch = play_game(source)
            assert stay.car_door == switch.car_door
            assert stay.initial_pick == switch.initial_pick
            assert stay.opened_door == switch.opened_door
            assert stay.final_pick == stay.initial_pick
            assert switch.final_pick != switch.initial_pick
            assert switch.final_pick != switch.opened_door

    def test_exactly_one_strategy_wins(self) -> None:
        """3枚のドアでは必ずどちらか一方だけが勝つ"""
        source = NumpyRandomSource(9)
        for _ in range(100):
            stay, switch = play_game(source)
            assert stay.is_win != switch.is_win

    def test_scripted_goat_pick(self) -> None:
        """car=1、選択=2: 司会者は3を開け、SWITCHが勝つ"""
        source = ScriptedRandomSource([1, 2])
        stay, switch = play_game(source, trial_id=4)

        assert source.n_remaining == 0
        assert stay.trial_id == switch.trial_id == 4
        assert stay.opened_door == 3
        assert stay.final_pick == 2
        assert stay.outcome is Outcome.LOSE
        assert switch.final_pick == 1
        assert switch.outcome is Outcome.WIN

    def test_scripted_car_pick(self) -> None:
        """car=3、選択=3: 司会者の開けるドアを乱数源から取り、STAYが勝つ"""
        source = ScriptedRandomSource([3, 3, 1])
        stay, switch = play_game(source)

        assert source.n_remaining == 0
        assert stay.opened_door == 1
        assert stay.outcome is Outcome.WIN
        assert switch.final_pick == 2
        assert switch.outcome is Outcome.LOSE

    def test_scripted_replay_is_reproducible(self) -> None:
        """同じ値列なら同じ結果"""
        source = ScriptedRandomSource([2, 2, 3])
        first = run_one_trial(source)
        source.reset()
        second = run_one_trial(source)
        assert first == second
        assert [r.to_dict() for r in first] == [r.to_dict() for r in second]

    def test_exhausted_source_raises(self) -> None:
        """値が足りなければエラー"""
        with pytest.raises(RandomSourceExhaustedError):
            run_one_trial(ScriptedRandomSource([1]))

    def test_run_one_trial_default_source(self) -> None:
        """乱数源を省略しても動作する"""
        records = run_one_trial()
        assert len(records) == 2


class TestSimulationEngine:
    """SimulationEngineのテスト"""

    def test_run_completes(self, simple_config: SimulationConfig) -> None:
        """シミュレーションが完了すること"""
        engine = SimulationEngine(simple_config)
        results = engine.run()

        assert results.n_records == 2 * simple_config.n_trials
        assert results.n_trials == simple_config.n_trials
        assert results.config_summary == simple_config.to_dict()

    def test_records_in_production_order(
        self, simple_config: SimulationConfig
    ) -> None:
        """レコードは試行順、各試行内はSTAY→SWITCH"""
        results = SimulationEngine(simple_config).run()

        trial_ids = [r.trial_id for r in results.records]
        assert trial_ids == [i // 2 for i in range(2 * simple_config.n_trials)]
        strategies = [r.strategy for r in results.records]
        assert strategies == [Strategy.STAY, Strategy.SWITCH] * simple_config.n_trials

    def test_progress_callback(self, simple_config: SimulationConfig) -> None:
        """進捗コールバックが呼ばれること"""
        callback_calls = []

        def callback(current: int, total: int) -> None:
            callback_calls.append((current, total))

        engine = SimulationEngine(simple_config, progress_callback=callback)
        engine.run()

        # n_trials + 1 回呼ばれる（0からn_trialsまで）
        assert len(callback_calls) == simple_config.n_trials + 1
        assert callback_calls[0] == (0, simple_config.n_trials)
        assert callback_calls[-1] == (
            simple_config.n_trials, simple_config.n_trials
        )

    def test_reproducibility_with_seed(self) -> None:
        """シードによる再現性"""
        config = SimulationConfig(n_trials=200, random_seed=12345)

        results1 = SimulationEngine(config).run()
        results2 = SimulationEngine(config).run()

        # 同じシードなら同じ結果
        assert results1.records == results2.records

    def test_injected_random_source(self) -> None:
        """注入した乱数源を使う"""
        config = SimulationConfig(n_trials=2)
        source = ScriptedRandomSource([1, 2, 3, 3, 2])
        results = SimulationEngine(config, random_source=source).run()

        assert source.n_remaining == 0
        outcomes = [(r.strategy, r.outcome) for r in results.records]
        assert outcomes == [
            (Strategy.STAY, Outcome.LOSE),
            (Strategy.SWITCH, Outcome.WIN),
            (Strategy.STAY, Outcome.WIN),
            (Strategy.SWITCH, Outcome.LOSE),
        ]


class TestRunSimulation:
    """run_simulationのテスト"""

    def test_zero_trials(self) -> None:
        """0試行は空の結果と未定義の割合"""
        results = run_simulation(0)

        assert results.records == []
        assert results.is_empty
        assert results.to_dataframe().empty
        proportions = results.compute_proportions()
        assert proportions == {
            "stay": {"WIN": None, "LOSE": None},
            "switch": {"WIN": None, "LOSE": None},
        }

    @pytest.mark.parametrize("n", [-1, -100, 2.5, "10", True, None])
    def test_invalid_count_raises_before_running(self, n: object) -> None:
        """不正な試行数は試行前にエラー"""
        calls = []
        with pytest.raises(InvalidTrialCountError):
            run_simulation(n, progress_callback=lambda c, t: calls.append(c))
        assert calls == []

    def test_convergence(self) -> None:
        """10,000試行でSWITCHは約2/3、STAYは約1/3に収束"""
        results = run_simulation(10_000, random_seed=42)
        rates = results.win_rates()

        assert rates["switch"] == pytest.approx(2 / 3, abs=0.03)
        assert rates["stay"] == pytest.approx(1 / 3, abs=0.03)

    def test_summary_rounded_to_two_decimals(self) -> None:
        """サマリは小数2桁に丸める"""
        results = run_simulation(1_000, random_seed=3)
        proportions = results.compute_proportions()

        for values in proportions.values():
            for value in values.values():
                assert value == round(value, 2)
            assert values["WIN"] + values["LOSE"] == pytest.approx(1.0, abs=0.011)

    def test_negative_seed_raises_configuration_error(self) -> None:
        """負のシードはnumpyに渡る前にConfigurationError"""
        with pytest.raises(ConfigurationError):
            run_simulation(10, random_seed=-1)

    def test_random_source_overrides_seed(self) -> None:
        """乱数源を渡した場合はそちらを使う"""
        source = ScriptedRandomSource([1, 2])
        results = run_simulation(1, random_seed=99, random_source=source)
        assert results.records[0].car_door == 1
        assert results.records[0].initial_pick == 2
