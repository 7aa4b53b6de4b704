"""
Integration tests for the CLI Simulator
"""

from argparse import Namespace

import pandas as pd
import pytest

from montyhall_cli.config_builder import build_config, format_config_summary
from montyhall_cli.main import main, parse_args
from montyhall_cli.reporter import (
    export_detailed_csv,
    export_to_csv,
    print_full_report,
)
from montyhall_cli.runner import make_progress_printer, run_with_progress
from montyhall_core.config import SimulationConfig
from montyhall_core.random_source import ScriptedRandomSource
from montyhall_core.simulation import run_simulation


@pytest.fixture
def seeded_config() -> SimulationConfig:
    """シード付きの設定"""
    return SimulationConfig(n_trials=500, random_seed=42)


class TestConfigBuilder:
    """config_builderのテスト"""

    def test_build_config(self) -> None:
        """引数から設定を作成"""
        args = Namespace(trials=250, seed=7, decimals=3)
        config = build_config(args)
        assert config.n_trials == 250
        assert config.random_seed == 7
        assert config.decimals == 3

    def test_build_config_rejects_negative_trials(self) -> None:
        """負の試行数はValueError"""
        with pytest.raises(ValueError):
            build_config(Namespace(trials=-3, seed=None, decimals=2))

    def test_format_config_summary(self, seeded_config: SimulationConfig) -> None:
        """設定サマリ"""
        text = format_config_summary(seeded_config)
        assert "Trials: 500" in text
        assert "Random Seed: 42" in text
        assert "stay, switch" in text

    def test_parse_args_defaults(self) -> None:
        """引数のデフォルト"""
        args = parse_args([])
        assert args.trials == 10000
        assert args.seed is None
        assert args.decimals == 2
        assert args.output is None
        assert args.plot is None


class TestRunner:
    """runnerのテスト"""

    def test_run_with_progress(
        self, seeded_config: SimulationConfig, capsys
    ) -> None:
        """進捗表示付きで実行"""
        results = run_with_progress(seeded_config, show_progress=True, verbose=True)
        out = capsys.readouterr().out

        assert results.n_trials == 500
        assert "Progress:" in out
        assert "100.0%" in out
        assert "-> Stay: WIN" in out
        assert "-> Switch: WIN" in out

    def test_run_without_progress(
        self, seeded_config: SimulationConfig, capsys
    ) -> None:
        """進捗表示なし"""
        run_with_progress(seeded_config, show_progress=False)
        assert capsys.readouterr().out == ""

    def test_injected_random_source(self) -> None:
        """乱数源を注入できる"""
        config = SimulationConfig(n_trials=1)
        results = run_with_progress(
            config,
            show_progress=False,
            random_source=ScriptedRandomSource([1, 2]),
        )
        assert results.win_rates() == {"stay": 0.0, "switch": 1.0}

    def test_progress_printer_zero_total(self, capsys) -> None:
        """総数0では何も表示しない"""
        make_progress_printer()(0, 0)
        assert capsys.readouterr().out == ""


class TestReporter:
    """reporterのテスト"""

    def test_print_full_report(
        self, seeded_config: SimulationConfig, capsys
    ) -> None:
        """レポートを表示"""
        results = run_simulation(500, random_seed=42)
        print_full_report(results, seeded_config)
        out = capsys.readouterr().out

        assert "Outcome proportions" in out
        assert "stay" in out
        assert "switch" in out
        assert "Best Strategy: switch" in out

    def test_print_full_report_no_trials(self, capsys) -> None:
        """0試行でもレポートを表示"""
        config = SimulationConfig(n_trials=0)
        print_full_report(run_simulation(0), config)
        out = capsys.readouterr().out

        assert "n/a" in out
        assert "No trials were run" in out

    def test_export_csv(self, tmp_path) -> None:
        """サマリと詳細のCSVを出力"""
        results = run_simulation(
            2, random_source=ScriptedRandomSource([1, 2, 3, 3, 2])
        )
        path = tmp_path / "results.csv"

        summary_path = export_to_csv(results, str(path))
        detailed_path = export_detailed_csv(results, str(path))

        summary = pd.read_csv(summary_path)
        assert list(summary["strategy"]) == ["stay", "switch"]
        assert list(summary["n"]) == [2, 2]
        assert list(summary["wins"]) == [1, 1]
        assert list(summary["win_rate"]) == [0.5, 0.5]

        assert detailed_path == tmp_path / "results_detailed.csv"
        detailed = pd.read_csv(detailed_path)
        assert len(detailed) == 4


class TestMain:
    """CLIエントリポイントのテスト"""

    def test_main_success(self, tmp_path, capsys) -> None:
        """正常終了とファイル出力"""
        output = tmp_path / "out.csv"
        plot = tmp_path / "convergence.png"

        code = main([
            "--trials", "300",
            "--seed", "1",
            "--no-progress",
            "--output", str(output),
            "--plot", str(plot),
        ])
        out = capsys.readouterr().out

        assert code == 0
        assert "Monty Hall CLI Simulator" in out
        assert output.exists()
        assert (tmp_path / "out_detailed.csv").exists()
        assert plot.exists()
        assert plot.stat().st_size > 0

    def test_main_negative_trials(self, capsys) -> None:
        """負の試行数は終了コード1"""
        code = main(["--trials", "-5", "--no-progress"])
        out = capsys.readouterr().out

        assert code == 1
        assert "Configuration error" in out

    def test_main_zero_trials(self, capsys) -> None:
        """0試行でも正常終了"""
        code = main(["--trials", "0", "--no-progress"])
        assert code == 0
        assert "n/a" in capsys.readouterr().out
