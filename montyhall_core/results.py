"""
Result data structures for Monty Hall Simulator

試行結果（戦略ごとの勝敗レコード）とシミュレーション結果の集約
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import pandas as pd

from .config import Outcome, Strategy


# 結果テーブルの列（空テーブルでも列を保証する）
RECORD_COLUMNS = [
    "trial_id",
    "strategy",
    "outcome",
    "car_door",
    "initial_pick",
    "opened_door",
    "final_pick",
]


@dataclass(frozen=True)
class OutcomeRecord:
    """1試行・1戦略の結果"""

    trial_id: int          # 試行ID（0始まり）
    strategy: Strategy     # 適用した戦略
    outcome: Outcome       # 勝敗
    car_door: int          # carのドア
    initial_pick: int      # 最初の選択
    opened_door: int       # 司会者が開けたドア
    final_pick: int        # 最終選択

    @property
    def is_win(self) -> bool:
        """勝ちならTrue"""
        return self.outcome is Outcome.WIN

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "trial_id": self.trial_id,
            "strategy": self.strategy.value,
            "outcome": self.outcome.value,
            "car_door": self.car_door,
            "initial_pick": self.initial_pick,
            "opened_door": self.opened_door,
            "final_pick": self.final_pick,
        }


@dataclass
class SimulationResults:
    """全試行の結果を集約"""

    records: List[OutcomeRecord]
    config_summary: Dict[str, Any]

    @property
    def n_records(self) -> int:
        """レコード数（試行数×戦略数）"""
        return len(self.records)

    @property
    def n_trials(self) -> int:
        """試行数"""
        return len({r.trial_id for r in self.records})

    @property
    def is_empty(self) -> bool:
        """レコードが1件もないか"""
        return not self.records

    def to_dataframe(self) -> pd.DataFrame:
        """
        結果をDataFrameに変換

        Returns:
            1行1レコードのDataFrame（生成順）
        """
        records = [r.to_dict() for r in self.records]
        return pd.DataFrame(records, columns=RECORD_COLUMNS)

    def to_csv(self, path: str, index: bool = False) -> None:
        """
        結果をCSVに出力

        Args:
            path: 出力ファイルパス
            index: インデックスを出力するか
        """
        self.to_dataframe().to_csv(path, index=index)

    def count_outcomes(self) -> Dict[str, Dict[str, int]]:
        """
        戦略×勝敗のクロス集計

        Returns:
            {"stay": {"WIN": n, "LOSE": m}, "switch": {...}} 形式の辞書
        """
        counts = {
            s.value: {o.value: 0 for o in Outcome}
            for s in Strategy
        }
        for r in self.records:
            counts[r.strategy.value][r.outcome.value] += 1
        return counts

    def compute_proportions(
        self,
        decimals: Optional[int] = 2
    ) -> Dict[str, Dict[str, Optional[float]]]:
        """
        戦略ごとの勝敗割合（行方向に正規化）

        Args:
            decimals: 丸め桁数（Noneなら丸めない）

        Returns:
            {"stay": {"WIN": p, "LOSE": 1-p}, "switch": {...}} 形式の辞書
            レコードがない戦略の値はNone
        """
        df = self.to_dataframe()
        strategies = [s.value for s in Strategy]
        outcomes = [o.value for o in Outcome]

        # データなし（0試行）は割合を定義しない
        if df.empty:
            return {s: {o: None for o in outcomes} for s in strategies}

        counts = (
            df.groupby(["strategy", "outcome"])
            .size()
            .unstack(fill_value=0)
            .reindex(index=strategies, columns=outcomes, fill_value=0)
        )
        totals = counts.sum(axis=1)

        proportions: Dict[str, Dict[str, Optional[float]]] = {}
        for strategy in strategies:
            total = int(totals[strategy])
            if total == 0:
                proportions[strategy] = {o: None for o in outcomes}
                continue
            row = counts.loc[strategy] / total
            if decimals is not None:
                row = row.round(decimals)
            proportions[strategy] = {o: float(row[o]) for o in outcomes}

        return proportions

    def proportion_table(self, decimals: Optional[int] = 2) -> pd.DataFrame:
        """
        勝敗割合の表（行: 戦略、列: LOSE/WIN）

        データがない場合はNaN
        """
        proportions = self.compute_proportions(decimals)
        table = pd.DataFrame.from_dict(proportions, orient="index", dtype=float)
        table.index.name = "strategy"
        table.columns.name = "outcome"
        return table[[Outcome.LOSE.value, Outcome.WIN.value]]

    def win_rates(self, decimals: Optional[int] = None) -> Dict[str, Optional[float]]:
        """戦略ごとの勝率（データがなければNone）"""
        proportions = self.compute_proportions(decimals)
        return {
            strategy: values[Outcome.WIN.value]
            for strategy, values in proportions.items()
        }

    def best_strategy(self) -> Optional[Strategy]:
        """勝率が最も高い戦略（データがなければNone）"""
        rates = {
            s: rate for s, rate in self.win_rates().items() if rate is not None
        }
        if not rates:
            return None
        return Strategy(max(rates, key=rates.get))

    def compute_running_win_rates(self) -> pd.DataFrame:
        """
        試行数に対する累積勝率の推移

        Returns:
            index: 試行数（1始まり）、列: 戦略ごとの累積勝率
        """
        df = self.to_dataframe()
        strategies = [s.value for s in Strategy]
        if df.empty:
            empty = pd.DataFrame(columns=strategies, dtype=float)
            empty.index.name = "n_trials"
            return empty

        df["win"] = (df["outcome"] == Outcome.WIN.value).astype(float)
        # 戦略内の出現順で番号付け（trial_idの重複を許容）
        df["n"] = df.groupby("strategy").cumcount()
        wins = df.pivot(index="n", columns="strategy", values="win")
        wins = wins.reindex(columns=strategies).sort_index()

        running = wins.expanding().mean()
        running.index = pd.RangeIndex(1, len(running) + 1, name="n_trials")
        running.columns.name = None
        return running

    def get_summary_text(self, decimals: int = 2) -> str:
        """
        結果のサマリテキストを生成

        Returns:
            人間可読なサマリ文字列
        """
        proportions = self.compute_proportions(decimals)

        def fmt(value: Optional[float]) -> str:
            return "n/a" if value is None else f"{value:.{decimals}f}"

        lines = [
            "=== Simulation Results ===",
            f"Trials: {self.n_trials}",
            f"Records: {self.n_records}",
            "",
            f"{'strategy':<8}  {'LOSE':>6}  {'WIN':>6}",
        ]
        for strategy, values in proportions.items():
            lines.append(
                f"{strategy:<8}  {fmt(values['LOSE']):>6}  {fmt(values['WIN']):>6}"
            )

        return "\n".join(lines)
