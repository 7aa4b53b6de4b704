"""
Game steps for Monty Hall Simulator

参加者のドア選択・司会者のドア開示・戦略適用・勝敗判定
"""

from .arrangement import PrizeArrangement, as_arrangement, validate_door
from .config import DOORS, Outcome, Prize, Strategy
from .random_source import RandomSource
from .strategies import get_strategy


def select_door(random_source: RandomSource) -> int:
    """
    参加者の最初の選択（1〜3を一様ランダム、配置とは独立）

    Args:
        random_source: 乱数源

    Returns:
        ドア番号
    """
    return random_source.choice(DOORS)


def open_goat_door(
    game: PrizeArrangement,
    a_pick: int,
    random_source: RandomSource
) -> int:
    """
    司会者がgoatのドアを1枚開ける

    参加者の選択でもcarでもないドアを返す。

    - 参加者がcarを選んでいる場合: 残り2枚はどちらもgoatなので一様ランダムに選ぶ
    - 参加者がgoatを選んでいる場合: 残りのgoatは1枚だけなのでそれを返す
      （乱数源は使わない）

    Args:
        game: 景品配置（PrizeArrangementまたはラベル列）
        a_pick: 参加者の最初の選択
        random_source: 乱数源

    Returns:
        開けるドア番号

    Raises:
        InvalidArrangementError: 配置が不正な場合
        InvalidDoorError: a_pickが範囲外の場合
    """
    game = as_arrangement(game)
    a_pick = validate_door(a_pick, "a_pick")

    if game.prize_at(a_pick) is Prize.CAR:
        return random_source.choice(game.goat_doors)

    remaining = [d for d in game.goat_doors if d != a_pick]
    return remaining[0]


def change_door(strategy: Strategy | str, opened_door: int, a_pick: int) -> int:
    """
    戦略に従って最終選択を決める

    Args:
        strategy: STAY（維持）またはSWITCH（変更）
        opened_door: 司会者が開けたドア
        a_pick: 参加者の最初の選択

    Returns:
        最終選択のドア番号

    Raises:
        InvalidDoorError: ドア番号が範囲外の場合
        InvalidArgumentError: 未知の戦略、またはSWITCHで
            opened_door == a_pick の場合
    """
    opened_door = validate_door(opened_door, "opened_door")
    a_pick = validate_door(a_pick, "a_pick")
    return get_strategy(strategy).final_pick(opened_door, a_pick)


def determine_winner(final_pick: int, game: PrizeArrangement) -> Outcome:
    """最終選択のドアがcarならWIN、goatならLOSE"""
    game = as_arrangement(game)
    if game.prize_at(final_pick) is Prize.CAR:
        return Outcome.WIN
    return Outcome.LOSE
