# =============================================================================
# ⚠️ 例外定義
# 各ステージはこれらを送出し、skill_ranking.py 側で表示して処理を続行する
# =============================================================================


class SkillRankingError(Exception):
    """必殺技ランキング処理の基底例外"""


class InitializationError(SkillRankingError):
    """形態素解析器の初期化失敗"""


class FetchError(SkillRankingError):
    """ページ取得・HTML解析の失敗"""


class ParseError(SkillRankingError):
    """形態素解析の失敗"""
