# =============================================================================
# ⚔️ 必殺技 名詞ランキング
#
# 必殺技一覧サイトを五十音順に巡回して技名を集め、
# 形態素解析で名詞を抜き出して出現回数の上位10件を表示する。
#
# 使い方:
#   python skill_ranking.py                # 全名詞
#   python skill_ranking.py 2              # 2文字以上の名詞
#   python skill_ranking.py 2 kanji        # 2文字以上・漢字のみ
#   python skill_ranking.py 0 katakana     # カタカナのみ（hiragana / katakana / kanji）
# =============================================================================

import sys
import argparse
from pathlib import Path

import yaml

from skill_errors import SkillRankingError
from fetch_skills import (
    BASE_SELECTOR,
    FETCH_URL_BASE,
    REQUEST_INTERVAL,
    USER_AGENT,
    fetch_skills_by_crawling,
)
from kana_index import gen_roma_alphabet_kanas
from noun_counter import parse_to_nouns, sorted_keys

BASE_DIR = Path(__file__).parent
CONFIG_PATH = BASE_DIR / "config.yaml"
TOP_N = 10

DEFAULT_CONFIG = {
    "fetch_url_base": FETCH_URL_BASE,
    "base_selector": BASE_SELECTOR,
    "user_agent": USER_AGENT,
    "request_interval": REQUEST_INTERVAL,
    "top_n": TOP_N,
}

CONFIG_TYPES = {
    "fetch_url_base": str,
    "base_selector": str,
    "user_agent": str,
    "request_interval": float,
    "top_n": int,
}


def load_config(config_path=CONFIG_PATH):
    """config.yaml を読み込んでデフォルト値に上書きする"""
    config = dict(DEFAULT_CONFIG)
    config_path = Path(config_path)
    if not config_path.exists():
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        print(f"⚠️ 設定ファイルを読み込めません（デフォルト値を使用）: {e}")
        return config

    if not isinstance(data, dict):
        print(f"⚠️ 設定ファイルの形式が不正です（デフォルト値を使用）: {config_path}")
        return config

    for key, default in DEFAULT_CONFIG.items():
        value = data.get(key)
        if value is None:
            continue
        try:
            config[key] = CONFIG_TYPES[key](value)
        except (TypeError, ValueError):
            print(f"⚠️ 設定値 {key}={value!r} が不正です（デフォルト値 {default!r} を使用）")
    return config


def parse_args(argv=None):
    """位置引数 minWordLen / charaType を読む（不正な数値は0扱い）"""
    parser = argparse.ArgumentParser(
        description="⚔️ 必殺技 名詞ランキング",
    )
    parser.add_argument("min_word_len", nargs="?", default="0",
                        help="名詞の最小文字数（デフォルト: 0）")
    parser.add_argument("chara_type", nargs="?", default="",
                        help="文字種: hiragana / katakana / kanji（未指定なら全て）")
    # 3つ目以降の引数やオプション風の文字列は無視する
    args, _ = parser.parse_known_args(argv)

    try:
        min_word_len = int(args.min_word_len)
    except ValueError:
        print(f"❌ failed find minWordLen: {args.min_word_len!r}")
        min_word_len = 0
    return min_word_len, args.chara_type


def print_ranking(ranked, noun_map, top_n=TOP_N):
    """上位 top_n 件を「第N位: 名詞 M回」で表示"""
    for i, word in enumerate(ranked[:top_n], 1):
        print(f"第{i}位: {word} {noun_map[word]}回")


def main(argv=None):
    """
    巡回 → 形態素解析 → 集計 → 表示 を順に実行する。

    途中のステージが失敗しても、それまでのデータで最後まで進む。
    Returns: 常に0
    """
    # Windows対応
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    min_word_len, chara_type = parse_args(argv)
    config = load_config()

    roma_alphabets = gen_roma_alphabet_kanas()
    print(f"📚 {len(roma_alphabets)} ページから技名を取得中...")
    skill_words = fetch_skills_by_crawling(
        roma_alphabets,
        base_url=config["fetch_url_base"],
        selector=config["base_selector"],
        user_agent=config["user_agent"],
        request_interval=config["request_interval"],
    )
    print(f"✅ {len(skill_words)} ページ取得完了")

    print("🔍 形態素解析中...")
    try:
        noun_map = parse_to_nouns(skill_words, min_word_len, chara_type)
    except SkillRankingError as e:
        print(f"❌ failed parse to node: {e}")
        noun_map = {}

    print_ranking(sorted_keys(noun_map), noun_map, top_n=config["top_n"])
    return 0


if __name__ == "__main__":
    main()
