# =============================================================================
# 🔍 技名の形態素解析 → 名詞の出現回数集計（Janome使用）
# =============================================================================

from collections import Counter

import regex
from janome.tokenizer import Tokenizer

from skill_errors import InitializationError, ParseError

NOUN_POS = "名詞"

CHARA_TYPE_HIRAGANA = "hiragana"
CHARA_TYPE_KATAKANA = "katakana"
CHARA_TYPE_KANJI = "kanji"

# Unicode スクリプト判定（長音符「ー」は Common なのでどれにも入らない）
CHARA_TYPE_PATTERNS = {
    CHARA_TYPE_HIRAGANA: regex.compile(r"\p{Script=Hiragana}*"),
    CHARA_TYPE_KATAKANA: regex.compile(r"\p{Script=Katakana}*"),
    CHARA_TYPE_KANJI: regex.compile(r"\p{Script=Han}*"),
}


def is_match_chara_type(chara_type, surface):
    """全文字が指定の文字種か判定（未指定・不明な指定は常にTrue）"""
    pattern = CHARA_TYPE_PATTERNS.get(chara_type)
    if pattern is None:
        return True
    return pattern.fullmatch(surface) is not None


def is_noun_surface(token, min_word_len=0, chara_type=""):
    """名詞・最小文字数・文字種のすべてを満たすか"""
    pos = token.part_of_speech.split(",")[0]
    surface = token.surface
    return (
        pos == NOUN_POS
        and len(surface) >= min_word_len
        and is_match_chara_type(chara_type, surface)
    )


def create_tokenizer():
    """Janome トークナイザを初期化"""
    try:
        return Tokenizer()
    except Exception as e:
        raise InitializationError(f"failed init tokenizer: {e}") from e


def iter_tokens(tokenizer, text):
    """テキストの全トークンを順に返す"""
    try:
        for token in tokenizer.tokenize(text):
            yield token
    except Exception as e:
        raise ParseError(f"形態素解析エラー: {text[:30]}: {e}") from e


def parse_to_nouns(skill_words, min_word_len=0, chara_type="", tokenizer=None):
    """
    技名リストを形態素解析して名詞の出現回数を数える。

    同じ名詞が1つの技名文字列に2回出れば2回と数える。
    解析に失敗した文字列はエラーを表示して飛ばす。
    Returns: Counter（名詞 → 出現回数）
    """
    if tokenizer is None:
        tokenizer = create_tokenizer()

    noun_map = Counter()
    for skill_word in skill_words:
        try:
            noun_nodes = [
                token.surface
                for token in iter_tokens(tokenizer, skill_word)
                if is_noun_surface(token, min_word_len, chara_type)
            ]
        except ParseError as e:
            print(f"  ❌ {e}")
            continue
        noun_map.update(noun_nodes)
    return noun_map


def sorted_keys(noun_map):
    """出現回数の多い順（同数は表記順）に名詞を並べる"""
    return sorted(noun_map, key=lambda word: (-noun_map[word], word))
