# =============================================================================
# 🔤 五十音インデックス生成
# ひらがな1文字ごとのローマ字キー（一覧ページのファイル名）を作る
# =============================================================================

import pykakasi

HIRAGANA = "あいうえおかきくけこさしすせそたちつてとなにぬねのはひふへほまみむめもやゆよらりるれろわをん"

# サイト側のファイル名はヘボン式ではないので個別に上書き
IRREGULAR_ROMA = {
    "ち": "ti",
    "つ": "tu",
    "ふ": "hu",
    "を": "wo",
    "ん": "nn",
}


def to_hepburn(kana, converter=None):
    """ひらがなをヘボン式ローマ字に変換"""
    if converter is None:
        converter = pykakasi.kakasi()
    return "".join(item["hepburn"] for item in converter.convert(kana))


def gen_roma_alphabet_kanas(alphabet=HIRAGANA):
    """五十音それぞれのローマ字キーを順番どおりに返す"""
    converter = pykakasi.kakasi()
    roma_alphabets = []
    for kc in alphabet:
        if kc in IRREGULAR_ROMA:
            roma_alphabets.append(IRREGULAR_ROMA[kc])
            continue
        roma_alphabets.append(to_hepburn(kc, converter))
    return roma_alphabets
