"""Surface forms that are never stored as story vocabulary.

These lists are configuration data. They are combined once at import time
into ``EXCLUSION_SET`` and never modified afterwards, so the set can be
shared freely between concurrent requests.
"""

HIRAGANA: tuple[str, ...] = (
    "あ", "い", "う", "え", "お",
    "か", "き", "く", "け", "こ",
    "さ", "し", "す", "せ", "そ",
    "た", "ち", "つ", "て", "と",
    "な", "に", "ぬ", "ね", "の",
    "は", "ひ", "ふ", "へ", "ほ",
    "ま", "み", "む", "め", "も",
    "や", "ゆ", "よ",
    "ら", "り", "る", "れ", "ろ",
    "わ", "ゐ", "ゑ", "を", "ん",
    "が", "ぎ", "ぐ", "げ", "ご",
    "ざ", "じ", "ず", "ぜ", "ぞ",
    "だ", "ぢ", "づ", "で", "ど",
    "ば", "び", "ぶ", "べ", "ぼ",
    "ぱ", "ぴ", "ぷ", "ぺ", "ぽ",
    "ぁ", "ぃ", "ぅ", "ぇ", "ぉ",
)

KATAKANA: tuple[str, ...] = (
    "ア", "イ", "ウ", "エ", "オ",
    "カ", "キ", "ク", "ケ", "コ",
    "サ", "シ", "ス", "セ", "ソ",
    "タ", "チ", "ツ", "テ", "ト",
    "ナ", "ニ", "ヌ", "ネ", "ノ",
    "ハ", "ヒ", "フ", "ヘ", "ホ",
    "マ", "ミ", "ム", "メ", "モ",
    "ヤ", "ユ", "ヨ",
    "ラ", "リ", "ル", "レ", "ロ",
    "ワ", "ヰ", "ヱ", "ヲ", "ン",
    "ガ", "ギ", "グ", "ゲ", "ゴ",
    "ザ", "ジ", "ズ", "ゼ", "ゾ",
    "ダ", "ヂ", "ヅ", "デ", "ド",
    "バ", "ビ", "ブ", "ベ", "ボ",
    "パ", "ピ", "プ", "ペ", "ポ",
    "ァ", "ィ", "ゥ", "ェ", "ォ",
)

PUNCTUATION: tuple[str, ...] = (" ", "＝", "ー", "。", "、", "「", "」", "（", "）")

# Auxiliary and conjugation fragments the analyzer splits off verbs
COMPOUND_FRAGMENTS: tuple[str, ...] = (
    "する", "ます", "なく", "なり", "いる",
    "なっ", "まし", "うえ", "ない", "おら",
)

EXCLUSION_SET: frozenset[str] = frozenset(
    HIRAGANA + KATAKANA + PUNCTUATION + COMPOUND_FRAGMENTS
)


def build_exclusion_set(extra: tuple[str, ...] | list[str] = ()) -> frozenset[str]:
    """Return the default exclusion set extended with ``extra`` surface forms."""
    if not extra:
        return EXCLUSION_SET
    return EXCLUSION_SET | frozenset(extra)
