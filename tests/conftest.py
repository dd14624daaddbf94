"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from romanize.nlp.base import Token


def ipadic_token(surface, pos, pronunciation=None):
    """Build a token the way Janome/IPADIC reports it.

    Known words carry nine fields (reading and pronunciation included);
    unknown words stop after the base form.
    """
    features = [pos, "*", "*", "*", "*", "*", surface]
    if pronunciation is not None:
        features += [pronunciation, pronunciation]
    return Token(surface=surface, features=tuple(features))


# Hepburn renderings for every pronunciation used by the token fixtures
STUB_ROMAJI = {
    "タイヨー": "taiyo-",
    "ノ": "no",
    "エブリデイワールド": "eburideiwa-rudo",
    "ユーヒ": "yu-hi",
    "キレイ": "kirei",
    "ナ": "na",
    "アノ": "ano",
    "オカ": "oka",
    "デ": "de",
    "フ": "fu",
    "ペン": "pen",
    "ボールペン": "bo-rupen",
    "ソラ": "sora",
    "キョーカイ": "kyo-kai",
    "サツジン": "satsujin",
    "コーサツ": "ko-satsu",
    "ゴ": "go",
    "ネコ": "neko",
    "イヌ": "inu",
    "ト": "to",
}


@pytest.fixture
def stub_transliterate():
    """Deterministic kana -> Latin function backed by STUB_ROMAJI."""
    return STUB_ROMAJI.__getitem__


@pytest.fixture
def scenario_tokens():
    """Tagger output for the reference sentences, keyed by input text."""
    t = ipadic_token
    return {
        "太陽のKiss": [
            t("太陽", "名詞", "タイヨー"),
            t("の", "助詞", "ノ"),
            t("Kiss", "名詞"),
        ],
        "エブリデイワールド": [
            t("エブリデイワールド", "名詞"),
        ],
        "U&I ～夕日の綺麗なあの丘で～ U&I": [
            t("U", "名詞"),
            t("&", "名詞"),
            t("I", "名詞"),
            t(" ", "記号"),
            t("～", "記号"),
            t("夕日", "名詞", "ユーヒ"),
            t("の", "助詞", "ノ"),
            t("綺麗", "名詞", "キレイ"),
            t("な", "助動詞", "ナ"),
            t("あの", "連体詞", "アノ"),
            t("丘", "名詞", "オカ"),
            t("で", "助詞", "デ"),
            t("～", "記号"),
            t(" ", "記号"),
            t("U", "名詞"),
            t("&", "名詞"),
            t("I", "名詞"),
        ],
        "ふでペン ～ボールペン～ [GAME Mix]": [
            t("ふ", "動詞", "フ"),
            t("で", "助詞", "デ"),
            t("ペン", "名詞", "ペン"),
            t(" ", "記号"),
            t("～", "記号"),
            t("ボールペン", "名詞", "ボールペン"),
            t("～", "記号"),
            t(" ", "記号"),
            t("[", "名詞"),
            t("GAME", "名詞"),
            t(" ", "記号"),
            t("Mix", "名詞"),
            t("]", "名詞"),
        ],
        "空の境界 「殺人考察（後）」Original Soundtrack": [
            t("空", "名詞", "ソラ"),
            t("の", "助詞", "ノ"),
            t("境界", "名詞", "キョーカイ"),
            t(" ", "記号"),
            t("「", "記号"),
            t("殺人", "名詞", "サツジン"),
            t("考察", "名詞", "コーサツ"),
            t("（", "記号"),
            t("後", "名詞", "ゴ"),
            t("）", "記号"),
            t("」", "記号"),
            t("Original", "名詞"),
            t(" ", "記号"),
            t("Soundtrack", "名詞"),
        ],
    }


@pytest.fixture
def expected_romanizations():
    """Reference sentences and their romanized form."""
    return {
        "太陽のKiss": "Taiyō no Kiss",
        "エブリデイワールド": "Eburideiwārudo",
        "U&I ～夕日の綺麗なあの丘で～ U&I": "U&I ~Yūhi no Kirei na ano Oka de~ U&I",
        "ふでペン ～ボールペン～ [GAME Mix]": "fu de Pen ~Bōrupen~ [GAME Mix]",
        "空の境界 「殺人考察（後）」Original Soundtrack":
            "Sora no Kyōkai 「Satsujin Kōsatsu(Go)」Original Soundtrack",
    }


@pytest.fixture
def make_token():
    """Factory for IPADIC-shaped tokens."""
    return ipadic_token
