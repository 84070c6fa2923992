from hanzi_categorizer.core.phrases import chunk_phrases, extract_noun_phrases, extract_verb_phrases
from hanzi_categorizer.models import NOUN_GROUP, VERB_GROUP, PosTag, Token


def _tokens(*pairs):
    return [Token(text=text, tag=tag) for text, tag in pairs]


MIXED = _tokens(
    ("中国", PosTag.noun),
    ("文化", PosTag.noun),
    ("的", PosTag.other),
    ("学习", PosTag.verb),
    ("认真", PosTag.adverb),
)


def test_noun_group_merges_leading_nouns():
    assert chunk_phrases(MIXED, NOUN_GROUP) == ["中国 文化"]


def test_verb_group_merges_trailing_verb_and_adverb():
    assert chunk_phrases(MIXED, VERB_GROUP) == ["学习 认真"]


def test_trailing_phrase_is_flushed():
    tokens = _tokens(("红", PosTag.noun), ("花", PosTag.adjective))
    assert extract_noun_phrases(tokens) == ["红 花"]


def test_non_chinese_token_is_a_boundary():
    tokens = _tokens(
        ("这", PosTag.determiner),
        ("书", PosTag.noun),
        ("，", PosTag.noun),
        ("好", PosTag.adjective),
    )
    assert extract_noun_phrases(tokens) == ["这 书", "好"]


def test_single_token_phrases_and_modal():
    tokens = _tokens(
        ("能", PosTag.modal),
        ("去", PosTag.verb),
        ("北京", PosTag.noun),
        ("吗", PosTag.other),
        ("走", PosTag.verb),
    )
    assert extract_verb_phrases(tokens) == ["能 去", "走"]
    assert extract_noun_phrases(tokens) == ["北京"]


def test_empty_stream_has_no_phrases():
    assert chunk_phrases([], NOUN_GROUP) == []
    assert chunk_phrases(_tokens(("的", PosTag.other)), VERB_GROUP) == []
