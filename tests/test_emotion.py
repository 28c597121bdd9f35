import pytest

from campus_wellness.api.chat.emotion import (
    COPING_STRATEGIES,
    EMOTION_KEYWORDS,
    detect_emotion_with_confidence,
    intensity_from_confidence,
    round_half_up,
)

TOTAL_WEIGHT = sum(config["weight"] for config in EMOTION_KEYWORDS.values())

# One keyword per label that no other label's keywords overlap with
DISTINCT_KEYWORDS = {
    "happy": "joy",
    "sad": "heartbroken",
    "anxious": "nervous",
    "angry": "furious",
    "excited": "thrilled",
    "frustrated": "bothered",
    "calm": "serene",
    "stressed": "pressured",
    "grateful": "thankful",
    "neutral": "okay",
}


def test_lexicon_has_ten_labels_in_fixed_order():
    assert list(EMOTION_KEYWORDS) == [
        "happy", "sad", "anxious", "angry", "excited",
        "frustrated", "calm", "stressed", "grateful", "neutral",
    ]
    assert set(COPING_STRATEGIES) == set(EMOTION_KEYWORDS)
    assert all(COPING_STRATEGIES[label] for label in COPING_STRATEGIES)


@pytest.mark.parametrize("label,keyword", sorted(DISTINCT_KEYWORDS.items()))
def test_single_keyword_selects_its_label(label, keyword):
    detection = detect_emotion_with_confidence(keyword)
    assert detection.emotion == label
    assert detection.confidence == round_half_up(100 * EMOTION_KEYWORDS[label]["weight"] / TOTAL_WEIGHT)
    assert detection.confidence > 0


def test_empty_text_is_neutral_with_zero_confidence():
    assert detect_emotion_with_confidence("") == ("neutral", 0)
    assert detect_emotion_with_confidence(None) == ("neutral", 0)


def test_unmatched_text_is_neutral_with_zero_confidence():
    assert detect_emotion_with_confidence("The library closes at nine.") == ("neutral", 0)


def test_matching_is_case_insensitive_substring():
    assert detect_emotion_with_confidence("I am SO ANXIOUS today").emotion == "anxious"
    # "unhappy" contains "happy" as well as being a sad keyword; happy wins the tie by table order
    assert detect_emotion_with_confidence("unhappy").emotion == "happy"


def test_shared_keyword_goes_to_higher_weight_label():
    # "excited" scores 1.0 for happy and 0.8 for excited
    assert detect_emotion_with_confidence("excited").emotion == "happy"
    # "stressed" scores 1.0 for anxious and 0.9 for stressed
    assert detect_emotion_with_confidence("stressed").emotion == "anxious"


def test_tie_goes_to_first_label_in_table_order():
    # one keyword each for sad (1.0) and anxious (1.0): sad is listed first
    assert detect_emotion_with_confidence("sad and worried").emotion == "sad"
    assert detect_emotion_with_confidence("worried and sad").emotion == "sad"


def test_scores_accumulate_across_keywords():
    # anxious: nervous + worried = 2.0 beats sad: down = 1.0
    detection = detect_emotion_with_confidence("nervous, worried and a bit down")
    assert detection.emotion == "anxious"
    assert detection.confidence == round_half_up(200 / TOTAL_WEIGHT)


def test_multi_word_keyword():
    assert detect_emotion_with_confidence("finally at ease").emotion == "calm"


def test_confidence_is_capped_at_100():
    every_keyword = " ".join(kw for config in EMOTION_KEYWORDS.values() for kw in config["keywords"])
    detection = detect_emotion_with_confidence(every_keyword)
    assert 0 < detection.confidence <= 100


@pytest.mark.parametrize("confidence,intensity", [(0, 1), (4, 1), (5, 1), (12, 1), (15, 2), (25, 3), (54, 5), (100, 10)])
def test_intensity_from_confidence(confidence, intensity):
    assert intensity_from_confidence(confidence) == intensity


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
