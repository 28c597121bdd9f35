# campus_wellness/api/chat/emotion.py
"""Keyword-based emotion detection for incoming chat messages."""

import math
from typing import NamedTuple

# Order matters: when two labels reach the same score the one listed first wins.
EMOTION_KEYWORDS = {
    "happy": {"keywords": ["happy", "joy", "excited", "great", "wonderful", "amazing", "good", "fantastic", "delighted"], "weight": 1.0},
    "sad": {"keywords": ["sad", "depressed", "down", "unhappy", "miserable", "blue", "heartbroken", "devastated"], "weight": 1.0},
    "anxious": {"keywords": ["anxious", "worried", "nervous", "stressed", "overwhelmed", "panicked", "fearful"], "weight": 1.0},
    "angry": {"keywords": ["angry", "mad", "furious", "annoyed", "irritated", "frustrated", "enraged"], "weight": 1.0},
    "excited": {"keywords": ["excited", "thrilled", "ecstatic", "elated", "enthusiastic", "pumped"], "weight": 0.8},
    "frustrated": {"keywords": ["frustrated", "annoyed", "irritated", "bothered", "disappointed"], "weight": 0.9},
    "calm": {"keywords": ["calm", "peaceful", "serene", "tranquil", "relaxed", "at ease"], "weight": 0.7},
    "stressed": {"keywords": ["stressed", "overwhelmed", "pressured", "strained", "tense"], "weight": 0.9},
    "grateful": {"keywords": ["grateful", "thankful", "appreciative", "blessed", "fortunate"], "weight": 0.8},
    "neutral": {"keywords": ["okay", "fine", "alright", "normal", "usual"], "weight": 0.5},
}

DEFAULT_EMOTION = "neutral"

COPING_STRATEGIES = {
    "happy": [
        "Share your joy with others",
        "Practice gratitude journaling",
        "Document this moment",
        "Express your happiness through creativity",
        "Help someone else feel good",
    ],
    "sad": [
        "Take a walk in nature",
        "Listen to uplifting music",
        "Practice deep breathing exercises",
        "Talk to a friend or loved one",
        "Engage in gentle physical activity",
        "Write about your feelings",
    ],
    "anxious": [
        "Try the 4-7-8 breathing technique",
        "Write down your worries",
        "Practice progressive muscle relaxation",
        "Take a short break and stretch",
        "Use grounding techniques (5-4-3-2-1)",
        "Limit caffeine and screen time",
    ],
    "angry": [
        "Count to 10 slowly",
        "Take deep breaths",
        "Go for a walk",
        "Write down what's bothering you",
        "Use physical exercise to release tension",
        "Practice mindfulness meditation",
    ],
    "excited": [
        "Channel your energy into productive activities",
        "Share your excitement with others",
        "Document your goals and plans",
        "Practice patience and planning",
    ],
    "frustrated": [
        "Take a step back and reassess",
        "Break down problems into smaller parts",
        "Ask for help or clarification",
        "Practice self-compassion",
    ],
    "calm": [
        "Maintain this peaceful state",
        "Practice mindfulness",
        "Engage in gentle activities",
        "Share your calm with others",
    ],
    "stressed": [
        "Prioritize your tasks",
        "Take regular breaks",
        "Practice time management",
        "Seek support from others",
        "Use stress-reduction techniques",
    ],
    "grateful": [
        "Express your gratitude to others",
        "Keep a gratitude journal",
        "Practice acts of kindness",
        "Reflect on positive experiences",
    ],
    "neutral": [
        "Practice mindfulness",
        "Take a moment to check in with yourself",
        "Consider what would make you feel better",
        "Engage in activities you enjoy",
    ],
}


class EmotionDetection(NamedTuple):
    emotion: str
    confidence: int  # 0-100


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def detect_emotion_with_confidence(message: str) -> EmotionDetection:
    """Score `message` against every label and return the best one.

    Each keyword found as a substring of the lower-cased message adds its label's
    weight. Confidence is the winning score as a percentage of the summed label
    weights. Nothing matched means ("neutral", 0).
    """
    lower_message = (message or "").lower()
    max_score = 0.0
    detected_emotion = DEFAULT_EMOTION
    total_weight = 0.0

    for emotion, config in EMOTION_KEYWORDS.items():
        score = sum(config["weight"] for keyword in config["keywords"] if keyword in lower_message)

        # strict comparison keeps the earlier label on a tie
        if score > max_score:
            max_score = score
            detected_emotion = emotion
        total_weight += config["weight"]

    if total_weight <= 0:
        return EmotionDetection(detected_emotion, 0)

    confidence = round_half_up(max_score / total_weight * 100)
    return EmotionDetection(detected_emotion, max(0, min(100, confidence)))


def intensity_from_confidence(confidence: int) -> int:
    """Map a 0-100 confidence onto the 1-10 intensity scale of emotion events."""
    return max(1, min(10, round_half_up(confidence / 10)))


def coping_strategies_for(emotion: str) -> list:
    return list(COPING_STRATEGIES.get(emotion, COPING_STRATEGIES[DEFAULT_EMOTION]))
