# campus_wellness/api/chat/responder.py
"""Reply selection for chat turns.

Replies come from three places, tried in order:
  1. active response templates stored in the database,
  2. the counselor conversation corpus loaded from CSV at startup,
  3. a fixed per-emotion fallback table.
"""

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd
from sqlalchemy.orm import Session

from campus_wellness.config import settings
from campus_wellness.api.chat.emotion import DEFAULT_EMOTION, coping_strategies_for, detect_emotion_with_confidence
from campus_wellness.api.templates import services as template_services
from campus_wellness.db.models.enums import EMOTION_TYPES

logger = logging.getLogger(__name__)

# Keep only the best few exemplars of each (emotion, problem type) group.
TEMPLATES_PER_GROUP = 5
DEFAULT_SCORE = 3.0
HIGH_QUALITY_SCORE = 4.0

LINE_CSV_OPTIONS = dict(dtype=str, keep_default_na=False, on_bad_lines="skip")
CSV_OPTIONS = dict(LINE_CSV_OPTIONS, encoding="utf-8-sig", encoding_errors="replace")

FALLBACK_STRATEGY = "Empathetic Support"
FALLBACK_EMPATHY = 4.0
FALLBACK_RELEVANCE = 3.0

FALLBACK_RESPONSES = {
    "anxious": "I can sense that you're feeling anxious. It's completely normal to feel this way, and I'm here to listen and support you. Would you like to talk more about what's causing this anxiety?",
    "sad": "I'm sorry to hear you're feeling down. It's okay to feel sad sometimes, and I want you to know that you're not alone. Would you like to share more about what's on your mind?",
    "angry": "I hear your frustration, and it's completely valid to feel angry. Sometimes talking about what's bothering us can help. Would you like to discuss what's making you feel this way?",
    "stressed": "Stress can be really overwhelming, and I understand how difficult it can be to manage. Let's take a moment to breathe together. What's the most pressing concern on your mind right now?",
    "happy": "It's wonderful that you're feeling good! I'm glad to hear that. What's bringing you this positive energy today?",
    "excited": "I can feel your excitement! That's fantastic. What's got you feeling so energized?",
    "frustrated": "I understand you're feeling frustrated. That can be really challenging. Would you like to talk about what's causing this frustration?",
    "calm": "It's great that you're feeling calm. How can I support you in maintaining this peaceful state?",
    "grateful": "It's beautiful that you're feeling grateful. What are you most thankful for right now?",
    "neutral": "How are you really feeling today? Sometimes when we feel neutral, it's a good opportunity to check in with ourselves more deeply.",
}


@dataclass(frozen=True)
class TrainingRecord:
    convo_id: str
    emotion_type: str
    problem_type: str
    situation: str
    user_text: str
    counselor_full: str
    strategy: str
    empathy: float
    relevance: float
    user_turn_emotion: str


@dataclass(frozen=True)
class CandidateResponse:
    emotion: str
    problem_type: str
    strategy: str
    response: str
    empathy: float
    relevance: float


@dataclass
class AIResponse:
    content: str
    response_type: str
    coping_strategies: List[str] = field(default_factory=list)


def _parse_score(value) -> float:
    try:
        score = float(value)
    except (TypeError, ValueError):
        return DEFAULT_SCORE
    # blank, zero and NaN all fall back to the neutral score
    if not score or score != score:
        return DEFAULT_SCORE
    return score


def similarity_score(user_message: str, template_response: str) -> float:
    """Share of the user's words that also occur in the candidate reply."""
    user_words = user_message.lower().split()
    template_words = set(template_response.lower().split())
    matches = sum(1 for word in user_words if word in template_words)
    return matches / max(len(user_words), 1)


class ResponseGenerator:
    def __init__(self, csv_path: Optional[str] = None):
        self.csv_path = Path(csv_path or settings.TRAINING_DATA_PATH)
        self.training_data: List[TrainingRecord] = []
        self.response_templates: List[CandidateResponse] = []
        self.is_initialized = False

    # ---------------------------------------------------
    # 📥 Corpus loading
    # ---------------------------------------------------

    def load(self) -> None:
        """Read and index the corpus once. Failures leave an empty corpus."""
        if self.is_initialized:
            return

        try:
            frame = self._read_corpus()
            if frame is not None:
                self.training_data = self._parse_rows(frame)
                self.response_templates = self._build_templates(self.training_data)
                logger.info(
                    "Loaded %d training examples (%d response templates) from %s",
                    len(self.training_data), len(self.response_templates), self.csv_path,
                )
        finally:
            self.is_initialized = True

    def _read_corpus(self) -> Optional[pd.DataFrame]:
        if not self.csv_path.is_file():
            logger.warning("Training data file %s not found, using fallback responses only", self.csv_path)
            return None

        try:
            frame = pd.read_csv(self.csv_path, **CSV_OPTIONS)
        except pd.errors.EmptyDataError:
            logger.warning("Training data file %s is empty", self.csv_path)
            return None
        except pd.errors.ParserError as e:
            logger.warning("Could not parse %s in one pass (%s), reading line by line", self.csv_path, e)
            frame = self._read_corpus_by_line()
        except OSError as e:
            logger.error("Error loading training data from %s: %s", self.csv_path, e)
            return None

        if frame is None:
            return None
        frame.columns = [str(column).strip().lower() for column in frame.columns]
        return frame.fillna("")

    def _read_corpus_by_line(self) -> Optional[pd.DataFrame]:
        """Parse each physical line on its own so a broken line only loses itself."""
        try:
            text = self.csv_path.read_text(encoding="utf-8-sig", errors="replace")
        except OSError as e:
            logger.error("Error loading training data from %s: %s", self.csv_path, e)
            return None

        lines = text.splitlines()
        if not lines or not lines[0].strip():
            return None
        header, rows = lines[0], lines[1:]

        frames = []
        for index, line in enumerate(rows):
            if not line.strip():
                continue
            try:
                frames.append(pd.read_csv(io.StringIO(f"{header}\n{line}\n"), **LINE_CSV_OPTIONS))
            except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
                logger.warning("Error parsing CSV line %d: %s", index + 2, e)

        if not frames:
            return pd.read_csv(io.StringIO(f"{header}\n"), **LINE_CSV_OPTIONS)
        return pd.concat(frames, ignore_index=True)

    def _parse_rows(self, frame: pd.DataFrame) -> List[TrainingRecord]:
        records = []
        for index, row in enumerate(frame.to_dict("records")):
            line = index + 2  # header is line 1
            try:
                record = self._parse_row(row)
            except (TypeError, ValueError, AttributeError) as e:
                logger.warning("Error parsing CSV line %d: %s", line, e)
                continue

            if not record.counselor_full or not record.user_text:
                logger.warning("Row %d: missing counselor_full or user_text, skipped", line)
                continue
            records.append(record)
        return records

    @staticmethod
    def _parse_row(row: dict) -> TrainingRecord:
        def column(name: str) -> str:
            value = row.get(name, "")
            return str(value).strip() if value is not None else ""

        return TrainingRecord(
            convo_id=column("convo_id"),
            emotion_type=column("emotion_type"),
            problem_type=column("problem_type"),
            situation=column("situation"),
            user_text=column("user_text"),
            counselor_full=column("counselor_full"),
            strategy=column("strategy"),
            empathy=_parse_score(column("empathy")),
            relevance=_parse_score(column("relevance")),
            user_turn_emotion=column("user_turn_emotion"),
        )

    @staticmethod
    def _build_templates(records: List[TrainingRecord]) -> List[CandidateResponse]:
        groups: Dict[Tuple[str, str], List[CandidateResponse]] = {}
        for record in records:
            groups.setdefault((record.emotion_type, record.problem_type), []).append(
                CandidateResponse(
                    emotion=record.emotion_type,
                    problem_type=record.problem_type,
                    strategy=record.strategy,
                    response=record.counselor_full,
                    empathy=record.empathy,
                    relevance=record.relevance,
                )
            )

        templates = []
        for candidates in groups.values():
            # sorted() is stable, so equal-quality rows keep file order
            ranked = sorted(candidates, key=lambda c: c.empathy + c.relevance, reverse=True)
            templates.extend(ranked[:TEMPLATES_PER_GROUP])
        return templates

    # ---------------------------------------------------
    # 🔎 Matching
    # ---------------------------------------------------

    def find_best_match(self, user_message: str, detected_emotion: str) -> Optional[CandidateResponse]:
        if not self.response_templates:
            return None

        emotion = (detected_emotion or "").lower()
        candidates = [t for t in self.response_templates if t.emotion.lower() == emotion]
        if not candidates:
            candidates = self.response_templates

        # max() returns the first of equally scored candidates
        return max(candidates, key=lambda t: similarity_score(user_message, t.response))

    def fallback_response(self, emotion: str) -> CandidateResponse:
        label = (emotion or "").lower()
        if label not in FALLBACK_RESPONSES:
            label = DEFAULT_EMOTION
        return CandidateResponse(
            emotion=label,
            problem_type="general",
            strategy=FALLBACK_STRATEGY,
            response=FALLBACK_RESPONSES[label],
            empathy=FALLBACK_EMPATHY,
            relevance=FALLBACK_RELEVANCE,
        )

    def generate_response(self, user_message: str, detected_emotion: str) -> CandidateResponse:
        best_match = self.find_best_match(user_message, detected_emotion)
        if best_match is not None:
            logger.debug("Corpus match with strategy %s", best_match.strategy)
            return best_match

        logger.debug("Using fallback response for emotion %s", detected_emotion)
        return self.fallback_response(detected_emotion)

    def get_coping_strategies(self, emotion: str, problem_type: str = "general") -> List[str]:
        """Distinct strategies used in high-quality replies for this emotion or problem type."""
        emotion = (emotion or "").lower()
        problem_type = (problem_type or "").lower()

        strategies = {}
        for record in self.training_data:
            if record.emotion_type.lower() != emotion and record.problem_type.lower() != problem_type:
                continue
            if record.empathy < HIGH_QUALITY_SCORE or record.relevance < HIGH_QUALITY_SCORE:
                continue
            if record.strategy and record.strategy != "Question":
                strategies.setdefault(record.strategy, None)
        return list(strategies)


response_generator = ResponseGenerator()


def select_response(db: Session, user_message: str, user_emotion: Optional[str]) -> AIResponse:
    """Pick the reply for a user message; never returns None."""
    if user_emotion in EMOTION_TYPES:
        templates = template_services.find_active_templates(db, user_emotion, limit=3)
        if templates:
            template = templates[0]
            return AIResponse(
                content=template.content,
                response_type=template.response_type,
                coping_strategies=list(template.coping_strategies or coping_strategies_for(user_emotion)),
            )

    emotion = user_emotion or detect_emotion_with_confidence(user_message).emotion

    generated = response_generator.generate_response(user_message, emotion)
    coping_strategies = response_generator.get_coping_strategies(emotion, "general") or coping_strategies_for(emotion)

    return AIResponse(
        content=generated.response,
        response_type=generated.strategy or "guidance",
        coping_strategies=coping_strategies,
    )
