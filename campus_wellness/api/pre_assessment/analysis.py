# campus_wellness/api/pre_assessment/analysis.py
import copy
import json
import logging

from openai import OpenAI

from campus_wellness.config import settings

logger = logging.getLogger(__name__)

client = OpenAI(api_key=settings.OPENAI_API_KEY)

RISK_LEVELS = ("low", "moderate", "high", "critical")

FALLBACK_ANALYSIS = {
    "risk_level": "moderate",
    "risk_score": 50,
    "key_findings": ["Assessment completed", "Requires professional review"],
    "primary_concerns": ["Work stress", "General wellness"],
    "recommendations": ["Continue monitoring", "Seek professional support if needed"],
    "personalized_plan": {
        "immediate_actions": ["Take time for self-care", "Practice deep breathing"],
        "short_term_goals": ["Establish daily wellness routine", "Improve work-life balance"],
        "long_term_support": ["Regular check-ins with support system", "Professional counseling if needed"],
        "coping_strategies": ["Mindfulness exercises", "Regular breaks", "Stress management techniques"],
    },
    "communication_style": "supportive",
    "priority_areas": ["General wellness", "Stress management"],
    "conversation_context": {
        "emotional_state": "Managing daily stress",
        "communication_style": "supportive",
        "key_triggers": ["Work overload", "Time pressure"],
    },
}


def build_prompt(assessment_data: dict) -> str:
    return f"""
As a mental health professional, analyze this staff member's pre-assessment and provide a comprehensive analysis.
Each item is scored 0 (never) to 3 (nearly always).

Assessment Data:
{json.dumps(assessment_data, indent=2)}

Return a JSON object with:
1. risk_level: one of "low", "moderate", "high", "critical"
2. risk_score: an integer from 0-100
3. key_findings: list of key findings from the responses
4. primary_concerns: list of primary concerns
5. recommendations: list of specific recommendations for immediate support
6. personalized_plan: object with immediate_actions, short_term_goals (2-4 weeks),
   long_term_support and coping_strategies (lists of strings)
7. communication_style: one of "supportive", "gentle", "direct", "encouraging"
8. priority_areas: list of areas to focus on, based on the highest scores
9. conversation_context: object with emotional_state, communication_style and key_triggers (list)

Focus on campus-specific stressors like workload, student concerns and work-life balance.
"""


def analyze_pre_assessment(assessment_data: dict) -> dict:
    """Ask the model for a structured analysis; any failure yields the fallback analysis."""
    try:
        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[
                {"role": "system", "content": "You are a careful mental health assistant that always responds with valid JSON."},
                {"role": "user", "content": build_prompt(assessment_data)},
            ],
            temperature=0.3,
            max_tokens=3000,
        )
        analysis = json.loads(response.choices[0].message.content.strip())
    except Exception as e:
        logger.error("Error analyzing pre-assessment: %s", e)
        return copy.deepcopy(FALLBACK_ANALYSIS)

    if not isinstance(analysis, dict) or analysis.get("risk_level") not in RISK_LEVELS:
        logger.warning("Pre-assessment analysis had no usable risk_level, using fallback")
        return copy.deepcopy(FALLBACK_ANALYSIS)

    return analysis
