"""
One configuration record per analysis task: prompt template and the fully
populated fallback used when the model output is unusable. The fallback's
type is the task's result schema.
"""

from dataclasses import dataclass
from typing import Dict

from pydantic import BaseModel

import calmmind.analysis.prompts.templates as templates
from calmmind.analysis.schemas import (
    DailyTips,
    MoodAnalysis,
    RelationshipAnalysis,
    SocialMediaAnalysis,
    TaskKind,
    ThoughtClarification,
)
from calmmind.journals.schemas import Emotion


@dataclass(frozen=True)
class TaskConfig:
    template: str
    fallback: BaseModel


MOOD_FALLBACK = MoodAnalysis(
    mood="neutral",
    score=0.5,
    emotions=[Emotion(name="Undetermined", percentage=100)],
    suggestions=[
        "Take a moment to breathe and reflect.",
        "Consider journaling your thoughts.",
        "Connect with a friend or loved one.",
    ],
)

# Returned as-is when the user only picked a mood and wrote nothing.
SELECTED_MOOD_EMOTIONS = [
    Emotion(name="Primary Emotion", percentage=65),
    Emotion(name="Secondary Emotion", percentage=25),
    Emotion(name="Tertiary Emotion", percentage=10),
]
SELECTED_MOOD_SUGGESTIONS = [
    "Take a moment to breathe deeply and check in with yourself.",
    "Consider journaling about why you feel this way.",
    "Connect with someone you trust about your feelings.",
]

THOUGHTS_FALLBACK = ThoughtClarification(
    clarified_thoughts="I understand you're experiencing some complex thoughts. Let's break them down together.",
    action_steps=[
        "Take a moment to breathe and gather your thoughts",
        "Write down specifically what's bothering you",
        "Consider what small step you can take today",
    ],
)

RELATIONSHIP_FALLBACK = RelationshipAnalysis(
    compatibility_score=50,
    communication_quality=50,
    strengths=[
        "Understanding of each other's perspectives",
        "Shared values and interests",
        "Mutual respect",
    ],
    areas_to_improve=[
        "Communication during disagreements",
        "Active listening",
        "Expression of needs",
    ],
    tips=[
        "Practice active listening by repeating back what you heard",
        "Schedule regular check-ins about your relationship",
        "Express appreciation for specific things the other person does",
    ],
)

DAILY_TIPS_FALLBACK = DailyTips(
    affirmation=(
        "I embrace each day with an open heart and mind, allowing myself to grow "
        "through both challenges and joys."
    ),
    meditation=(
        "Find a comfortable position and close your eyes. Take a deep breath in through your nose, "
        "filling your lungs completely, and then exhale slowly through your mouth. Feel the tension "
        "leaving your body with each exhale.\n\n"
        "Focus on the present moment, acknowledging your thoughts without judgment. With each breath, "
        "imagine a peaceful energy flowing through your body, bringing calm and clarity to your mind."
    ),
    self_care=[
        "Take a 10-minute walk outside, focusing on the sensations around you",
        "Write down three things you're grateful for today",
        "Drink a glass of water and enjoy a nutritious snack mindfully",
    ],
)

SOCIAL_MEDIA_FALLBACK = SocialMediaAnalysis(
    emotional_tone="Neutral with slight positive undertones",
    social_impression="Readers are likely to perceive you as thoughtful and genuine.",
    suggestions=[
        "Consider adding more personal warmth to create deeper connections",
        "Try incorporating a thoughtful question to engage your audience",
        "Adding a specific detail about your experience can make the content more relatable",
    ],
)

TASKS: Dict[TaskKind, TaskConfig] = {
    TaskKind.MOOD: TaskConfig(templates.MOOD_TEMPLATE, MOOD_FALLBACK),
    TaskKind.THOUGHTS: TaskConfig(templates.THOUGHTS_TEMPLATE, THOUGHTS_FALLBACK),
    TaskKind.RELATIONSHIP: TaskConfig(templates.RELATIONSHIP_TEMPLATE, RELATIONSHIP_FALLBACK),
    TaskKind.DAILY_TIPS: TaskConfig(templates.DAILY_TIPS_TEMPLATE, DAILY_TIPS_FALLBACK),
    TaskKind.SOCIAL_MEDIA: TaskConfig(templates.SOCIAL_MEDIA_TEMPLATE, SOCIAL_MEDIA_FALLBACK),
}
