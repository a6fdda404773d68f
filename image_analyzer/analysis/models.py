"""Analysis result models — the typed shape of a conforming model reply."""
from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    # Every field is required; types are not coerced ("true" is not a bool).
    model_config = ConfigDict(frozen=True, strict=True)


class DetectedObject(_Record):
    name: str
    attributes: list[str]
    estimated_role: str
    location: str


class EnvironmentContext(_Record):
    setting_type: str = Field(description="e.g., 'indoors', 'outdoors', 'urban', 'natural'")
    time_context: str = Field(description="e.g., 'daytime', 'night', 'golden hour'")
    mood_or_tone: str = Field(description="e.g., 'joyful', 'somber', 'energetic', 'peaceful'")
    activity_type: str = Field(
        description="The main activity depicted, e.g., 'celebration', 'work', 'leisure'"
    )


class VisualQualityAnalysis(_Record):
    focus_and_sharpness: str
    lighting: str
    framing_and_composition: str
    aesthetic_notes: str


class TextInImage(_Record):
    has_text: bool
    transcribed_text: str
    meaning_or_purpose: str


class SafetyAndSensitiveContent(_Record):
    is_sensitive: bool
    notes: str


class AnalysisResult(_Record):
    summary: str = Field(description="A brief, one-sentence summary of the image.")
    detailed_description: str = Field(
        description="A comprehensive, paragraph-long description of the image content and context."
    )
    objects_detected: list[DetectedObject]
    environment_context: EnvironmentContext
    visual_quality_analysis: VisualQualityAnalysis
    text_in_image: TextInImage
    potential_use_cases: list[str]
    safety_and_sensitive_content: SafetyAndSensitiveContent
    next_action_suggestion: str = Field(
        description="A suggested next step for a user, like 'Enhance lighting' or 'Identify main subject'."
    )
