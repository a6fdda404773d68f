"""Plain-text rendering of analysis results and session states for chat replies."""
from image_analyzer.analysis.models import AnalysisResult, DetectedObject, TextInImage
from image_analyzer.constants import (
    MSG_ANALYSIS_STARTED,
    MSG_IDLE_NO_RESULT,
    MSG_NO_TEXT_IN_IMAGE,
    MSG_NOT_SENSITIVE,
    MSG_SENSITIVE,
    TELEGRAM_MESSAGE_LIMIT,
)
from image_analyzer.session import AnalysisState, Failed, Idle, Loading, Succeeded


def _section(title: str, *lines: str) -> str:
    return "\n".join((f"■ {title}", *lines))


def _render_object(obj: DetectedObject) -> str:
    lines = [
        f"• {obj.name}",
        f"  Role: {obj.estimated_role}",
        f"  Location: {obj.location}",
    ]
    match obj.attributes:
        case []:
            pass
        case attrs:
            lines.append(f"  Attributes: {', '.join(attrs)}")
    return "\n".join(lines)


def _render_text(text: TextInImage) -> tuple[str, ...]:
    match text.has_text:
        case True:
            return (
                f'"{text.transcribed_text}"',
                f"Meaning/Purpose: {text.meaning_or_purpose}",
            )
        case False:
            return (MSG_NO_TEXT_IN_IMAGE,)


def render_analysis(result: AnalysisResult) -> str:
    env = result.environment_context
    quality = result.visual_quality_analysis
    safety = result.safety_and_sensitive_content
    sections = [
        _section("Summary", result.summary),
        _section("Detailed Description", result.detailed_description),
        _section("Objects Detected", *map(_render_object, result.objects_detected)),
        _section(
            "Environment Context",
            f"Setting: {env.setting_type}",
            f"Time: {env.time_context}",
            f"Mood/Tone: {env.mood_or_tone}",
            f"Activity: {env.activity_type}",
        ),
        _section(
            "Visual Quality",
            f"Focus & Sharpness: {quality.focus_and_sharpness}",
            f"Lighting: {quality.lighting}",
            f"Composition: {quality.framing_and_composition}",
            f"Aesthetic Notes: {quality.aesthetic_notes}",
        ),
        _section("Text in Image", *_render_text(result.text_in_image)),
        _section("Potential Use Cases", *(f"• {u}" for u in result.potential_use_cases)),
        _section(
            "Safety & Sensitive Content",
            MSG_SENSITIVE if safety.is_sensitive else MSG_NOT_SENSITIVE,
            safety.notes,
        ),
        _section("Next Action Suggestion", result.next_action_suggestion),
    ]
    return "\n\n".join(sections)


def render_state(state: AnalysisState) -> str:
    match state:
        case Idle():
            return MSG_IDLE_NO_RESULT
        case Loading():
            return MSG_ANALYSIS_STARTED
        case Succeeded(result=result):
            return render_analysis(result)
        case Failed(message=message):
            return message


def describe_state(state: AnalysisState) -> str:
    """One-word state name for /status."""
    match state:
        case Idle():
            return "idle"
        case Loading():
            return "analyzing"
        case Succeeded():
            return "done"
        case Failed():
            return "failed"


def split_message(text: str, limit: int = TELEGRAM_MESSAGE_LIMIT) -> list[str]:
    """Split on line boundaries so each chunk fits in one chat message."""
    chunks: list[str] = []
    current = ""
    for line in text.split("\n"):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        match len(candidate) > limit:
            case True:
                chunks.append(current)
                current = line
            case False:
                current = candidate
    if current:
        chunks.append(current)
    return chunks
