import copy

import pytest

PARK_SCENE = {
    "summary": "A park scene.",
    "detailed_description": "A sunny park with a bench under a large oak tree and a path.",
    "objects_detected": [
        {
            "name": "bench",
            "attributes": ["wooden", "green"],
            "estimated_role": "seating",
            "location": "center foreground",
        },
        {
            "name": "tree",
            "attributes": [],
            "estimated_role": "shade",
            "location": "left background",
        },
    ],
    "environment_context": {
        "setting_type": "outdoors",
        "time_context": "daytime",
        "mood_or_tone": "peaceful",
        "activity_type": "leisure",
    },
    "visual_quality_analysis": {
        "focus_and_sharpness": "sharp",
        "lighting": "bright natural light",
        "framing_and_composition": "rule of thirds",
        "aesthetic_notes": "warm colors",
    },
    "text_in_image": {
        "has_text": False,
        "transcribed_text": "",
        "meaning_or_purpose": "",
    },
    "potential_use_cases": ["travel blog", "stock photo"],
    "safety_and_sensitive_content": {
        "is_sensitive": False,
        "notes": "none",
    },
    "next_action_suggestion": "Identify main subject",
}


@pytest.fixture
def park_payload() -> dict:
    """A conforming model reply for a daytime outdoor photo."""
    return copy.deepcopy(PARK_SCENE)
