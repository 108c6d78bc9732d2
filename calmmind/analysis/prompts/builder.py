from calmmind.analysis.schemas import AnalysisRequest, TaskKind
from calmmind.analysis.tasks import TASKS

# Language codes offered by the client, as named inside prompts.
LANGUAGE_NAMES = {
    "en": "English",
    "si": "Sinhala",
    "ta": "Tamil",
    "hi": "Hindi",
    "es": "Spanish",
    "ar": "Arabic",
}


def language_name(code: str) -> str:
    """Unknown codes are passed through verbatim."""
    code = (code or "en").strip()
    return LANGUAGE_NAMES.get(code.lower(), code)


def build_prompt(request: AnalysisRequest) -> str:
    """
    Builds the single instruction string sent to the model.

    The user text is appended verbatim; nothing is escaped.
    """
    template = TASKS[request.task_kind].template
    if request.task_kind == TaskKind.DAILY_TIPS:
        return template.format(
            language=language_name(request.language),
            mood=request.selected_mood or "unknown",
        )
    return template.format(
        language=language_name(request.language),
        text=request.input_text or "",
    )
