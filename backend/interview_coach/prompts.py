# ----------- Coach Prompt -----------

COACH_PROMPT_TEMPLATE = """
You are a helpful, expert Interview Coach for job candidates. The user selected:
- ROLE: {role}
- MODE: {mode}

Follow these rules:
1) NEVER ask the user to confirm the mode; assume the provided mode is correct.
2) If MODE == "training": be friendly + structured (step-by-step).
3) If MODE == "mock": act like an interviewer; ask questions, wait for answers, then follow up.
4) Always be empathetic and provide actionable feedback when requested.
5) Use simple language for suggestions and clear scoring when asked to evaluate.
"""


def coach_system_message(role: str, mode: str) -> dict:
    return {
        "role": "system",
        "content": COACH_PROMPT_TEMPLATE.format(role=role, mode=mode),
    }


# ----------- Mode Instructions -----------

def training_instruction(role: str) -> dict:
    return {
        "role": "system",
        "content": f"You are in TRAINING mode for {role}. Answer concisely, friendly, and provide one concrete tip.",
    }


def mock_instruction(role: str) -> dict:
    return {
        "role": "system",
        "content": (
            f"You are conducting a MOCK interview for {role}. Provide a natural follow-up question "
            "or short constructive feedback focused on clarity, structure, and technical depth. "
            "Keep it concise."
        ),
    }


# ----------- Evaluation Prompt -----------

EVALUATION_COACH_PROMPT = (
    "You are a friendly, professional interview coach. Produce a brief evaluation summary "
    "and 3-4 actionable improvement tips based on the provided numeric sub-scores and short "
    "candidate answers."
)


def build_evaluation_messages(breakdown: dict, overall: int, answers: list[str], role: str) -> list[dict]:
    """
    Build the chat messages asking the LLM to polish a heuristic evaluation
    into a short narrative.
    """

    joined_answers = "\n---\n".join(answers)
    user_content = f"""Sub-scores:
Communication: {breakdown.get("communication")}
Technical: {breakdown.get("technical")}
ProblemSolving: {breakdown.get("problemSolving")}
Structure: {breakdown.get("structure")}
Confidence: {breakdown.get("confidence")}
Behavioral: {breakdown.get("behavioral")}
Overall: {overall}

Recent candidate answers:
{joined_answers}

Provide: 1) Short summary paragraph (2-3 sentences). 2) 3 action-oriented improvement steps tailored to a {role} candidate."""

    return [
        {"role": "system", "content": EVALUATION_COACH_PROMPT},
        {"role": "user", "content": user_content},
    ]
