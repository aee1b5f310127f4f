from dataclasses import dataclass


@dataclass(frozen=True)
class Lesson:
    title: str
    content: str
    example: str
    practice_prompt: str


# ---------- TRAINING LESSONS ----------

TRAINING_LESSONS: tuple[Lesson, ...] = (
    Lesson(
        title="Understand the Role",
        content=(
            "A Software Engineer builds, tests, and maintains software. Key skills: problem solving, "
            "data structures & algorithms, system design basics, communication, and collaboration."
        ),
        example=(
            "Example summary: 'I build backend services using Java/Spring and focus on reliable APIs "
            "and good tests. I recently improved latency by 30% by optimizing queries.'"
        ),
        practice_prompt="In one short sentence, tell me what you would bring to this role.",
    ),
    Lesson(
        title="Common Interview Questions",
        content=(
            "Common questions include: 'Tell me about yourself', 'Why us?', 'Describe a challenging "
            "bug you fixed', 'Explain a system you designed'."
        ),
        example=(
            "For 'Why us?': 'I like your focus on scalable systems and the opportunity to work on "
            "distributed services; my experience in XYZ aligns.'"
        ),
        practice_prompt="Answer: 'Why are you interested in this company?' (30-45 seconds)",
    ),
    Lesson(
        title="STAR Method & Structuring Answers",
        content=(
            "Use STAR: Situation → Task → Action → Result. Keep answers concise and focused on impact."
        ),
        example=(
            "Example STAR: 'Situation: Slow API. Task: Reduce latency. Action: Added indexing and "
            "caching. Result: 40% faster responses.'"
        ),
        practice_prompt="Describe a recent challenge using the STAR format (one short paragraph).",
    ),
    Lesson(
        title="Technical Preparation (DSA & Systems)",
        content=(
            "Be ready for algorithmic questions (arrays, trees, graphs), and explain time/space "
            "complexity. For systems design, discuss trade-offs and scalability."
        ),
        example=(
            "For DSA: 'I used two-pointer technique to reduce complexity from O(n^2) to O(n).' For "
            "design: 'I would use sharding, caching and load balancers for scale.'"
        ),
        practice_prompt="Explain how you'd find the middle of a linked list (brief).",
    ),
    Lesson(
        title="Behavioral & Culture Fit",
        content=(
            "Interviewers assess teamwork, communication, and how you learn from mistakes. Be honest, "
            "show growth, and give measurable outcomes."
        ),
        example="Example: 'I led a small team to adopt CI/CD which reduced rollback time by 60%.'",
        practice_prompt="Share one thing you learned from a mistake and how you fixed it.",
    ),
    Lesson(
        title="Mistakes to Avoid & Final Tips",
        content=(
            "Avoid rambling, over-technical detail without context, or not answering the question "
            "directly. Summarize your point and relate it to the role."
        ),
        example="Wrap up answers: 'In summary: I improved X and delivered Y results.'",
        practice_prompt="Give a 30-second summary of your most relevant project.",
    ),
)


# ---------- MOCK QUESTIONS ----------

MOCK_QUESTIONS: tuple[str, ...] = (
    "Tell me about yourself.",
    "Why are you interested in this role?",
    "Describe a time you faced a technical challenge and how you resolved it.",
    "How do you approach debugging a production issue?",
    "Design a scalable URL shortening service (high level).",
)


# ---------- SUGGESTIONS ----------

_TRAINING_SUGGESTIONS = ["next", "give me an example", "practice", "explain more", "start mock"]
_MOCK_SUGGESTIONS = ["stop", "continue", "evaluate"]
AFTER_EVALUATION_SUGGESTIONS = ["start mock", "next"]


def training_suggestions() -> list[str]:
    return list(_TRAINING_SUGGESTIONS[:4])


def mock_suggestions() -> list[str]:
    return list(_MOCK_SUGGESTIONS)


def lesson_at(step: int) -> Lesson:
    """Lesson for a step index, clamped into the catalog."""
    index = max(0, min(int(step), len(TRAINING_LESSONS) - 1))
    return TRAINING_LESSONS[index]


def question_at(step: int) -> str:
    index = max(0, min(int(step), len(MOCK_QUESTIONS) - 1))
    return MOCK_QUESTIONS[index]
