from pydantic import BaseModel, ConfigDict, Field


class MessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(default=None, alias="sessionId")
    message: str | None = None
    role: str | None = None
    mode: str | None = None


class EvaluationBreakdown(BaseModel):
    communication: int
    technical: int
    problemSolving: int
    structure: int
    confidence: int
    behavioral: int


class EvaluationResponse(BaseModel):
    overall: int
    breakdown: EvaluationBreakdown
    improvements: list[str]
    llmFeedback: str


class MessageResponse(BaseModel):
    sessionId: str
    reply: str
    suggestions: list[str]
    mode: str | None = None
    evaluation: EvaluationResponse | None = None


class ErrorReply(BaseModel):
    reply: str
