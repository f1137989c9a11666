from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model output shape — camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Gateway Request ─────────────────────────────────────────────────────────


class ChatMessage(BaseModel):
    """A single role-tagged chat message."""

    role: str  # "system" | "user" | "assistant"
    content: str


class GenerativeRequest(BaseModel):
    """One chat-completion request to the text-generation endpoint."""

    model: str
    messages: list[ChatMessage]
    max_tokens: int = Field(default=500, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=1.0)


# ── CV Parsing / Optimization ───────────────────────────────────────────────


class ParsedCvData(CamelModel):
    """Structured fields extracted from a resume."""

    name: str = ""
    email: str = ""
    phone: str = ""
    skills: list[str] = []
    experience: str = ""
    education: str = ""
    certifications: list[str] = []
    summary: str = ""

    @field_validator("name", "email", "phone", "experience", "education", "summary", mode="before")
    @classmethod
    def _join_lists(cls, val: Any) -> Any:
        if val is None:
            return ""
        if isinstance(val, list):
            return "\n".join(str(v) for v in val)
        return val

    @field_validator("skills", "certifications", mode="before")
    @classmethod
    def _wrap_str(cls, val: Any) -> Any:
        if val is None:
            return []
        if isinstance(val, str):
            return [val]
        return val


class CvOptimizationRequest(CamelModel):
    """Input for resume optimization."""

    resume_text: str
    job_title: str = ""
    industry: str = "General"
    seniority_level: str = "Mid-Level"  # Entry | Mid-Level | Senior
    optimization_style: str = "Professional"  # Concise | Professional | Keyword-Optimized


class OptimizedCv(CamelModel):
    """Optimized resume text plus the skills the model found missing."""

    optimized_resume: str = ""
    missing_skills: list[str] = []


class CvTextInput(BaseModel):
    """Raw resume text submitted for extraction."""

    text: str


# ── Recommendations ─────────────────────────────────────────────────────────


class RecommendedJob(CamelModel):
    """A ranked recommendation entry as echoed by the model."""

    id: Optional[str] = None
    title: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, val: Any) -> Any:
        # Numeric catalog ids often come back as JSON numbers
        if isinstance(val, (int, float)) and not isinstance(val, bool):
            return str(val)
        return val


class JobRecommendationResponse(CamelModel):
    """Ranked job list returned by the model — bare titles or {id, title} objects."""

    jobs: list[Union[RecommendedJob, str]] = []


# ── Interview Prep ──────────────────────────────────────────────────────────


class InterviewQuestion(CamelModel):
    question: str = ""
    answer: str = ""


class InterviewResponse(CamelModel):
    questions: list[InterviewQuestion] = []


class InterviewRequest(CamelModel):
    """Input for interview question generation."""

    job_title: str = ""
    question_count: int = 5
    skills: list[str] = []


# ── Hiring Score / Skill Gap ────────────────────────────────────────────────


class HiringScore(CamelModel):
    """Predicted hiring score (0-100) with reasoning."""

    score: int = 0
    reason: str = ""
    improvements: list[str] = []


class OnlineCourse(CamelModel):
    platform: str = ""
    course_title: str = ""
    link: str = ""


class SkillGapAnalysis(CamelModel):
    """Skills a candidate lacks for a posting, plus suggested courses."""

    missing_skills: list[str] = []
    recommended_courses: list[OnlineCourse] = []
