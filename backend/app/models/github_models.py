"""Pydantic models for the GitHub Models marketplace integration."""

from pydantic import BaseModel, ConfigDict, Field


class RemoteModelDescriptor(BaseModel):
    """One model as returned by the GitHub Models list endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str | None = None
    friendly_name: str | None = ""
    description: str | None = ""
    tags: list[str] | None = Field(default_factory=list)
    task: str | None = ""


class ModelAbilities(BaseModel):
    functionCall: bool = False
    vision: bool = False
    reasoning: bool = False


class KnownModelEntry(BaseModel):
    """Locally curated metadata for a model the vendor does not fully describe."""

    id: str
    displayName: str | None = None
    contextWindowTokens: int | None = None
    enabled: bool = False
    abilities: ModelAbilities | None = None


class EnrichedModelCard(BaseModel):
    id: str
    displayName: str
    description: str = ""
    enabled: bool = False
    contextWindowTokens: int | None = None
    maxOutput: int | None = None
    functionCall: bool = False
    vision: bool = False
    reasoning: bool = False


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatCompletionRequest(BaseModel):
    model: str
    messages: list[ChatMessage]
    stream: bool | None = None
    temperature: float | None = None
    top_p: float | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None
    max_tokens: int | None = None


class ChatCompletionResponse(BaseModel):
    model: str
    content: str
    stream: bool


class ConnectionTestResponse(BaseModel):
    success: bool
    message: str
    model: str | None = None
