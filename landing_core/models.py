"""
Request and response models for the landing page API.

Inbound bodies are checked field by field in the handlers so that each
failure maps to its own message; these models describe the values once
they are known to be valid, and the shapes sent back to callers.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PromptRequest(BaseModel):
    """A prompt generation request."""
    model_config = ConfigDict(populate_by_name=True)

    system_prompt: Optional[str] = Field(None, alias="systemPrompt")
    user_query: str = Field(..., alias="userQuery")

    def full_prompt(self) -> str:
        """The text sent to the model: the system prompt, if any, followed by the user request."""
        if self.system_prompt:
            return f"{self.system_prompt}\n\nUser request: {self.user_query}"
        return self.user_query


class PromptResult(BaseModel):
    """Generated text returned to the caller."""
    text: str


class SubscriptionRequest(BaseModel):
    """A newsletter signup request."""
    email: str


class SubscriptionResult(BaseModel):
    """Acknowledgement of a newsletter signup."""
    success: bool = True
    message: str = "Email saved successfully"


class ErrorResponse(BaseModel):
    """Body of every failed request."""
    error: str
