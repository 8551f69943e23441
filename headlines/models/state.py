from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .news import Article, Category


class _State(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def is_terminal(self) -> bool:
        return False


class Idle(_State):
    status: Literal["idle"] = "idle"


class _SequenceState(_State):
    category: Category = Field(description="Category the sequence was started for")
    sequence: int = Field(ge=1, description="Identity token of the publishing sequence")


class Loading(_SequenceState):
    status: Literal["loading"] = "loading"
    attempt: int = Field(ge=1, description="Attempt currently in progress")


class Success(_SequenceState):
    status: Literal["success"] = "success"
    articles: tuple[Article, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return True

    @property
    def is_empty(self) -> bool:
        return not self.articles


class Failed(_SequenceState):
    status: Literal["failed"] = "failed"
    message: str = Field(description="Human readable reason after all attempts")

    @property
    def is_terminal(self) -> bool:
        return True


FetchState = Annotated[
    Union[Idle, Loading, Success, Failed], Field(discriminator="status")
]
