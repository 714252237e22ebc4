# fakeso/schemas/question.py
"""
Pydantic schemas for questions, answers, comments and tags.
Mirror the JSON documents the Q&A client renders: "_id" identifiers and
camelCase attribute names.
"""
import datetime as dt
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .common import as_utc

__all__ = ["TagOut", "CommentOut", "AnswerOut", "QuestionOut"]

class TagOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    description: str

    @classmethod
    def from_model(cls, tag) -> "TagOut":
        return cls(_id=str(tag.id), name=tag.name, description=tag.description)

class CommentOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    text: str
    commentBy: str
    commentDateTime: dt.datetime

    @classmethod
    def from_model(cls, comment) -> "CommentOut":
        return cls(
            _id=str(comment.id),
            text=comment.text,
            commentBy=comment.comment_by,
            commentDateTime=as_utc(comment.comment_date_time),
        )

class AnswerOut(BaseModel):
    """Answer with its comments embedded."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    text: str
    ansBy: str
    ansDateTime: dt.datetime
    comments: List[CommentOut] = []

    @classmethod
    async def load(cls, answer) -> "AnswerOut":
        """Fetch the answer's comments and build the response object."""
        await answer.fetch_related("comments")
        return cls(
            _id=str(answer.id),
            text=answer.text,
            ansBy=answer.ans_by,
            ansDateTime=as_utc(answer.ans_date_time),
            comments=[CommentOut.from_model(c) for c in answer.comments],
        )

class QuestionOut(BaseModel):
    """
    Question with tags, answers and comments embedded.
    Answers are listed oldest first.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    text: str
    tags: List[TagOut] = []
    answers: List[AnswerOut] = []
    askedBy: str
    askDateTime: dt.datetime
    views: List[str] = []
    upVotes: List[str] = []
    downVotes: List[str] = []
    comments: List[CommentOut] = []

    @classmethod
    async def load(cls, question) -> "QuestionOut":
        """Fetch the question's relations and build the response object."""
        await question.fetch_related("tags", "comments")
        answers = await question.answers.all().order_by("ans_date_time")
        return cls(
            _id=str(question.id),
            title=question.title,
            text=question.text,
            tags=[TagOut.from_model(t) for t in question.tags],
            answers=[await AnswerOut.load(a) for a in answers],
            askedBy=question.asked_by,
            askDateTime=as_utc(question.ask_date_time),
            views=list(question.views or []),
            upVotes=list(question.up_votes or []),
            downVotes=list(question.down_votes or []),
            comments=[CommentOut.from_model(c) for c in question.comments],
        )
