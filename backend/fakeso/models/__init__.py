# fakeso/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports throughout the application.

Models exported:
- User: User account and credentials
- Message: Chat message shown in the global messaging view
- Question: Posted question with its tags, answers, comments, views and votes
- Answer: Answer to a question (may carry comments)
- Comment: Comment on a question or an answer
- Tag: Topic tag attached to questions
"""
from .user import User
from .message import Message
from .tag import Tag
from .comment import Comment
from .answer import Answer
from .question import Question
