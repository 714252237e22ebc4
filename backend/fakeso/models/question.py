# fakeso/models/question.py
"""
Database model for questions.
Represents a posted question together with the tags, answers and comments it
references. Views and votes are kept as lists of usernames on the row itself.
"""
import uuid
from tortoise import fields, models

class Question(models.Model):
    """
    Question database model.

    Relationships:
    - Has many Tags (many-to-many, a tag is shared between questions)
    - Has many Answers (many-to-many, ordered by the caller)
    - Has many Comments (many-to-many)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique question identifier
    title = fields.CharField(max_length=256)
    text = fields.TextField()
    asked_by = fields.CharField(max_length=256)  # Username of the author
    ask_date_time = fields.DatetimeField()

    views = fields.JSONField(default=list)       # Usernames that viewed the question
    up_votes = fields.JSONField(default=list)    # Usernames that up-voted
    down_votes = fields.JSONField(default=list)  # Usernames that down-voted

    tags: fields.ManyToManyRelation["Tag"] = fields.ManyToManyField(
        "models.Tag", related_name="questions", through="question_tags"
    )
    answers: fields.ManyToManyRelation["Answer"] = fields.ManyToManyField(
        "models.Answer", related_name="questions", through="question_answers"
    )
    comments: fields.ManyToManyRelation["Comment"] = fields.ManyToManyField(
        "models.Comment", related_name="questions", through="question_comments"
    )

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "questions"  # Database table name
