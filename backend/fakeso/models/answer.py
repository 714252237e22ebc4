# fakeso/models/answer.py
"""
Database model for answers.
An answer belongs to one or more questions (through Question.answers) and
carries its own list of comments.
"""
import uuid
from tortoise import fields, models

class Answer(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    text = fields.TextField()
    ans_by = fields.CharField(max_length=256)  # Username of the author
    ans_date_time = fields.DatetimeField()

    comments: fields.ManyToManyRelation["Comment"] = fields.ManyToManyField(
        "models.Comment", related_name="answers", through="answer_comments"
    )

    class Meta:
        table = "answers"
