# fakeso/models/comment.py
import uuid
from tortoise import fields, models

class Comment(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    text = fields.TextField()
    comment_by = fields.CharField(max_length=256)  # Username of the commenter
    comment_date_time = fields.DatetimeField()

    class Meta:
        table = "comments"
