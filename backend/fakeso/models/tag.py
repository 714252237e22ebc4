# fakeso/models/tag.py
import uuid
from tortoise import fields, models

class Tag(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    name = fields.CharField(max_length=64, unique=True, index=True)  # e.g. "react", "android"
    description = fields.TextField(default="")

    class Meta:
        table = "tags"
