# fakeso/models/message.py
from tortoise import fields, models

class Message(models.Model):
    # Auto-increment key doubles as insertion order for messages sharing a timestamp
    id = fields.IntField(pk=True)
    msg = fields.TextField()
    msg_from = fields.CharField(max_length=256)
    msg_date_time = fields.DatetimeField(index=True)

    class Meta:
        table = "messages"
