from tortoise import fields
from tortoise.models import Model


class RoomRecord(Model):
    """Serialized room stored in the database with an inactivity expiry."""

    code = fields.CharField(max_length=6, pk=True)
    payload = fields.TextField()
    # Epoch milliseconds after which the record is treated as gone.
    expires_at = fields.BigIntField(index=True)
    updated = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "rooms"
