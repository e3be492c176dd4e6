# app/models/potion.py
"""
Database model for potions.
The schema-flexible parts of a potion (ingredients, effects, categories) are
stored as JSON columns; shape is enforced by the pydantic schemas before write.
"""
import uuid
from tortoise import fields, models

class Potion(models.Model):
    """
    Potion catalog entry.

    - effects: {"strength": number, "flavor": number}
    - ingredients: list of arbitrary JSON values
    - vendor_id: reference to a vendor by identifier (vendor entity not modelled)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    name = fields.CharField(max_length=255)
    ingredients = fields.JSONField(default=list)
    effects = fields.JSONField()
    categories = fields.JSONField(default=list)
    price = fields.FloatField()
    score = fields.FloatField(default=0)
    vendor_id = fields.CharField(max_length=64, index=True)
    created_at = fields.DatetimeField(auto_now_add=True)  # Listing order only, not exposed

    class Meta:
        table = "potions"

    def to_dict(self) -> dict:
        """Public JSON shape of a potion."""
        return {
            "id": str(self.id),
            "name": self.name,
            "ingredients": self.ingredients,
            "effects": self.effects,
            "categories": self.categories,
            "price": self.price,
            "score": self.score,
            "vendorId": self.vendor_id,
        }
