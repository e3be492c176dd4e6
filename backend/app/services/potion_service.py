# app/services/potion_service.py
"""
CRUD and analytics over the potion store.

Store failures are not caught here: they surface as Tortoise exceptions and
are mapped to a generic 500 by the application's exception handlers.
"""
import logging
import uuid
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.functions import Avg, Sum

from app.core.errors import NotFoundError, ValidationError, issues_from_pydantic
from app.models.potion import Potion
from app.schemas.potion import PotionIn

logger = logging.getLogger("uvicorn.error")

POTION_NOT_FOUND = "Potion not found"


def validate_potion(data: dict[str, Any]) -> PotionIn:
    """Validate a full potion document, raising ValidationError with every issue."""
    try:
        return PotionIn.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(issues_from_pydantic(exc.errors())) from exc


def _columns(doc: PotionIn) -> dict[str, Any]:
    """Map a validated document onto model column names."""
    return {
        "name": doc.name,
        "ingredients": doc.ingredients,
        "effects": doc.effects.model_dump(),
        "categories": doc.categories,
        "price": doc.price,
        "score": doc.score,
        "vendor_id": doc.vendorId,
    }


def _parse_id(potion_id: str) -> uuid.UUID:
    # A malformed id cannot name an existing potion
    try:
        return uuid.UUID(str(potion_id))
    except ValueError:
        raise NotFoundError(POTION_NOT_FOUND) from None


class PotionService:
    def __init__(self, db: BaseDBAsyncClient):
        self.db = db

    def _all(self):
        return Potion.all().using_db(self.db)

    # ===== Queries =====
    async def list_names(self) -> list[str]:
        return await self._all().order_by("created_at").values_list("name", flat=True)

    async def list_by_vendor(self, vendor_id: str) -> list[dict]:
        rows = await Potion.filter(vendor_id=vendor_id).using_db(self.db).order_by("created_at")
        return [p.to_dict() for p in rows]

    async def list_all(self) -> list[dict]:
        rows = await self._all().order_by("created_at")
        return [p.to_dict() for p in rows]

    # ===== Writes =====
    async def create(self, fields: dict[str, Any]) -> dict:
        doc = validate_potion(fields)
        potion = await Potion.create(using_db=self.db, **_columns(doc))
        logger.info("[potions] created id=%s vendor=%s", potion.id, potion.vendor_id)
        return potion.to_dict()

    async def update(self, potion_id: str, fields: dict[str, Any]) -> dict:
        """
        Merge `fields` onto the stored potion, re-validate the whole document
        and persist it. `effects` is merged key by key; `id` is ignored.
        """
        pid = _parse_id(potion_id)
        potion = await Potion.filter(id=pid).using_db(self.db).first()
        if potion is None:
            raise NotFoundError(POTION_NOT_FOUND)

        current = potion.to_dict()
        current.pop("id")
        merged = {**current, **{k: v for k, v in fields.items() if k != "id"}}
        if isinstance(fields.get("effects"), dict) and isinstance(current["effects"], dict):
            merged["effects"] = {**current["effects"], **fields["effects"]}

        doc = validate_potion(merged)
        potion.update_from_dict(_columns(doc))
        await potion.save(using_db=self.db)
        return potion.to_dict()

    async def delete(self, potion_id: str) -> None:
        pid = _parse_id(potion_id)
        deleted = await Potion.filter(id=pid).using_db(self.db).delete()
        if not deleted:
            raise NotFoundError(POTION_NOT_FOUND)
        logger.info("[potions] deleted id=%s", pid)

    # ===== Analytics =====
    async def average_score(self) -> float:
        """Mean score of all potions; 0 for an empty catalog."""
        rows = await self._all().annotate(average=Avg("score")).values("average")
        if not rows or rows[0]["average"] is None:
            return 0
        return rows[0]["average"]

    async def total_price(self) -> float:
        """Sum of all prices; 0 for an empty catalog."""
        rows = await self._all().annotate(total=Sum("price")).values("total")
        if not rows or rows[0]["total"] is None:
            return 0
        return rows[0]["total"]

    async def total_count(self) -> int:
        return await self._all().count()

    async def distinct_categories(self) -> list[str]:
        seen: set[str] = set()
        for potion in await self._all():
            seen.update(potion.categories or [])
        return sorted(seen)

    async def average_score_by_vendor(self) -> list[dict]:
        rows = (
            await self._all()
            .annotate(average_score=Avg("score"))
            .group_by("vendor_id")
            .values("vendor_id", "average_score")
        )
        return sorted(
            ({"vendorId": r["vendor_id"], "averageScore": r["average_score"]} for r in rows),
            key=lambda r: r["vendorId"],
        )
