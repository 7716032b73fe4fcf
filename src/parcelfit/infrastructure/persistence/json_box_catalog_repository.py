"""JSON-file-backed implementation of BoxCatalogRepository.

The file holds a list of records::

    [{"id": "box-small", "name": "Small Box", "length": 20, "width": 15,
      "height": 10, "max_weight": 22, "parcel_post_price": 0,
      "express_post_price": 0, "type": "box"}]

The file is read once, at construction.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from parcelfit.domain.exceptions import CatalogError, ValidationError
from parcelfit.domain.model.shipping_box import BoxDimensions, BoxType, ShippingBox
from parcelfit.domain.repository.box_catalog_repository import BoxCatalogRepository

logger = logging.getLogger(__name__)


class JsonBoxCatalogRepository(BoxCatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._boxes = self._load()

    # --- BoxCatalogRepository interface ---------------------------------------

    def get_by_id(self, box_id: str) -> ShippingBox | None:
        for box in self._boxes:
            if box.id == box_id:
                return box
        return None

    def list_all(self) -> list[ShippingBox]:
        return list(self._boxes)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> ShippingBox:
        return ShippingBox(
            id=raw["id"],
            name=raw.get("name", raw["id"]),
            dimensions=BoxDimensions(
                float(raw["length"]), float(raw["width"]), float(raw["height"])
            ),
            max_weight=float(raw["max_weight"]),
            parcel_post_price=float(raw.get("parcel_post_price", 0)),
            express_post_price=float(raw.get("express_post_price", 0)),
            type=BoxType(raw["type"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> tuple[ShippingBox, ...]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise CatalogError(f"Box catalog not found: {self._file_path}") from exc
        except json.JSONDecodeError as exc:
            raise CatalogError(
                f"Box catalog {self._file_path} is not valid JSON: {exc}"
            ) from exc

        if not isinstance(records, list):
            raise CatalogError(
                f"Box catalog {self._file_path} must contain a list of boxes"
            )

        boxes: list[ShippingBox] = []
        seen: set[str] = set()
        for index, raw in enumerate(records):
            try:
                box = self._to_domain(raw)
            except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as exc:
                raise CatalogError(
                    f"Invalid box record #{index} in {self._file_path}: {exc}"
                ) from exc
            if box.id in seen:
                raise CatalogError(
                    f"Duplicate box id '{box.id}' in {self._file_path}"
                )
            seen.add(box.id)
            boxes.append(box)

        logger.debug("Loaded %d boxes from %s", len(boxes), self._file_path)
        return tuple(boxes)
