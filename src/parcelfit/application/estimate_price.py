"""Application service: Estimate Price use case."""

from __future__ import annotations

from parcelfit.application.dto import PriceDTO
from parcelfit.domain.exceptions import EntityNotFoundError
from parcelfit.domain.repository.box_catalog_repository import BoxCatalogRepository
from parcelfit.domain.service.price_estimator import PriceEstimator, service_name


class EstimatePriceHandler:

    def __init__(
        self,
        catalog: BoxCatalogRepository,
        estimator: PriceEstimator | None = None,
    ) -> None:
        self._catalog = catalog
        self._estimator = estimator or PriceEstimator()

    def handle(self, box_id: str, weight: float, express_post: bool = False) -> PriceDTO:
        """Price a catalog box for the given weight (kg)."""
        box = self._catalog.get_by_id(box_id)
        if box is None:
            raise EntityNotFoundError(f"Box '{box_id}' not found")

        price = self._estimator.get_shipping_price(box, weight, express_post)
        return PriceDTO(
            box_id=box.id,
            box_name=box.name,
            service=service_name(express_post),
            weight=weight,
            price=price,
        )
