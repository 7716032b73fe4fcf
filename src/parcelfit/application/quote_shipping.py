"""Application service: Quote Shipping use case.

Orchestrates the carrier limit check, the box selector and the price
estimator to turn a product's dimensions into priced parcel options.

Two outcomes mean "custom shipping required" rather than an error:
the product is over the carrier's hard limits, or no catalog box fits.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from parcelfit.application.dto import ProductSpec, QuoteDTO, ShippingOptionDTO
from parcelfit.domain.exceptions import EntityNotFoundError
from parcelfit.domain.model.packaging import Packaging, find_packaging
from parcelfit.domain.model.shipping_box import ShippingBox
from parcelfit.domain.model.value_objects import Money, ProductDimensions
from parcelfit.domain.repository.box_catalog_repository import BoxCatalogRepository
from parcelfit.domain.service.box_selector import BoxSelector
from parcelfit.domain.service.carrier_limits import AUSTRALIA_POST_LIMITS, CarrierLimits
from parcelfit.domain.service.price_estimator import PriceEstimator, service_name

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
GST_RATE = Decimal("0.10")

OVERSIZED_MESSAGE = (
    "This product exceeds Australia Post size limits ({reasons}). "
    "A custom shipping quote is required."
)
NO_BOX_MESSAGE = (
    "No standard satchel or box fits this product. "
    "A custom shipping quote is required."
)


class QuoteShippingHandler:

    def __init__(
        self,
        catalog: BoxCatalogRepository,
        estimator: PriceEstimator | None = None,
        limits: CarrierLimits = AUSTRALIA_POST_LIMITS,
    ) -> None:
        self._catalog = catalog
        self._estimator = estimator or PriceEstimator()
        self._limits = limits

    def handle(
        self,
        spec: ProductSpec,
        express_post: bool = False,
        allow_rotation: bool = False,
        packaging_code: str | None = None,
    ) -> QuoteDTO:
        """Quote shipping for a single product.

        Steps:
        1. Validate the dimensions (InvalidDimensionsError if not positive).
        2. Refuse oversized products up front.
        3. Select fitting boxes, smallest first.
        4. Price every candidate, add the packaging carton to box
           options, and charge GST on the subtotal.

        An unknown ``packaging_code`` raises EntityNotFoundError.
        """
        packaging = None
        if packaging_code is not None:
            packaging = find_packaging(packaging_code)
            if packaging is None:
                raise EntityNotFoundError(f"Packaging '{packaging_code}' not found")

        product = ProductDimensions(spec.length, spec.width, spec.height, spec.weight)
        service = service_name(express_post)

        reasons = self._limits.oversize_reasons(product)
        if reasons:
            logger.info("Product %s is oversized: %s", product, "; ".join(reasons))
            return QuoteDTO(
                service=service,
                custom_shipping_required=True,
                message=OVERSIZED_MESSAGE.format(reasons="; ".join(reasons)),
                packaging=packaging_code,
            )

        selector = BoxSelector(self._catalog, allow_rotation=allow_rotation)
        boxes = selector.find_suitable_boxes(product)
        if not boxes:
            logger.info("No catalog box fits %s", product)
            return QuoteDTO(
                service=service,
                custom_shipping_required=True,
                message=NO_BOX_MESSAGE,
                packaging=packaging_code,
            )

        options = [
            self._price_option(box, product.weight, express_post, packaging)
            for box in boxes
        ]
        logger.debug(
            "Quoted %d option(s) for %s, recommended %s",
            len(options), product, options[0].box_id,
        )
        return QuoteDTO(
            service=service,
            custom_shipping_required=False,
            options=options,
            packaging=packaging_code,
        )

    # --- Mapping --------------------------------------------------------------

    def _price_option(
        self,
        box: ShippingBox,
        weight: float,
        express_post: bool,
        packaging: Packaging | None,
    ) -> ShippingOptionDTO:
        postage = Money.of(self._estimator.get_shipping_price(box, weight, express_post))
        # satchels are prepaid packaging
        if packaging is None or box.is_satchel:
            box_price = Money.of(0)
        else:
            box_price = Money.of(packaging.price)
        subtotal = postage + box_price
        gst = subtotal.percentage(GST_RATE)
        return ShippingOptionDTO(
            box_id=box.id,
            box_name=box.name,
            box_type=box.type.value,
            dimensions=str(box.dimensions),
            postage=str(postage),
            box_price=str(box_price),
            subtotal=str(subtotal),
            gst=str(gst),
            total=str(subtotal + gst),
        )
