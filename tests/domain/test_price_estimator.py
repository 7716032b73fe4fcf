"""Unit tests for the PriceEstimator domain service."""

import pytest

from parcelfit.domain.exceptions import InvalidDimensionsError
from parcelfit.domain.service.price_estimator import (
    BoxRate,
    PriceEstimator,
    service_name,
)
from parcelfit.infrastructure.persistence.static_box_catalog import (
    StaticBoxCatalogRepository,
)


def _box(box_id: str):
    return StaticBoxCatalogRepository().get_by_id(box_id)


class TestSatchelPricing:

    def test_parcel_post_is_flat(self):
        price = PriceEstimator().get_shipping_price(_box("satchel-small"), 2, express_post=False)
        assert price == pytest.approx(11.30)

    def test_express_post_is_flat(self):
        price = PriceEstimator().get_shipping_price(_box("satchel-small"), 2, express_post=True)
        assert price == pytest.approx(12.95)

    def test_weight_is_ignored(self):
        estimator = PriceEstimator()
        box = _box("satchel-extra-large")
        assert estimator.get_shipping_price(box, 0.1) == estimator.get_shipping_price(box, 4.9)

    def test_defaults_to_parcel_post(self):
        assert PriceEstimator().get_shipping_price(_box("satchel-large"), 1) == pytest.approx(19.35)


class TestBoxPricing:

    def test_base_rate_dominates_light_parcel_post(self):
        price = PriceEstimator().get_shipping_price(_box("box-medium"), 2.5, express_post=False)
        assert price == pytest.approx(8)

    def test_weight_dominates_heavy_express_post(self):
        price = PriceEstimator().get_shipping_price(_box("box-medium"), 5, express_post=True)
        assert price == pytest.approx(25)

    def test_heavy_parcel_post(self):
        price = PriceEstimator().get_shipping_price(_box("box-large"), 10)
        assert price == pytest.approx(30)

    def test_light_express_post(self):
        price = PriceEstimator().get_shipping_price(_box("box-small"), 1, express_post=True)
        assert price == pytest.approx(12)

    def test_same_price_for_every_box_size(self):
        estimator = PriceEstimator()
        prices = {
            estimator.get_shipping_price(_box(box_id), 7, express_post=True)
            for box_id in ("box-small", "box-medium", "box-large")
        }
        assert prices == {35}

    def test_custom_rate_table(self):
        estimator = PriceEstimator(parcel_post_rate=BoxRate(base_rate=10, per_kg_rate=2))
        assert estimator.get_shipping_price(_box("box-small"), 3) == pytest.approx(10)
        assert estimator.get_shipping_price(_box("box-small"), 6) == pytest.approx(12)

    def test_deterministic(self):
        estimator = PriceEstimator()
        box = _box("box-medium")
        results = {estimator.get_shipping_price(box, 3.3, True) for _ in range(5)}
        assert len(results) == 1


class TestInvalidWeight:

    @pytest.mark.parametrize("weight", [0, -1, -0.5])
    def test_non_positive_weight_rejected(self, weight):
        with pytest.raises(InvalidDimensionsError, match="must be positive"):
            PriceEstimator().get_shipping_price(_box("box-small"), weight)

    def test_non_positive_weight_rejected_for_satchel(self):
        with pytest.raises(InvalidDimensionsError):
            PriceEstimator().get_shipping_price(_box("satchel-small"), 0)

    @pytest.mark.parametrize("weight", [float("inf"), float("nan")])
    def test_non_finite_weight_rejected(self, weight):
        with pytest.raises(InvalidDimensionsError, match="weight must be finite"):
            PriceEstimator().get_shipping_price(_box("box-medium"), weight)


class TestServiceName:

    def test_names(self):
        assert service_name(False) == "Parcel Post"
        assert service_name(True) == "Express Post"
