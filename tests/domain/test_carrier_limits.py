"""Unit tests for Australia Post parcel limits."""

from parcelfit.domain.model.value_objects import ProductDimensions
from parcelfit.domain.service.carrier_limits import AUSTRALIA_POST_LIMITS, CarrierLimits


class TestOversize:

    def test_normal_parcel_not_oversized(self):
        product = ProductDimensions(length=8, width=8, height=25, weight=0.452)
        assert not AUSTRALIA_POST_LIMITS.is_oversized(product)
        assert AUSTRALIA_POST_LIMITS.oversize_reasons(product) == []

    def test_limits_are_inclusive(self):
        # girth 40 + 2*30 + 2*20 = 140
        product = ProductDimensions(length=40, width=30, height=20, weight=22)
        assert not AUSTRALIA_POST_LIMITS.is_oversized(product)

    def test_too_heavy(self):
        product = ProductDimensions(length=10, width=10, height=10, weight=22.5)
        reasons = AUSTRALIA_POST_LIMITS.oversize_reasons(product)
        assert reasons == ["weight 22.5kg exceeds 22kg"]

    def test_too_long(self):
        product = ProductDimensions(length=106, width=5, height=5, weight=1)
        reasons = AUSTRALIA_POST_LIMITS.oversize_reasons(product)
        assert "length 106cm exceeds 105cm" in reasons

    def test_girth_over_limit(self):
        # girth 50 + 2*30 + 2*20 = 150
        product = ProductDimensions(length=50, width=30, height=20, weight=2)
        assert AUSTRALIA_POST_LIMITS.oversize_reasons(product) == [
            "girth 150cm exceeds 140cm"
        ]

    def test_custom_limits(self):
        limits = CarrierLimits(max_weight=5, max_side=50, max_girth=100)
        product = ProductDimensions(length=20, width=10, height=10, weight=6)
        assert limits.is_oversized(product)
