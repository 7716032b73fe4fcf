"""Application service: List Packaging use case (query)."""

from __future__ import annotations

from parcelfit.application.dto import PackagingDTO
from parcelfit.domain.model.packaging import AUSTRALIA_POST_PACKAGING, Packaging
from parcelfit.domain.model.value_objects import Money


class ListPackagingHandler:

    def __init__(self, packaging: tuple[Packaging, ...] = AUSTRALIA_POST_PACKAGING) -> None:
        self._packaging = packaging

    def handle(self) -> list[PackagingDTO]:
        return [
            PackagingDTO(
                code=p.code,
                name=p.name,
                dimensions=str(p.dimensions),
                price=str(Money.of(p.price)),
            )
            for p in self._packaging
        ]
