"""
Catalog matcher: fuzzy-match product requests against a store catalog.

Scoring uses rapidfuzz WRatio on normalized names (0-100). The single
best product at or above the cutoff wins; ties go to the product listed
first in the catalog.

Variant policy: the matched variant is ALWAYS the product's first variant.
Choosing by size/colour/price is a product decision that has not been made.
"""

from typing import Optional, Sequence

import structlog
from rapidfuzz import fuzz, process

from config import settings
from models.matching import MatchedVariant, MatchResult, ProductRequest
from models.shopify import CatalogProduct
from utils.text_utils import normalize_product_name

logger = structlog.get_logger(__name__)


class MatchingService:
    """
    Matches requests to catalog products.

    Stateless apart from the cutoff; safe to share between requests.
    """

    def __init__(self, score_cutoff: Optional[float] = None):
        self.score_cutoff = (
            settings.match_score_cutoff if score_cutoff is None else score_cutoff
        )

    def match(
        self,
        requests: Sequence[ProductRequest],
        catalog: Sequence[CatalogProduct]
    ) -> list[MatchResult]:
        """
        Match every request against the catalog.

        Each request is matched independently: a product matched by one
        line stays available to later lines.

        Args:
            requests: Parsed requests, in display order
            catalog: Products fetched for this call

        Returns:
            One MatchResult per request, same order
        """
        # Products without variants cannot produce a line item
        candidates = [p for p in catalog if p.variants]
        titles = [normalize_product_name(p.title) for p in candidates]

        if len(candidates) < len(catalog):
            logger.warning(
                "products_without_variants_skipped",
                skipped=len(catalog) - len(candidates)
            )

        results = [self._match_one(r, candidates, titles) for r in requests]

        matched = sum(1 for r in results if r.matched is not None)
        logger.info(
            "requests_matched",
            requests=len(results),
            matched=matched,
            unmatched=len(results) - matched,
            catalog_size=len(catalog),
            score_cutoff=self.score_cutoff
        )

        return results

    def _match_one(
        self,
        request: ProductRequest,
        candidates: list[CatalogProduct],
        titles: list[str]
    ) -> MatchResult:
        product = self.best_product(request.name, candidates, titles)
        if product is None:
            return MatchResult(requested=request, matched=None)

        variant = product.variants[0]
        return MatchResult(
            requested=request,
            matched=MatchedVariant(
                product_title=product.title,
                variant_id=variant.id,
                price=variant.price,
                quantity=request.quantity,
            ),
        )

    def best_product(
        self,
        name: str,
        candidates: list[CatalogProduct],
        titles: Optional[list[str]] = None
    ) -> Optional[CatalogProduct]:
        """
        Best-scoring product for one name, or None below the cutoff.

        Args:
            name: Requested product name
            candidates: Products to score
            titles: Pre-normalized titles aligned with candidates

        Returns:
            Winning CatalogProduct or None
        """
        query = normalize_product_name(name)
        if not query or not candidates:
            return None

        if titles is None:
            titles = [normalize_product_name(p.title) for p in candidates]

        best = process.extractOne(
            query,
            titles,
            scorer=fuzz.WRatio,
            processor=None,
            score_cutoff=self.score_cutoff,
        )
        if best is None:
            logger.debug("request_unmatched", name=name)
            return None

        _title, score, index = best
        logger.debug(
            "request_matched",
            name=name,
            product_title=candidates[index].title,
            score=round(score, 1)
        )
        return candidates[index]


def match_requests(
    requests: Sequence[ProductRequest],
    catalog: Sequence[CatalogProduct],
    score_cutoff: Optional[float] = None
) -> list[MatchResult]:
    """Functional entry point: MatchingService(score_cutoff).match(...)."""
    return MatchingService(score_cutoff).match(requests, catalog)


# Singleton instance for convenience
_matching_service: Optional[MatchingService] = None

def get_matching_service() -> MatchingService:
    """Get or create MatchingService instance."""
    global _matching_service
    if _matching_service is None:
        _matching_service = MatchingService()
    return _matching_service
