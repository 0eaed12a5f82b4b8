"""FuzzService: one generation run from target string to records.

Wires BundleResolver, CandidateGenerator and DedupStreamPipeline together and,
when status checks are on, hands the pipeline batches to StatusChecker.
Candidates whose registrable domain is the target's own are never checked. Fatal errors come back as a failed
ServiceResult; per-candidate network failures only become statuses.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections import Counter
from collections.abc import Callable, Iterable, Iterator

from domfuzz.config.models import FuzzConfig
from domfuzz.domain.errors import DomfuzzError
from domfuzz.domain.models import Candidate, CheckResult, VariationRecord
from domfuzz.domain.names import parse_domain
from domfuzz.domain.types import DEFAULT_BUNDLE, BundleId, CheckStatus
from domfuzz.services.bundles import ALIASES, BundleResolver
from domfuzz.services.checker import CheckProgress, Resolver, StatusChecker
from domfuzz.services.generator import CandidateGenerator
from domfuzz.services.pipeline import DedupStreamPipeline
from domfuzz.services.resolvers import NetworkResolver
from domfuzz.services.result import ServiceError, ServiceResult
from domfuzz.services.telemetry import trace_span, traced
from domfuzz.transforms.registry import TransformationRegistry, build_registry

logger = logging.getLogger(__name__)

RecordSink = Callable[[VariationRecord], None]

_REGISTERED = frozenset({CheckStatus.REGISTERED, CheckStatus.PARKED})


class FuzzService:
    """Generates (and optionally checks) variations of one target domain."""

    def __init__(self, registry: TransformationRegistry | None = None) -> None:
        self.registry = registry or build_registry()

    @traced
    def generate(
        self,
        domain: str,
        config: FuzzConfig,
        *,
        on_record: RecordSink | None = None,
        resolver: Resolver | None = None,
        on_progress: Callable[[CheckProgress], None] | None = None,
    ) -> ServiceResult:
        """Run generation for *domain*.

        Records stream through *on_record* as they are accepted (after
        sorting, with ``sort="score"``) and are also collected in
        ``data["items"]``. *resolver* replaces the network resolver.
        """
        op = "generate"
        try:
            target = parse_domain(domain)
            enabled = BundleResolver(self.registry).resolve(config.transformations)
            generator = CandidateGenerator(
                self.registry,
                enabled,
                dictionary=config.dictionary,
                max_substitutions=config.max_substitutions,
                keyboard_layouts=config.keyboard_layouts,
            )
        except DomfuzzError as exc:
            logger.debug("Run rejected: %s", exc.message)
            return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))

        pipeline = DedupStreamPipeline(
            generator,
            max_variations=config.max_variations,
            batch_size=config.batch_size,
            min_score=config.min_score,
        )
        records: list[VariationRecord] = []
        streaming = config.sort == "generation"

        def emit(record: VariationRecord) -> None:
            records.append(record)
            if streaming and on_record is not None:
                on_record(record)

        statuses: Counter[str] = Counter()
        skipped = 0
        if config.check_status:
            own = target.registrable.key

            def checkable() -> Iterator[Candidate]:
                nonlocal skipped
                for batch in pipeline.batches(target):
                    for candidate in batch:
                        if candidate.domain.registrable.key == own:
                            skipped += 1
                            continue
                        yield candidate

            def on_result(result: CheckResult) -> None:
                statuses[result.status.value] += 1
                if self._keep(result, config):
                    emit(VariationRecord.from_check(result))

            with trace_span("check") as span:
                asyncio.run(self._check(checkable(), config, resolver, on_progress, on_result))
                if span:
                    span.annotate("checked", sum(statuses.values()))
                    span.annotate_counts({**pipeline.stats.to_dict(), "skipped": skipped, **statuses})
            if skipped:
                logger.debug("Skipped %d variations under %s", skipped, target.registrable.name)
        else:
            with trace_span("generation") as span:
                for batch in pipeline.batches(target):
                    for candidate in batch:
                        emit(VariationRecord.from_candidate(candidate))
                if span:
                    span.annotate_counts(pipeline.stats.to_dict())

        if not streaming:
            records.sort(key=lambda r: -r.score)
            if on_record is not None:
                for record in records:
                    on_record(record)

        warnings = []
        if pipeline.stats.capped:
            warnings.append(f"Output capped at {config.max_variations} variations")

        data = {
            "domain": target.name,
            "transformations": [spec.id.value for spec in generator.specs],
            "count": len(records),
            "items": [r.model_dump(exclude_none=True) for r in records],
            "capped": pipeline.stats.capped,
            "stats": pipeline.stats.to_dict(),
        }
        if config.check_status:
            data["statuses"] = dict(statuses)
            data["skipped"] = skipped
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def describe(self) -> ServiceResult:
        """List every registered transformation, bundle, and alias."""
        transformations = [
            {
                "id": spec.id.value,
                "category": spec.category.value,
                "bundles": sorted(b.value for b in spec.bundles),
                "summary": spec.summary,
                "requires_dictionary": spec.requires_dictionary,
            }
            for spec in self.registry
        ]
        bundles = {bundle.value: [tid.value for tid in self.registry.in_bundle(bundle)] for bundle in BundleId}
        return ServiceResult(
            ok=True,
            op="list",
            data={
                "transformations": transformations,
                "bundles": bundles,
                "aliases": {name: [tid.value for tid in ids] for name, ids in ALIASES.items()},
                "default_bundle": DEFAULT_BUNDLE.value,
            },
        )

    @staticmethod
    def _keep(result: CheckResult, config: FuzzConfig) -> bool:
        if not (config.only_registered or config.only_available):
            return True
        if config.only_registered and result.status in _REGISTERED:
            return True
        return config.only_available and result.status is CheckStatus.AVAILABLE

    async def _check(
        self,
        candidates: Iterable[Candidate],
        config: FuzzConfig,
        resolver: Resolver | None,
        on_progress: Callable[[CheckProgress], None] | None,
        on_result: Callable[[CheckResult], None],
    ) -> None:
        if resolver is not None:
            await self._drain(resolver, candidates, config, on_progress, on_result)
            return
        chk = config.checker
        async with NetworkResolver(
            use_rdap=chk.rdap,
            use_whois=chk.whois,
            use_dns=chk.dns,
            http_probe=chk.http_probe,
        ) as network:
            await self._drain(network, candidates, config, on_progress, on_result)

    @staticmethod
    async def _drain(
        resolver: Resolver,
        candidates: Iterable[Candidate],
        config: FuzzConfig,
        on_progress: Callable[[CheckProgress], None] | None,
        on_result: Callable[[CheckResult], None],
    ) -> None:
        checker = StatusChecker(
            resolver,
            concurrency_limit=config.concurrency_limit,
            per_check_timeout=config.per_check_timeout,
            preserve_order=config.preserve_order,
            on_progress=on_progress,
        )
        async with contextlib.aclosing(checker.check(candidates)) as results:
            async for result in results:
                on_result(result)
