from __future__ import annotations

import logging
from typing import cast

import jsonmend.core.services.metrics_service as metrics
from jsonmend.core.common.exceptions import (
    EmptyInputError,
    JsonRepairError,
    UnrepairableInputError,
)
from jsonmend.core.common.logging_utils import preview
from jsonmend.core.config.app_config import RepairConfig
from jsonmend.core.domain.repair_result import RepairResult, RepairStatus
from jsonmend.core.services.bracket_balancer import balance, wrap_top_level_sequence
from jsonmend.core.services.normalizer import normalize, trim
from jsonmend.core.services.syntax_rules import SYNTAX_RULES
from jsonmend.core.services.validation import finalize, is_valid

logger = logging.getLogger(__name__)


def _is_blank(text: str) -> bool:
    return not trim(text)


class RepairEngine:
    """
    Turns malformed, JSON-like text into strictly valid JSON text.

    The pipeline is fixed: fast-path check, normalization, syntax rules,
    bracket balancing, optional top-level sequence wrapping and a final strict
    parse. The engine holds no per-call state and may be shared between
    threads.
    """

    def __init__(self, config: RepairConfig | None = None) -> None:
        self._config = config or RepairConfig()

    @property
    def config(self) -> RepairConfig:
        return self._config

    def repair(self, text: str, *, strict: bool = True) -> RepairResult:
        """
        Repairs a JSON-like string.

        Args:
            text: The raw input text.
            strict: If True, raises on failure; otherwise failures are returned
                as a ``FAILED`` result.

        Returns:
            The repair result. ``result.text`` is valid JSON unless it failed.

        Raises:
            EmptyInputError: If ``strict`` and the input has no content.
            UnrepairableInputError: If ``strict`` and no correction made the
                input parseable.
        """
        try:
            result = self._run(text)
        except JsonRepairError as e:
            metrics.inc(
                metrics.REPAIR_FAILED_EMPTY
                if isinstance(e, EmptyInputError)
                else metrics.REPAIR_FAILED_UNREPAIRABLE
            )
            if strict:
                raise
            logger.warning("JSON repair failed: %s", e)
            return RepairResult(status=RepairStatus.FAILED, original=text, error=e)

        metrics.inc(
            metrics.REPAIR_UNCHANGED
            if result.status is RepairStatus.UNCHANGED
            else metrics.REPAIR_REPAIRED
        )
        return result

    def _run(self, text: str) -> RepairResult:
        if _is_blank(text):
            raise EmptyInputError(details={"length": len(text)})

        if is_valid(text):
            logger.debug("Input is already valid JSON")
            return RepairResult(
                status=RepairStatus.UNCHANGED, original=text, text=text
            )

        applied: list[str] = []
        buffer = self._track("normalize", text, normalize(text), applied)

        for name, rule in SYNTAX_RULES:
            rewritten = rule(buffer, literal_aware=self._config.rules_literal_aware)
            buffer = self._track(name, buffer, rewritten, applied)

        buffer = self._track(
            "balance",
            buffer,
            balance(buffer, literal_aware=self._config.balance_literal_aware),
            applied,
        )

        if self._config.wrap_top_level_sequence:
            buffer = self._track(
                "wrap_sequence", buffer, wrap_top_level_sequence(buffer), applied
            )

        try:
            repaired = finalize(buffer)
        except UnrepairableInputError as e:
            e.details["applied_rules"] = list(applied)
            logger.info(
                "Unable to repair input %r after %s: %s",
                preview(text),
                ", ".join(applied) or "no changes",
                e.detail,
            )
            raise

        status = RepairStatus.UNCHANGED if repaired == text else RepairStatus.REPAIRED
        logger.info("Repaired JSON input using %s", ", ".join(applied))
        return RepairResult(
            status=status,
            original=text,
            text=repaired,
            applied_rules=tuple(applied),
        )

    @staticmethod
    def _track(name: str, before: str, after: str, applied: list[str]) -> str:
        if after != before:
            applied.append(name)
            logger.debug("Stage %s changed the buffer: %r", name, preview(after))
        return after


def repair_json(text: str, config: RepairConfig | None = None) -> str:
    """Return ``text`` as strictly valid JSON, repairing it if needed.

    Raises:
        EmptyInputError: If the input has no content.
        UnrepairableInputError: If the input could not be made parseable.
    """
    return cast(str, RepairEngine(config).repair(text).text)
