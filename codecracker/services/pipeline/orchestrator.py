"""
Cracking orchestrator - drives the cryptanalysis pipeline.

This module implements the three entry points:
1. crack: detect, run every candidate solver, fuse confidences, rank,
   deduplicate and recursively unwrap layered encodings
2. decrypt: run one named solver and rank by plaintext quality
3. encrypt: delegate to a solver that supports encryption
"""

import logging
from functools import lru_cache
from typing import Any, ClassVar

from codecracker.core.config import Settings, get_settings
from codecracker.core.exceptions import (
    EmptyInputError,
    EncryptionNotSupportedError,
    SolverNotFoundError,
)
from codecracker.models.schemas import (
    CipherType,
    CrackOptions,
    CrackResponse,
    CrackResult,
    DetectionCandidate,
    EncryptResult,
    SolverOptions,
)
from codecracker.services.detection.cipher_detector import CipherDetector
from codecracker.services.engines import create_default_registry
from codecracker.services.engines.base import Solver
from codecracker.services.engines.registry import SolverRegistry
from codecracker.services.pipeline.scorer import (
    PlaintextScorer,
    final_confidence,
    get_default_scorer,
)

logger = logging.getLogger(__name__)

EMPTY_INPUT_WARNING = "Empty ciphertext provided"
NO_DETECTION_WARNING = "No cipher type detected"


def rank(results: list[CrackResult]) -> list[CrackResult]:
    """Sort by confidence descending; equal confidences keep their order."""
    return sorted(results, key=lambda r: r.confidence, reverse=True)


def deduplicate(results: list[CrackResult]) -> list[CrackResult]:
    """Drop results whose trimmed plaintext was already seen; first one wins."""
    seen: set[str] = set()
    unique = []
    for result in results:
        key = result.plaintext.strip()
        if key in seen:
            continue
        seen.add(key)
        unique.append(result)
    return unique


class CrackOrchestrator:
    """
    Orchestrates detection and solving across all registered solvers.

    The orchestrator owns its registry, so independent orchestrators (for
    example in tests) never see each other's registrations. Defaults for
    result count, recursion depth and confidence floor come from settings.
    """

    # Recursive unwrapping of layered encodings
    RECURSION_TOP_N: ClassVar[int] = 3
    RECURSION_MAX_CONFIDENCE: ClassVar[float] = 0.8
    RECURSION_MIN_LENGTH: ClassVar[int] = 4
    RECURSION_MAX_RESULTS: ClassVar[int] = 3

    def __init__(
        self,
        registry: SolverRegistry | None = None,
        detector: CipherDetector | None = None,
        scorer: PlaintextScorer | None = None,
        settings: Settings | None = None,
    ):
        self.scorer = scorer or get_default_scorer()
        self.registry = registry if registry is not None else create_default_registry(self.scorer)
        self.detector = detector or CipherDetector()
        self.settings = settings or get_settings()

    def detect(self, ciphertext: str) -> list[DetectionCandidate]:
        """Candidate cipher types, most likely first."""
        return self.detector.detect(ciphertext)

    def crack(
        self,
        ciphertext: str,
        options: CrackOptions | None = None,
    ) -> CrackResponse:
        """
        Identify the cipher and recover plaintext without a known cipher type.

        Args:
            ciphertext: The text to crack
            options: Limits plus an optional key/IV passed to every solver

        Returns:
            CrackResponse with ranked results and advisory warnings

        Raises:
            TypeError: If ciphertext is not a string
        """
        if not isinstance(ciphertext, str):
            raise TypeError(f"ciphertext must be str, not {type(ciphertext).__name__}")

        options = options or CrackOptions()
        max_results = options.max_results or self.settings.default_max_results
        max_depth = (
            options.max_depth if options.max_depth is not None else self.settings.default_max_depth
        )
        min_confidence = (
            options.min_confidence
            if options.min_confidence is not None
            else self.settings.default_min_confidence
        )

        if not ciphertext.strip():
            return CrackResponse(results=[], warnings=[EMPTY_INPUT_WARNING])

        warnings = []
        threshold = self.settings.short_input_threshold
        if len(ciphertext) < threshold:
            warnings.append(f"Short input (< {threshold} chars) may produce unreliable results")

        candidates = self.detect(ciphertext)
        logger.debug("Detected %d candidate cipher types", len(candidates))
        if not candidates:
            warnings.append(NO_DETECTION_WARNING)
            return CrackResponse(results=[], warnings=warnings)

        solver_options = SolverOptions(key=options.key, iv=options.iv)
        all_results: list[CrackResult] = []
        for candidate in candidates:
            solver = self.registry.get_solver(candidate.cipher_type)
            if solver is None:
                continue
            all_results.extend(self._run_solver(solver, ciphertext, solver_options, candidate))

        ranked = [r for r in rank(all_results) if r.confidence >= min_confidence]
        results = deduplicate(ranked)[:max_results]

        if max_depth > 1:
            results = self._unwrap_layers(results, options, max_depth - 1)

        return CrackResponse(results=results[:max_results], warnings=warnings)

    def decrypt(
        self,
        ciphertext: str,
        cipher_type: CipherType | str,
        options: SolverOptions | None = None,
    ) -> list[CrackResult]:
        """
        Decrypt with a named cipher, ranking by plaintext quality alone.

        Blank plaintexts are dropped, as in crack().

        Raises:
            SolverNotFoundError: If no solver is registered for cipher_type
        """
        solver = self._require_solver(cipher_type)
        results = [r for r in solver.solve(ciphertext, options) if r.plaintext.strip()]
        for result in results:
            quality = self.scorer.score(result.plaintext)
            result.confidence = quality.total
            result.details = {**result.details, "quality_score": quality.model_dump()}
        return rank(results)

    def encrypt(
        self,
        plaintext: str,
        cipher_type: CipherType | str,
        options: SolverOptions | None = None,
    ) -> EncryptResult:
        """
        Encrypt with a named cipher.

        Raises:
            EmptyInputError: If plaintext is empty
            SolverNotFoundError: If no solver is registered for cipher_type
            EncryptionNotSupportedError: If the solver cannot encrypt
            InvalidKeyError: If the solver needs a key that is missing or malformed
        """
        if not plaintext:
            raise EmptyInputError("plaintext")

        solver = self._require_solver(cipher_type)
        if not solver.can_encrypt:
            raise EncryptionNotSupportedError(solver.cipher_type.value)

        return solver.encrypt(plaintext, options or SolverOptions())

    def register_solver(self, solver: Solver) -> Solver:
        return self.registry.register(solver)

    def get_encryptable_cipher_types(self) -> list[CipherType]:
        return self.registry.get_encryptable_cipher_types()

    def _require_solver(self, cipher_type: CipherType | str) -> Solver:
        name = getattr(cipher_type, "value", cipher_type)
        try:
            solver = self.registry.get_solver(CipherType(name))
        except ValueError:
            solver = None
        if solver is None:
            raise SolverNotFoundError(str(name))
        return solver

    def _run_solver(
        self,
        solver: Solver,
        ciphertext: str,
        options: SolverOptions,
        candidate: DetectionCandidate,
    ) -> list[CrackResult]:
        """Run one solver, fusing confidences; a failing solver contributes nothing."""
        try:
            results = solver.solve(ciphertext, options)
        except Exception:
            logger.warning("Solver %r failed", solver, exc_info=True)
            return []

        fused = []
        for result in results:
            if not result.plaintext.strip():
                continue
            quality = self.scorer.score(result.plaintext)
            result.confidence = final_confidence(candidate.confidence, quality.total)
            result.details = {**result.details, "quality_score": quality.model_dump()}
            fused.append(result)
        return fused

    def _unwrap_layers(
        self,
        results: list[CrackResult],
        options: CrackOptions,
        depth: int,
    ) -> list[CrackResult]:
        """
        Re-crack the top plaintexts to peel off further layers.

        An inner result is kept only when it beats its parent's confidence;
        it records every decoding stage, outermost first, in ``layers``.
        """
        enhanced = list(results)
        inner_options = options.model_copy(
            update={"max_depth": depth, "max_results": self.RECURSION_MAX_RESULTS},
        )

        for parent in results[:self.RECURSION_TOP_N]:
            if parent.confidence > self.RECURSION_MAX_CONFIDENCE:
                continue
            if len(parent.plaintext) < self.RECURSION_MIN_LENGTH:
                continue

            logger.debug("Re-cracking %s output at depth %d", parent.cipher_type.value, depth)
            inner_response = self.crack(parent.plaintext, inner_options)

            for inner in inner_response.results:
                if inner.confidence <= parent.confidence:
                    continue
                layers = [_layer(parent)] + inner.details.get("layers", [_layer(inner)])
                enhanced.append(inner.model_copy(update={
                    "details": {**inner.details, "layers": layers},
                }))

        return deduplicate(rank(enhanced))


def _layer(result: CrackResult) -> dict[str, Any]:
    return {"cipher_type": result.cipher_type.value, "key": result.key}


@lru_cache
def get_orchestrator() -> CrackOrchestrator:
    """Process-wide orchestrator holding the built-in solvers."""
    return CrackOrchestrator()
