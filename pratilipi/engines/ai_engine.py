"""
AI-assisted decision engine.

Primary strategy: asks a hosted language model to judge business-concept
identity and validates its answer against a strict schema. Every failure is
raised as a typed error so the strategy selector can fall back; this engine
never guesses a verdict.
"""

import json
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from pydantic import ValidationError

from pratilipi.engines.deterministic import exclude_owner
from pratilipi.errors import AIBackendError, ConfigurationError
from pratilipi.models.idea import AIResponse, AnalyzeOptions, Idea, MostSimilarEntry, Verdict
from pratilipi.services.ai_service import AIService
from pratilipi.similarity.policy import SimilarityPolicy
from pratilipi.utils.constants import SIMILARITY_PROMPT_FILE
from pratilipi.utils.logger import logger

STRATEGY = "ai"
PROMPTS_DIR = Path(__file__).parent.parent / "prompts"

_decoder = json.JSONDecoder()


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Extract the first well-formed JSON object from free text.

    Models sometimes wrap their JSON in prose or markdown fences, so every
    opening brace is tried in order until one decodes.

    Raises:
        AIBackendError: If the text holds no JSON object
    """
    index = text.find("{")
    while index != -1:
        try:
            payload, _ = _decoder.raw_decode(text, index)
            return payload
        except json.JSONDecodeError:
            index = text.find("{", index + 1)
    raise AIBackendError("AI response did not contain a JSON object")


def parse_verdict(payload: Dict[str, Any]) -> Verdict:
    """Validate the model's JSON against the response schema and build a Verdict."""
    try:
        response = AIResponse.model_validate(payload)
    except ValidationError as e:
        raise AIBackendError(f"AI response failed schema validation: {e}") from e

    most_similar = None
    if response.mostSimilarCompany is not None:
        most_similar = MostSimilarEntry(
            name=response.mostSimilarCompany.name,
            reason=response.mostSimilarCompany.reason,
        )

    return Verdict(
        isSimilar=response.isSimilar,
        similarityScore=response.similarityScore,
        recommendation=response.recommendation,
        mostSimilarEntry=most_similar,
        feedback=response.feedback,
        suggestions=list(response.suggestions),
        strategy=STRATEGY,
    )


def _field(label: str, value: str) -> str:
    return f"{label}: {value.strip() or 'Not specified'}"


class AIAssistedEngine:
    """Delegates the duplicate decision to a hosted language model."""

    def __init__(
        self,
        ai_service: AIService,
        policy: Optional[SimilarityPolicy] = None,
        timeout_seconds: float = 30.0,
        prompt_path: Optional[Path] = None,
    ):
        """
        Initialize the AI-assisted engine.

        Args:
            ai_service: Backend that turns one prompt into one text response
            policy: Policy providing the corpus slice size
            timeout_seconds: Hard deadline for the backend call
            prompt_path: Grading instructions, defaults to the packaged prompt
        """
        self.ai_service = ai_service
        self.policy = policy or SimilarityPolicy()
        self.timeout_seconds = timeout_seconds
        prompt_path = prompt_path or PROMPTS_DIR / SIMILARITY_PROMPT_FILE
        with open(prompt_path, 'r') as prompt_file:
            self.instructions = prompt_file.read()

    def is_available(self) -> bool:
        return self.ai_service.has_usable_credential()

    def build_prompt(self, candidate: Idea, corpus: Sequence[Idea], options: Optional[AnalyzeOptions] = None) -> str:
        options = options or AnalyzeOptions()
        entries = list(corpus)[:self.policy.ai_max_corpus_entries]
        heading = "EXISTING INTERNAL APPLICATIONS" if options.internal_corpus_mode else "EXISTING VENTURES"

        candidate_block = "\n".join([
            _field("Title", candidate.title),
            _field("Description", candidate.description),
            _field("Problem Statement", candidate.problemStatement),
            _field("Proposed Solution", candidate.solution),
            _field("Target Market", candidate.targetMarket),
            _field("Business Model", candidate.businessModel),
            _field("Industry", candidate.industry),
            _field("Tech Stack", ", ".join(candidate.techStack)),
        ])

        entry_blocks = []
        for entry in entries:
            entry_blocks.append("\n".join([
                f"- Name: {entry.name}",
                f"  {_field('One-liner', entry.oneLiner)}",
                f"  {_field('Description', entry.description)}",
                f"  {_field('Industry', entry.industry)}",
                f"  {_field('Tags', ', '.join(entry.tags))}",
            ]))

        return (
            f"{self.instructions}\n"
            f"SUBMITTED IDEA:\n{candidate_block}\n\n"
            f"{heading} ({len(entries)}):\n" + "\n".join(entry_blocks) + "\n\n"
            f"Response (JSON):\n"
        )

    def analyze(self, candidate: Idea, corpus: Sequence[Idea], options: Optional[AnalyzeOptions] = None) -> Verdict:
        """
        Ask the model for a verdict.

        Raises:
            ConfigurationError: If the backend has no usable credential
            AIBackendError: On timeout, transport failure, or an invalid response
        """
        if not self.is_available():
            raise ConfigurationError("No usable AI credential configured")

        options = options or AnalyzeOptions()
        prompt = self.build_prompt(candidate, exclude_owner(corpus, options.exclude_owner_id), options)
        text = self._generate_with_deadline(prompt)
        verdict = parse_verdict(extract_json_object(text))
        logger.info(f"AI verdict for '{candidate.title}': {verdict.recommendation.value} ({verdict.similarityScore:.2f})")
        return verdict

    def _generate_with_deadline(self, prompt: str) -> str:
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pratilipi-ai")
        future = executor.submit(self.ai_service.generate, prompt)
        try:
            return future.result(timeout=self.timeout_seconds)
        except FuturesTimeoutError as e:
            future.cancel()
            raise AIBackendError(f"AI backend did not answer within {self.timeout_seconds:g}s") from e
        except (AIBackendError, ConfigurationError):
            raise
        except Exception as e:
            raise AIBackendError(f"AI backend call failed: {e}") from e
        finally:
            # Do not block on an abandoned call
            executor.shutdown(wait=False)
