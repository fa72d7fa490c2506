"""
Corpus suppliers.

The engine never queries storage; these helpers build the comparison set a
caller hands to ``analyze``.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml
from pydantic import ValidationError

from pratilipi.errors import ConfigurationError
from pratilipi.models.idea import Idea
from pratilipi.utils.constants import DRAFT_STATUS
from pratilipi.utils.logger import logger


def _matches_category(venture: Idea, category: str) -> bool:
    category = category.lower()
    return category in venture.industry.lower() or any(category in tag.lower() for tag in venture.tags)


def load_reference_ventures(
    path: Union[str, Path],
    category: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Idea]:
    """
    Load reference ventures from a YAML file.

    Args:
        path: YAML file with a top-level ``ventures`` list
        category: Keep ventures whose industry or any tag contains this text
        limit: Maximum number of ventures to return

    Returns:
        Ventures in file order

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Reference ventures file not found: {path}")

    try:
        with open(path, 'r') as file:
            data = yaml.safe_load(file) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Reference ventures file {path} is not valid YAML: {e}") from e

    ventures = []
    for raw in data.get('ventures', []):
        try:
            ventures.append(Idea.model_validate(raw))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid venture in {path}: {e}") from e

    if category:
        ventures = [venture for venture in ventures if _matches_category(venture, category)]
    if limit is not None:
        ventures = ventures[:limit]

    logger.info(f"Loaded {len(ventures)} reference ventures from {path}")
    return ventures


def select_internal_corpus(applications: Iterable[Union[Idea, Dict[str, Any]]], exclude_owner_id: Optional[str] = None) -> List[Idea]:
    """
    Keep active, submitted applications that do not belong to the requester.

    Args:
        applications: Stored applications as Ideas or dictionaries
        exclude_owner_id: The submitter whose own applications are skipped

    Returns:
        Applications to compare against, in input order
    """
    corpus = []
    for application in applications:
        if not isinstance(application, Idea):
            application = Idea.model_validate(application)
        if not application.isActive:
            continue
        if (application.status or "").upper() == DRAFT_STATUS:
            continue
        if exclude_owner_id is not None and application.ownerId == exclude_owner_id:
            continue
        corpus.append(application)
    return corpus
