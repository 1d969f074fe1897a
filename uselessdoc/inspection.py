"""Docstring inspection that flags documentation restating names or types.

Responsibilities:
- Apply the similarity policy to each documented class and function.
- Report empty docstrings, missing entry descriptions and redundant text.

Check order per entity:
1. Empty docstring.
2. Prose without content, then prose too similar to the entity name, then to its type; either ends the check.
3. Each parameter entry: missing name, missing description, matches the
   parameter name, matches the owner name.
4. The return entry: missing description, matches the type, matches the owner name.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .analysis.policy import SimilarityPolicy
from .config import CheckConfig
from .io.docstrings import DocstringParser
from .io.source_scanner import SourceScanner
from .models.datatypes import (
    DocComment,
    DocumentedEntity,
    ParamTag,
    Problem,
    ReturnTag,
    Verdict,
)


class DocstringInspection:
    """Check documented entities against the configured similarity policy."""

    def __init__(
        self,
        config: CheckConfig | None = None,
        policy: SimilarityPolicy | None = None,
        parser: DocstringParser | None = None,
        scanner: SourceScanner | None = None,
    ) -> None:
        """Initialize with config-derived collaborators unless provided explicitly."""

        self.config = config or CheckConfig()
        self.policy = policy or self.config.build_policy()
        self.parser = parser or DocstringParser()
        self.scanner = scanner or SourceScanner()

    def check_source(self, source: str, path: Path) -> tuple[list[DocumentedEntity], list[Problem]]:
        """Scan source text and return the checked entities with their problems."""

        entities = [
            entity for entity in self.scanner.scan_source(source, path) if self.should_check(entity)
        ]
        return entities, self.check_entities(entities)

    def check_entities(self, entities: Iterable[DocumentedEntity]) -> list[Problem]:
        """Check entities in order and concatenate their problems."""

        problems: list[Problem] = []
        for entity in entities:
            problems.extend(self.check_entity(entity))
        return problems

    def should_check(self, entity: DocumentedEntity) -> bool:
        """Return whether an entity is in scope under the privacy setting."""

        if self.config.check_private:
            return True
        name = entity.name
        is_dunder = name.startswith("__") and name.endswith("__")
        return is_dunder or not name.startswith("_")

    def check_entity(self, entity: DocumentedEntity) -> list[Problem]:
        """Return every problem found in one entity's docstring."""

        comment = self.parser.parse(entity.docstring)
        if not comment.text_with_tags:
            return [Problem(entity=entity, verdict=Verdict.EMPTY_CONTENT, message="Empty docstring.")]

        body_problem = self._check_body(entity, comment)
        if body_problem is not None:
            return [body_problem]

        problems = [
            problem
            for tag in comment.params
            if (problem := self._check_param(entity, tag)) is not None
        ]
        if comment.returns is not None:
            return_problem = self._check_return(entity, comment.returns)
            if return_problem is not None:
                problems.append(return_problem)
        return problems

    def _check_body(self, entity: DocumentedEntity, comment: DocComment) -> Problem | None:
        """Compare docstring prose with the entity name and type."""

        if not comment.text_without_tags:
            return None
        if self.policy.is_empty(comment.text_without_tags):
            return Problem(
                entity=entity,
                verdict=Verdict.EMPTY_CONTENT,
                message="Docstring has no description.",
            )
        return self._first_too_similar(
            entity,
            comment.text_without_tags,
            [
                (entity.name, Verdict.TOO_SIMILAR_TO_NAME, "Docstring matches name."),
                (entity.type_name, Verdict.TOO_SIMILAR_TO_TYPE, "Docstring matches return type."),
            ],
            scope="docstring",
            tag=None,
        )

    def _check_param(self, entity: DocumentedEntity, tag: ParamTag) -> Problem | None:
        """Check one parameter entry."""

        if tag.name is None:
            return Problem(
                entity=entity,
                verdict=Verdict.EMPTY_CONTENT,
                message="Missing parameter name.",
                scope="param",
                tag=tag,
            )
        if self.policy.is_empty(tag.description):
            return Problem(
                entity=entity,
                verdict=Verdict.EMPTY_CONTENT,
                message=f"Missing parameter description for `{tag.name}`.",
                scope="param",
                tag=tag,
            )
        return self._first_too_similar(
            entity,
            tag.description,
            [
                (
                    tag.name,
                    Verdict.TOO_SIMILAR_TO_NAME,
                    "Parameter description matches parameter name.",
                ),
                (
                    entity.name,
                    Verdict.TOO_SIMILAR_TO_NAME,
                    f"Parameter description matches {entity.kind} name.",
                ),
            ],
            scope="param",
            tag=tag,
        )

    def _check_return(self, entity: DocumentedEntity, tag: ReturnTag) -> Problem | None:
        """Check the return entry."""

        if self.policy.is_empty(tag.description):
            return Problem(
                entity=entity,
                verdict=Verdict.EMPTY_CONTENT,
                message="Missing return description.",
                scope="return",
                tag=tag,
            )
        return self._first_too_similar(
            entity,
            tag.description,
            [
                (entity.type_name, Verdict.TOO_SIMILAR_TO_TYPE, "Return description matches return type."),
                (entity.name, Verdict.TOO_SIMILAR_TO_NAME, f"Return description matches {entity.kind} name."),
            ],
            scope="return",
            tag=tag,
        )

    def _first_too_similar(
        self,
        entity: DocumentedEntity,
        text: str,
        targets: list[tuple[str, Verdict, str]],
        *,
        scope: str,
        tag: ParamTag | ReturnTag | None,
    ) -> Problem | None:
        """Return a problem for the first target that `text` is too similar to."""

        for target, verdict, message in targets:
            similarity = self.policy.too_similar(text, target)
            if similarity is not None:
                return Problem(
                    entity=entity,
                    verdict=verdict,
                    message=f"{message} {similarity}",
                    scope=scope,
                    similarity=similarity,
                    tag=tag,
                )
        return None
