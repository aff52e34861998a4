# -*- coding: utf-8 -*-
"""
Schema Adapter - bridges declarative schema libraries into step validation.

A schema delegate is any object with:
- field_names: the fields it knows about
- validate(record) -> list of issues (plain function or coroutine)

An issue is a ``SchemaIssue`` or a mapping with ``path`` and ``message``.
``PydanticSchemaAdapter`` implements the contract on top of a pydantic model.
"""

from dataclasses import dataclass
from typing import Any, Collection, Dict, Iterable, List, Mapping, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from services.exceptions import CollaboratorFailure
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SchemaIssue:
    """A single failure reported by a schema delegate."""
    path: str
    message: str


Issue = Union[SchemaIssue, Mapping[str, Any]]


class PydanticSchemaAdapter:
    """
    Validate plain records against a pydantic model.

    The model should declare every field optional: required-ness is decided
    per step, the model only contributes type, length and format rules.
    """

    def __init__(self, model: Type[BaseModel]):
        self.model = model

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(self.model.model_fields)

    def validate(self, record: Mapping[str, Any]) -> List[SchemaIssue]:
        """
        Validate a record.

        Returns:
            Empty list on success, otherwise one issue per failing location

        Raises:
            CollaboratorFailure: the model failed for a reason other than
                invalid input (broken validator, bad model definition)
        """
        try:
            self.model.model_validate(dict(record))
        except ValidationError as exc:
            return [self._to_issue(error) for error in exc.errors()]
        except Exception as exc:
            raise CollaboratorFailure(
                f"{self.model.__name__} validation failed unexpectedly: {exc}",
                original_error=exc,
                context=self.model.__name__
            ) from exc
        return []

    @staticmethod
    def _to_issue(error: Mapping[str, Any]) -> SchemaIssue:
        loc = error.get("loc") or ()
        path = str(loc[0]) if loc else ""
        message = error.get("msg", "")
        # Messages raised by custom validators come back prefixed ("Value error, ...")
        if error.get("type") == "value_error":
            original = (error.get("ctx") or {}).get("error")
            if original is not None:
                message = str(original)
        return SchemaIssue(path=path, message=message)


def normalize_issues(
    issues: Iterable[Issue],
    allowed_fields: Collection[str],
    general_key: str
) -> Dict[str, str]:
    """
    Fold delegate issues into a field -> message mapping.

    Issues for fields outside ``allowed_fields`` belong to other steps and
    are dropped. Issues without a path land under ``general_key``. The
    first message per field wins.
    """
    errors: Dict[str, str] = {}
    for issue in issues:
        if isinstance(issue, SchemaIssue):
            path, message = issue.path, issue.message
        else:
            path, message = issue.get("path") or "", issue.get("message") or ""

        if not path:
            path = general_key
        elif path not in allowed_fields:
            logger.debug(f"Ignoring schema issue for out-of-step field '{path}'")
            continue
        errors.setdefault(path, message)
    return errors
