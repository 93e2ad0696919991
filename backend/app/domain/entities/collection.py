"""Domain entities describing named collections and the mutations applied to them."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class CollectionSpec:
    """A named collection together with the value it holds before its first write.

    ``default_factory`` is called every time a default is needed so callers
    can never share (and accidentally mutate) one default instance.
    """

    name: str
    default_factory: Callable[[], Any]

    def default(self) -> Any:
        return self.default_factory()


@dataclass
class Mutation(Generic[R]):
    """Outcome of a transformation run inside ``CollectionStore.mutate``.

    ``value`` is the new collection value to persist and ``result`` is handed
    back to the caller. When ``changed`` is False nothing is written.
    """

    value: Any
    result: R
    changed: bool = True

    @classmethod
    def unchanged(cls, result: R) -> "Mutation[R]":
        return cls(value=None, result=result, changed=False)


# ── Collections served by the API ───────────────────────────────────

STUDENT_IDS = CollectionSpec("student-ids", lambda: {"validStudentIds": []})
CERTIFICATES = CollectionSpec("certificates", list)
INTERNSHIP_DOMAINS = CollectionSpec("internship-domains", list)
TASKS = CollectionSpec("tasks", list)
STUDENT_STATUS = CollectionSpec("student-status", list)
COMPLETED_INTERNSHIPS = CollectionSpec("completed-internships", list)
