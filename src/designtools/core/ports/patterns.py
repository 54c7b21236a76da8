from typing import NamedTuple, Protocol

from designtools.models import ClassCategory


class ClassMatch(NamedTuple):
    category: ClassCategory
    property: str
    label: str
    value: str


class ClassPatternTable(Protocol):
    def match(self, core: str) -> ClassMatch | None: ...

    def format(self, property: str, value: str) -> str | None: ...
