"""
Semantic versions as a comparable value type

Version strings sort wrongly as text ("1.10.0" < "1.9.0") and wrongly as
naive tuples once pre-releases appear ("1.0.0-rc.1" must come before
"1.0.0"). Version implements SemVer 2.0 precedence and opts into semcmp via
delegate derivation - the same way any user aggregate would.

Fun fact: SemVer's rule that build metadata is ignored for precedence means
1.0.0+20130313144700 and 1.0.0+exp.sha.5114f85 are "equal" versions that
still compare unequal with ==.
"""

import re

from pydantic import BaseModel, Field

from semcmp.api import compare
from semcmp.kernel.errors import InvalidVersion
from semcmp.kernel.ordering import Ordering
from semcmp.kernel.terms import compare_terms

_NUMERIC = r"0|[1-9][0-9]*"
_PRE_IDENTIFIER = r"(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_SEMVER = re.compile(
    rf"^(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<pre>{_PRE_IDENTIFIER}(?:\.{_PRE_IDENTIFIER})*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


class Version(BaseModel):
    """
    A semantic version: MAJOR.MINOR.PATCH[-PRE][+BUILD]

    Attributes:
        major: Incompatible API changes
        minor: Backwards-compatible features
        patch: Backwards-compatible fixes
        pre: Pre-release identifiers (ints for numeric identifiers)
        build: Build metadata, ignored for ordering
    """

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    pre: tuple[int | str, ...] = ()
    build: str | None = None

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"major": 1, "minor": 4, "patch": 0, "pre": ["rc", 1], "build": None}
            ]
        },
    }

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse a version string

        Raises:
            InvalidVersion: If text is not a SemVer 2.0 version
        """
        match = _SEMVER.match(text.strip())
        if match is None:
            raise InvalidVersion(text)
        pre_text = match.group("pre")
        pre: tuple[int | str, ...] = ()
        if pre_text:
            pre = tuple(int(part) if part.isdigit() else part for part in pre_text.split("."))
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            pre=pre,
            build=match.group("build"),
        )

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            text += "-" + ".".join(str(part) for part in self.pre)
        if self.build:
            text += "+" + self.build
        return text

    def compare(self, other: "Version") -> Ordering:
        """SemVer precedence: core numbers, then pre-release; build ignored"""
        result = compare(
            (self.major, self.minor, self.patch),
            (other.major, other.minor, other.patch),
        )
        if result is not Ordering.EQ:
            return result
        return _compare_pre(self.pre, other.pre)


def _compare_pre(left: tuple[int | str, ...], right: tuple[int | str, ...]) -> Ordering:
    # A release has higher precedence than any of its pre-releases
    if not left or not right:
        return compare_terms(not left, not right)

    for left_part, right_part in zip(left, right):
        left_numeric = isinstance(left_part, int)
        if left_numeric is not isinstance(right_part, int):
            # Numeric identifiers sort before alphanumeric ones
            return Ordering.LT if left_numeric else Ordering.GT
        result = compare_terms(left_part, right_part)
        if result is not Ordering.EQ:
            return result
    return compare_terms(len(left), len(right))
