"""Repository location schemas for session repos."""

from __future__ import annotations

from pydantic import ConfigDict

from agentsession.schemas._base import WireModel

# Unicode White_Space. str.strip() would also drop the \x1c-\x1f separators.
WHITESPACE = "\t\n\v\f\r \x85\xa0" + "".join(
    map(chr, (0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000))
)


def trim_space(value: str) -> str:
    """Strip leading and trailing Unicode whitespace."""
    return value.strip(WHITESPACE)


class RepoLocation(WireModel):
    """A git repository location: the input source or the output target.

    ``branch=None`` means no branch was given; it is kept distinct from
    ``""`` so the stored form can omit the key.
    """

    model_config = ConfigDict(frozen=True)

    url: str = ""
    branch: str | None = None

    def normalized(self) -> tuple[str, str]:
        """Comparison key: trimmed URL and trimmed branch, unset as ``""``."""
        branch = trim_space(self.branch) if self.branch is not None else ""
        return trim_space(self.url), branch


class SimpleRepo(WireModel):
    """One entry of a session's ``repos``: clone ``input``, push to ``output``."""

    model_config = ConfigDict(frozen=True)

    input: RepoLocation | None = None
    output: RepoLocation | None = None
    auto_push: bool | None = None
