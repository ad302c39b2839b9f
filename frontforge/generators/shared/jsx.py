"""Provider nesting for JSX entry modules."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ("JSXWrapper", "nest_jsx")


@dataclass(frozen=True)
class JSXWrapper:
    """A provider element placed around the rendered tree.

    Attributes:
        open_tag: Opening tag, including props.
        close_tag: Closing tag.
        siblings: Elements rendered after the wrapped child, inside this wrapper.
    """

    open_tag: str
    close_tag: str
    siblings: "tuple[str, ...]" = ()


def nest_jsx(element: str, wrappers: "Sequence[JSXWrapper]", *, indent: int = 0) -> str:
    """Wrap ``element`` in ``wrappers``; the first wrapper ends up outermost.

    Args:
        element: The innermost element, possibly spanning several lines.
        wrappers: Providers from outermost to innermost.
        indent: Spaces prefixed to every line of the result.

    Returns:
        The nested markup.
    """
    lines = element.splitlines()
    for wrapper in reversed(wrappers):
        lines = [
            wrapper.open_tag,
            *(f"  {line}" for line in lines),
            *(f"  {sibling}" for sibling in wrapper.siblings),
            wrapper.close_tag,
        ]
    pad = " " * indent
    return "\n".join(f"{pad}{line}" for line in lines)
