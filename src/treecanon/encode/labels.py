from __future__ import annotations

from typing import Any, Callable

# Present labels always start with a digit, so "_" cannot collide with one.
ABSENT_TOKEN = "_"


def typed_text(label: Any) -> str:
    """Default rendering for non-str labels: ``<module>.<qualname>:<repr>``."""
    cls = type(label)
    return f"{cls.__module__}.{cls.__qualname__}:{label!r}"


def label_token(label: Any, show: Callable[[Any], str] | None = None) -> str:
    """
    Self-delimiting rendering of a label.

    With a *show* callable every present label renders as ``<n>:<text>``
    with text = show(label), so two labels share a token iff show() maps
    them to the same text.

    Without one, str labels render as ``<n>:<label>`` and every other label
    as ``<n>#<typed_text(label)>``; the separator keeps ``1`` and ``"1"``
    apart, and the type name keeps ``1`` and ``True`` apart.

    <n> is the number of code points that follow the separator, so the
    token can contain "(", "|", ")", ":" or "#" without making any
    enclosing code ambiguous.  An absent label (None) renders as
    ABSENT_TOKEN.
    """
    if label is None:
        return ABSENT_TOKEN
    if show is not None:
        text = show(label)
        return f"{len(text)}:{text}"
    if type(label) is str:
        return f"{len(label)}:{label}"
    text = typed_text(label)
    return f"{len(text)}#{text}"
