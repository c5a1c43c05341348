"""Hypothesis strategies for cursor property-based testing.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - scan_text_shape: Source classification (empty|single_line|multi_line|crlf)
    - scan_balance_depth: Nesting depth of generated balanced groups
    - scan_cluster_kind: Multi-code-point cluster kinds in composed text
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

# Text in which every code point is its own grapheme cluster: ASCII
# without CR plus precomposed letters and CJK. String indices equal
# cursor positions.
plain_text = st.text(
    alphabet=st.one_of(
        st.characters(max_codepoint=0x7F, blacklist_characters=["\r"]),
        st.sampled_from("\u00e9\u00df\u00f1\u4e2d\u6587"),
    ),
    max_size=200,
)

# Grapheme clusters of more than one code point, keyed by kind.
COMPOSED_CLUSTERS: dict[str, list[str]] = {
    "combining": ["e\u0301", "n\u0303\u0323", "\u00a0\u0308"],
    "flag": ["\U0001f1eb\U0001f1f7", "\U0001f1ef\U0001f1f5"],
    "zwj": ["\U0001f468\u200d\U0001f469\u200d\U0001f467", "\U0001f3f3\ufe0f\u200d\U0001f308"],
    "modifier": ["\U0001f44b\U0001f3fd"],
    "hangul": ["\u1100\u1161\u11a8"],
    "crlf": ["\r\n"],
}

# Same-line whitespace and newline runs used to exercise the whitespace reads.
inline_whitespace = st.text(alphabet=" \t\u00a0\u3000", min_size=1, max_size=10)
line_breaks = st.sampled_from(["\n", "\r\n", "\r", "\x0b", "\x0c", "\x85", "\u2028", "\u2029"])

identifier_text = st.from_regex(r"[a-z][a-z0-9_]{0,15}", fullmatch=True)


@st.composite
def scan_sources(draw: st.DrawFn) -> str:
    """Source text mixing words, inline whitespace and every line-break kind."""
    pieces = draw(
        st.lists(
            st.one_of(identifier_text, inline_whitespace, line_breaks, st.sampled_from("()[]{}")),
            max_size=30,
        )
    )
    source = "".join(pieces)
    if not source:
        event("scan_text_shape=empty")
    elif "\r\n" in source:
        event("scan_text_shape=crlf")
    elif any(p in source for p in ("\n", "\r", "\x0b", "\x0c", "\x85", "\u2028", "\u2029")):
        event("scan_text_shape=multi_line")
    else:
        event("scan_text_shape=single_line")
    return source


@st.composite
def balanced_groups(draw: st.DrawFn, depth: int = 0) -> str:
    """A '(' ... ')' group whose inner parentheses are balanced."""
    inner = draw(
        st.lists(
            st.one_of(
                identifier_text,
                balanced_groups(depth=depth + 1) if depth < 4 else identifier_text,
            ),
            max_size=3,
        )
    )
    event(f"scan_balance_depth={depth}")
    return "(" + "".join(inner) + ")"


@st.composite
def composed_clusters(draw: st.DrawFn) -> list[str]:
    """Grapheme clusters mixing single letters with multi-code-point clusters.

    Adjacent entries never merge: every generated cluster ends on a
    boundary before any of the others.
    """
    kinds = sorted(COMPOSED_CLUSTERS)
    clusters = draw(
        st.lists(
            st.one_of(
                st.sampled_from("abc x()\n"),
                st.sampled_from(kinds).flatmap(
                    lambda kind: st.sampled_from(COMPOSED_CLUSTERS[kind])
                ),
            ),
            max_size=30,
        )
    )
    for kind in kinds:
        if any(cluster in COMPOSED_CLUSTERS[kind] for cluster in clusters):
            event(f"scan_cluster_kind={kind}")
    return clusters
