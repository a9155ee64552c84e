"""Harmony FCP: File Context Protocol for tonal harmony.

Uses ``create_fcp_server()`` from fcp_core to wire up the MCP server
with the harmony domain adapter.
"""

from fcp_core import create_fcp_server

from fcp_harmony.adapter import HarmonyAdapter
from fcp_harmony.server.reference_card import (
    CHORD_SECTION,
    CONVENTIONS_SECTION,
    NOTE_SECTION,
    QUERY_SECTION,
    SESSION_SECTION,
)
from fcp_harmony.server.verb_registry import VERBS


def _section_body(section: str) -> str:
    """Drop the ``## Title`` line; the server supplies its own heading."""
    return section.split("\n", 1)[1].strip()


# Extra sections for the tool description (harmony-specific reference)
_EXTRA_SECTIONS: dict[str, str] = {
    "Note Names": _section_body(NOTE_SECTION),
    "Chord Symbols": _section_body(CHORD_SECTION),
    "Queries": _section_body(QUERY_SECTION),
    "Session Params": _section_body(SESSION_SECTION),
    "Response Prefixes": "+  change applied     !  error (with try: hint)",
    "Conventions": _section_body(CONVENTIONS_SECTION),
}

adapter = HarmonyAdapter()

mcp = create_fcp_server(
    domain="harmony",
    adapter=adapter,
    verbs=VERBS,
    extra_sections=_EXTRA_SECTIONS,
    name="harmony-fcp",
    instructions="Harmony File Context Protocol. Call harmony_help for the reference card.",
)


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
