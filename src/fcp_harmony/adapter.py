"""FcpDomainAdapter implementation for harmony. Bridges fcp-core to the
progression model and the theory engine.

This adapter satisfies the ``FcpDomainAdapter[Progression, Event]``
protocol from fcp-core.
"""

from __future__ import annotations

import logging
import math

from fcp_core import EventLog, OpResult, ParsedOp as GenericParsedOp

from fcp_harmony.errors import FcpError
from fcp_harmony.lib.guitar_library import TUNINGS
from fcp_harmony.model.event_log import Event
from fcp_harmony.model.progression import DEFAULT_TEMPO, DEFAULT_TUNING, Progression
from fcp_harmony.parser.ops import ParseError, parse_op as domain_parse_op
from fcp_harmony.parser.pitch import parse_note_name
from fcp_harmony.server.formatter import format_result
from fcp_harmony.server.ops import HANDLERS
from fcp_harmony.server.queries import dispatch_query
from fcp_harmony.server.resolvers import OpContext
from fcp_harmony.server.sessions import replay_event, reverse_event
from fcp_harmony.theory.voice_leading import SMOOTH, VOICINGS

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


class HarmonyAdapter:
    """FcpDomainAdapter implementation for chord progressions.

    Satisfies the ``FcpDomainAdapter[Progression, Event]`` protocol
    required by ``create_fcp_server()``.
    """

    def __init__(self) -> None:
        self.export_guitar: bool = False
        self.voicing: str = SMOOTH

    # -- FcpDomainAdapter protocol methods --

    def create_empty(self, title: str, params: dict[str, str]) -> Progression:
        """Create a new empty Progression from session params.

        Unparseable values fall back to the defaults (C, 120 BPM, standard).
        """
        key_root = 0
        tempo = DEFAULT_TEMPO
        tuning = DEFAULT_TUNING

        if "key" in params:
            try:
                key_root = parse_note_name(params["key"])
            except ValueError:
                logger.debug("ignoring key param %r", params["key"])

        if "tempo" in params:
            try:
                tempo = float(params["tempo"])
            except ValueError:
                logger.debug("ignoring tempo param %r", params["tempo"])
            if not math.isfinite(tempo) or tempo <= 0:
                logger.debug("tempo %r out of range, using default", params["tempo"])
                tempo = DEFAULT_TEMPO

        if "tuning" in params:
            if params["tuning"].lower() in TUNINGS:
                tuning = params["tuning"].lower()
            else:
                logger.debug("ignoring tuning param %r", params["tuning"])

        self.export_guitar = params.get("guitar", "").lower() in _TRUE_VALUES

        voicing = params.get("voicing", SMOOTH).lower()
        if voicing in VOICINGS:
            self.voicing = voicing
        else:
            logger.debug("ignoring voicing param %r", params["voicing"])
            self.voicing = SMOOTH

        return Progression.create(title=title, key_root=key_root, tempo=tempo, tuning=tuning)

    def serialize(self, model: Progression, path: str) -> None:
        """Serialize the progression to a MIDI file."""
        from fcp_harmony.serialization.serialize import serialize
        serialize(model, path, guitar=self.export_guitar, voicing=self.voicing)

    def deserialize(self, path: str) -> Progression:
        """Deserialize a Progression from a MIDI file."""
        from fcp_harmony.serialization.deserialize import deserialize
        return deserialize(path)

    def rebuild_indices(self, model: Progression) -> None:
        """No derived indices; everything is recomputed from the chord list."""

    def get_digest(self, model: Progression) -> str:
        """Return a compact state fingerprint."""
        return model.get_digest()

    def dispatch_op(
        self,
        op: GenericParsedOp,
        model: Progression,
        log: EventLog,
    ) -> OpResult:
        """Execute a parsed operation on the progression.

        Re-parses the raw op string with the domain parser, then routes it
        to the handler registered for its verb.
        """
        domain_parsed = domain_parse_op(op.raw)
        if isinstance(domain_parsed, ParseError):
            return OpResult(success=False, message=f"Parse error: {domain_parsed.error}")

        handler = HANDLERS.get(domain_parsed.verb)
        if handler is None:
            result_str = format_result(False, f"Unknown verb: {domain_parsed.verb!r}", ", ".join(HANDLERS))
        else:
            ctx = OpContext(progression=model, event_log=log)
            try:
                result_str = handler(domain_parsed, ctx)
            except (FcpError, ValueError) as exc:
                logger.debug("op %r failed: %s", op.raw, exc)
                return OpResult(success=False, message=f"Error: {exc}")

        if result_str.startswith("!"):
            return OpResult(success=False, message=result_str.lstrip("! "))
        prefix = ""
        if len(result_str) > 1 and result_str[1] == " ":
            prefix = result_str[0]
        message = result_str[2:] if prefix else result_str
        return OpResult(success=True, message=message, prefix=prefix)

    def dispatch_query(self, query: str, model: Progression) -> str:
        """Execute a read-only query against the progression."""
        return dispatch_query(query, model)

    def reverse_event(self, event: Event, model: Progression) -> None:
        """Reverse a single event (for undo)."""
        reverse_event(event, model)

    def replay_event(self, event: Event, model: Progression) -> None:
        """Replay a single event (for redo)."""
        replay_event(event, model)
