"""Full op-string parser: tokenize, classify, and structure an op string.

Produces a :class:`ParsedOp` on success or a :class:`ParseError` on failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fcp_harmony.parser.tokenizer import is_key_value, parse_key_value, tokenize


@dataclass
class ParsedOp:
    """Successfully parsed operation."""

    verb: str
    raw: str  # original string
    target: str | None = None
    targets: list[str] | None = None
    params: dict[str, str] = field(default_factory=dict)


@dataclass
class ParseError:
    """Parsing failure."""

    error: str
    raw: str


# Verbs whose single positional arg is the target (symbol, index or value)
_VALUE_VERBS = {
    "chord",
    "remove",
    "tritone-sub",
    "key",
    "tempo",
    "tuning",
    "transpose",
    "bridge",
}

# Verbs whose positional args together name a progression
_NAME_VERBS = {"template", "library"}

# Verbs that take no positional args
_BARE_VERBS = {"negate"}


def parse_op(op_string: str) -> ParsedOp | ParseError:
    """Parse an op string into a structured :class:`ParsedOp`.

    Parameters
    ----------
    op_string : str
        The raw op string, e.g. ``'chord Dm7 beats:2 at:3'``.

    Returns
    -------
    ParsedOp | ParseError
    """
    raw = op_string.strip()
    if not raw:
        return ParseError(error="Empty op string", raw=raw)

    try:
        tokens = tokenize(raw)
    except ValueError as exc:
        return ParseError(error=f"Tokenization failed: {exc}", raw=raw)

    if not tokens:
        return ParseError(error="No tokens after tokenization", raw=raw)

    verb = tokens[0].lower()
    rest = tokens[1:]

    if verb == "title":
        # Everything after the verb is the title, colons included
        return ParsedOp(verb=verb, raw=raw, target=" ".join(rest) if rest else None)

    params: dict[str, str] = {}
    positional: list[str] = []
    for token in rest:
        if is_key_value(token):
            k, v = parse_key_value(token)
            params[k] = v
        else:
            positional.append(token)

    if verb == "replace":
        return _parse_replace_verb(verb, raw, positional, params)
    elif verb in _NAME_VERBS:
        return ParsedOp(verb=verb, raw=raw, target=" ".join(positional) or None, params=params)
    elif verb in _BARE_VERBS:
        if positional:
            return ParseError(error=f"{verb} takes no arguments", raw=raw)
        return ParsedOp(verb=verb, raw=raw, params=params)
    elif verb in _VALUE_VERBS:
        target = positional[0] if positional else None
        remaining = positional[1:]
        return ParsedOp(
            verb=verb,
            raw=raw,
            target=target,
            targets=remaining if remaining else None,
            params=params,
        )
    else:
        # Unknown verb, return a best-effort parse
        target = positional[0] if positional else None
        return ParsedOp(
            verb=verb,
            raw=raw,
            target=target,
            targets=positional if positional else None,
            params=params,
        )


def _parse_replace_verb(
    verb: str,
    raw: str,
    positional: list[str],
    params: dict[str, str],
) -> ParsedOp:
    """Parse ``replace INDEX SYMBOL``."""
    op = ParsedOp(verb=verb, raw=raw, params=params)
    if positional:
        op.target = positional[0]
    if len(positional) > 1:
        op.params.setdefault("chord", positional[1])
    if len(positional) > 2:
        op.targets = positional[2:]
    return op
