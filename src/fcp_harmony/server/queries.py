"""Query handlers: read-only analysis of the progression and its key."""

from __future__ import annotations

from fcp_harmony.errors import ValidationError
from fcp_harmony.lib.chord_library import ScaleType, note_name
from fcp_harmony.lib.progression_library import LIBRARY_CATEGORIES, PROGRESSION_LIBRARY, TEMPLATES
from fcp_harmony.model.progression import Progression
from fcp_harmony.parser.pitch import parse_note_name
from fcp_harmony.server.formatter import (
    format_chords,
    format_map,
    format_notes,
    mode_name,
)
from fcp_harmony.server.resolvers import resolve_chord, resolve_chord_or_index, resolve_key
from fcp_harmony.theory.altered_dominants import (
    get_altered_dominant_info,
    get_altered_variants,
    suggest_alterations,
    suggest_resolutions,
)
from fcp_harmony.theory.bridge_chords import (
    find_chromatic_bass_lines,
    suggest_bridge_chords,
    suggest_bridges_for_progression,
)
from fcp_harmony.theory.chord_scale import (
    compute_avoid_notes,
    get_scales_for_chord_in_context,
    get_tension_labels,
)
from fcp_harmony.theory.chords import Chord, chord_full_name, chord_name, chord_pitch_classes
from fcp_harmony.theory.coltrane import (
    analyze_coltrane_progression,
    expand_ii_v_coltrane,
    generate_coltrane_substitution,
    get_coltrane_triangle,
)
from fcp_harmony.theory.dominant_chains import build_dominant_chain, find_ii_v_is
from fcp_harmony.theory.guitar import get_guitar_shapes
from fcp_harmony.theory.harmony import get_diatonic_chords, get_next_moves
from fcp_harmony.theory.identify import identify_chord_from_pitch_classes
from fcp_harmony.theory.modal_interchange import get_all_borrowed_chords
from fcp_harmony.theory.modes import mode_pitch_classes
from fcp_harmony.theory.modulation import get_modulation_routes, key_distance
from fcp_harmony.theory.negative_harmony import compute_negative, compute_negative_progression
from fcp_harmony.theory.progressions import get_library_by_category, transpose_template
from fcp_harmony.theory.relationships import analyze_relationship, build_proximity_pyramid
from fcp_harmony.theory.scales import diatonic_7ths, find_scale_degree
from fcp_harmony.theory.secondary_dominants import get_secondary_dominants
from fcp_harmony.theory.symmetric import (
    get_augmented_reachability,
    get_diminished_7th_groups,
    get_tritone_sub_pairs,
    get_unique_augmented_triads,
)
from fcp_harmony.theory.upper_structures import format_ust, get_upper_structure_triads
from fcp_harmony.theory.voice_leading import analyze_voice_leading, smoothness_rating, voice_progression

QUERY_NAMES = (
    "map, diatonic, next, borrowed, secondary, modulate, distance, negative, "
    "scales, shapes, identify, ust, symmetric, relate, proximity, altered, iivi, chain, coltrane, "
    "bridges, voicing, templates, library"
)

DEFAULT_CHAIN_LENGTH = 4


def dispatch_query(q: str, prog: Progression) -> str:
    """Route a query string to the appropriate handler."""
    q = q.strip()
    parts = q.split(None, 1)
    command = parts[0].lower() if parts else ""
    args = parts[1].split() if len(parts) > 1 else []

    handler = _QUERIES.get(command)
    if handler is None:
        return f"! Unknown query: {command!r}\n  try: {QUERY_NAMES}"
    return handler(args, prog)


def _first(args: list[str]) -> str | None:
    return args[0] if args else None


# ---------------------------------------------------------------------------
# Key-level queries
# ---------------------------------------------------------------------------

def _query_map(args: list[str], prog: Progression) -> str:
    return format_map(prog)


def _query_diatonic(args: list[str], prog: Progression) -> str:
    key = resolve_key(_first(args), prog.key_root)
    if isinstance(key, str):
        return key
    lines = [f"Diatonic chords in {note_name(key)} major:"]
    sevenths = diatonic_7ths(key, ScaleType.MAJOR)
    for info, seventh in zip(get_diatonic_chords(key), sevenths):
        lines.append(
            f"  {info.roman:5s} {chord_name(info.chord):6s} {chord_name(seventh):8s} {info.function.value}"
        )
    return "\n".join(lines)


def _query_borrowed(args: list[str], prog: Progression) -> str:
    key = resolve_key(_first(args), prog.key_root)
    if isinstance(key, str):
        return key
    borrowed = get_all_borrowed_chords(key)
    lines = [f"Borrowed chords for {note_name(key)} major ({len(borrowed)}):"]
    for b in borrowed:
        lines.append(f"  {b.roman:6s} {chord_name(b.chord):6s} {b.tonal_function.value:12s} from {b.source_mode_name}")
    return "\n".join(lines)


def _query_secondary(args: list[str], prog: Progression) -> str:
    key = resolve_key(_first(args), prog.key_root)
    if isinstance(key, str):
        return key
    lines = [f"Secondary dominants in {note_name(key)} major:"]
    for sd in get_secondary_dominants(key):
        lines.append(f"  {sd.label:7s} {chord_name(sd.dom7):5s} -> {chord_name(sd.target)}")
    return "\n".join(lines)


def _query_modulate(args: list[str], prog: Progression) -> str:
    if not args:
        return "! Missing target key.\n  try: modulate G"
    target = resolve_key(args[0])
    if isinstance(target, str):
        return target
    src, dst = note_name(prog.key_root), note_name(target)
    routes = get_modulation_routes(prog.key_root, target)
    if not routes:
        return f"Already in {dst} major."
    lines = [f"Modulation {src} -> {dst} (distance {key_distance(prog.key_root, target)}, {len(routes)} routes):"]
    for r in routes:
        lines.append(f"  [{r.type.value}] {r.description}")
    return "\n".join(lines)


def _query_distance(args: list[str], prog: Progression) -> str:
    if not args:
        return "! Missing key.\n  try: distance F#"
    target = resolve_key(args[0])
    if isinstance(target, str):
        return target
    d = key_distance(prog.key_root, target)
    return f"{note_name(prog.key_root)} -> {note_name(target)}: {d} step(s) on the circle of fifths"


# ---------------------------------------------------------------------------
# Chord-level queries
# ---------------------------------------------------------------------------

def _query_next(args: list[str], prog: Progression) -> str:
    if args:
        c = resolve_chord_or_index(args[0], prog, "next")
        if isinstance(c, str):
            return c
    elif prog.chords:
        c = prog.chords[-1].chord
    else:
        c = get_diatonic_chords(prog.key_root)[0].chord
    lines = [f"Next from {chord_name(c)} in {prog.key_name} major:"]
    for m in get_next_moves(c, prog.key_root):
        lines.append(f"  {chord_name(m.chord):6s} {m.strength.value:8s} {m.reason}")
    return "\n".join(lines)


def _query_negative(args: list[str], prog: Progression) -> str:
    if args:
        c = resolve_chord_or_index(args[0], prog, "negative")
        if isinstance(c, str):
            return c
        n = compute_negative(c, prog.key_root)
        return (
            f"{chord_name(c)} -> {chord_name(n.chord)} "
            f"({format_notes(chord_pitch_classes(c))} -> {format_notes(n.pitch_classes)})"
        )
    if not prog.chords:
        return "! Progression is empty.\n  try: negative G7"
    chords = prog.chord_values()
    negated = [n.chord for n in compute_negative_progression(chords, prog.key_root)]
    return f"Negative harmony in {prog.key_name}:\n  {format_chords(chords)}\n  {format_chords(negated)}"


def _query_scales(args: list[str], prog: Progression) -> str:
    c = resolve_chord_or_index(_first(args), prog, "scales")
    if isinstance(c, str):
        return c
    degree = find_scale_degree(c.root, prog.key_root, ScaleType.MAJOR)
    mapping = get_scales_for_chord_in_context(c.quality, prog.key_root, -1 if degree is None else degree)
    primary = mapping.primary_scale

    tensions = get_tension_labels(c.root, primary)
    avoid = compute_avoid_notes(c.root, c.quality, primary)
    lines = [
        f"{chord_name(c)}: {note_name(c.root)} {mode_name(primary)}",
        f"  notes: {format_notes(mode_pitch_classes(c.root, primary))}",
        "  tensions: " + (", ".join(f"{note_name(pc)}={label}" for pc, label in tensions.items()) or "none"),
        f"  avoid: {format_notes(avoid) or 'none'}",
    ]
    if mapping.alternates:
        lines.append("  also: " + ", ".join(mode_name(m) for m in mapping.alternates))
    return "\n".join(lines)


def _query_shapes(args: list[str], prog: Progression) -> str:
    c = resolve_chord_or_index(_first(args), prog, "shapes")
    if isinstance(c, str):
        return c
    shapes = get_guitar_shapes(c.root, c.quality, prog.tuning_notes)
    if not shapes:
        return f"No playable {prog.tuning} shape for {chord_name(c)}."
    lines = [f"{chord_name(c)} ({prog.tuning}):"]
    for s in shapes:
        frets = " ".join("x" if f < 0 else str(f) for f in s.frets)
        base = f" base:{s.base_fret}" if s.base_fret else ""
        lines.append(f"  {frets:20s} {s.label}{base}")
    return "\n".join(lines)


def _query_identify(args: list[str], prog: Progression) -> str:
    if not args:
        return "! Missing notes.\n  try: identify C E G Bb"
    try:
        pcs = [parse_note_name(a) for a in args]
    except ValidationError as e:
        return f"! {e}"
    c = identify_chord_from_pitch_classes(pcs)
    return f"{chord_name(c)} ({chord_full_name(c)})"


def _query_ust(args: list[str], prog: Progression) -> str:
    if not args:
        return "! Missing dominant root.\n  try: ust G"
    root = resolve_key(args[0])
    if isinstance(root, str):
        return root
    lines = [f"Upper structures over {note_name(root)}7:"]
    for ust in get_upper_structure_triads(root):
        lines.append(
            f"  {ust.label:10s} {format_ust(ust, root):10s} {', '.join(ust.extensions):16s} tension:{ust.tension_level}"
        )
    return "\n".join(lines)


def _query_symmetric(args: list[str], prog: Progression) -> str:
    kind = (_first(args) or "").lower()
    if kind == "dim":
        lines = ["Diminished 7th groups:"]
        for i, group in enumerate(get_diminished_7th_groups()):
            lines.append(f"  {i}: {format_chords(group)}")
        return "\n".join(lines)
    if kind == "aug":
        lines = ["Augmented triads:"]
        for aug in get_unique_augmented_triads():
            reach = get_augmented_reachability(aug.root)
            targets = ", ".join(f"{chord_name(r.triad)} ({r.description})" for r in reach.reachable_triads)
            lines.append(f"  {chord_name(aug)}: {targets}")
        return "\n".join(lines)
    if kind == "tritone":
        lines = ["Tritone substitution pairs:"]
        for p in get_tritone_sub_pairs():
            lines.append(
                f"  {chord_name(p.dom7)} / {chord_name(p.tritone_sub_dom7)} "
                f"share {format_notes(p.shared_tritone)} -> {chord_name(p.common_resolution)}"
            )
        return "\n".join(lines)
    return "! Unknown symmetric structure.\n  try: symmetric dim, symmetric aug, symmetric tritone"


def _query_relate(args: list[str], prog: Progression) -> str:
    if len(args) < 2:
        return "! Need two chords.\n  try: relate C Am  or  relate 1 2"
    a = resolve_chord_or_index(args[0], prog, "relate")
    if isinstance(a, str):
        return a
    b = resolve_chord_or_index(args[1], prog, "relate")
    if isinstance(b, str):
        return b
    rel = analyze_relationship(a, b)
    lines = [
        f"{chord_name(a)} -> {chord_name(b)}:",
        f"  shared: {format_notes(rel.shared_notes) or 'none'} ({rel.shared_note_count})",
        f"  fifths apart: {rel.fifths_distance}",
        f"  voice leading: {rel.voice_leading_distance} semitone(s)",
    ]
    if rel.is_dominant:
        lines.append(f"  {chord_name(a)} is dominant of {chord_name(b)}")
    if rel.is_reverse_dominant:
        lines.append(f"  {chord_name(b)} is dominant of {chord_name(a)}")
    if rel.is_tritone_substitution:
        lines.append("  tritone substitution")
    if rel.neo_riemannian_transform is not None:
        lines.append(f"  neo-Riemannian: {rel.neo_riemannian_transform.value}")
    return "\n".join(lines)


def _query_proximity(args: list[str], prog: Progression) -> str:
    ref = resolve_chord_or_index(_first(args), prog, "proximity")
    if isinstance(ref, str):
        return ref
    lines = [f"Proximity to {chord_name(ref)}:"]
    for level in build_proximity_pyramid(ref):
        lines.append(f"  {level.shared_count} shared: {format_chords(level.chords)}")
    return "\n".join(lines)


def _query_altered(args: list[str], prog: Progression) -> str:
    c = resolve_chord(_first(args), "altered G7")
    if isinstance(c, str):
        return c
    info = get_altered_dominant_info(c.quality)
    if info is None:
        return f"! {chord_name(c)} is not a dominant chord.\n  try: altered G7"

    alterations = ", ".join(info.alterations) or "none"
    lines = [
        f"{chord_name(c)}: {alterations}, scale {info.associated_scale}, tension {info.tension_level}",
        "  resolutions:",
    ]
    resolutions = suggest_resolutions(c)
    for r in resolutions:
        lines.append(f"    {chord_name(r.chord):6s} {r.strength.value:8s} {r.label}")
    suggestions = suggest_alterations(c.root, resolutions[0].chord)
    if suggestions:
        lines.append(f"  toward {chord_name(resolutions[0].chord)}:")
        for s in suggestions:
            symbol = chord_name(Chord(c.root, s.quality))
            lines.append(f"    {symbol:8s} {s.half_step_resolutions} half-step resolution(s)")
    variants = ", ".join(chord_name(v) for v, _ in get_altered_variants(c.root))
    lines.append(f"  variants: {variants}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Progression-building queries
# ---------------------------------------------------------------------------

def _query_iivi(args: list[str], prog: Progression) -> str:
    key = resolve_key(_first(args), prog.key_root)
    if isinstance(key, str):
        return key
    lines = [f"ii-V-Is in {note_name(key)} major:"]
    for p in find_ii_v_is(key):
        lines.append(f"  {p.label:16s} {format_chords(p.chords)}")
    return "\n".join(lines)


def _query_chain(args: list[str], prog: Progression) -> str:
    if not args:
        return "! Missing start root.\n  try: chain E 4"
    root = resolve_key(args[0])
    if isinstance(root, str):
        return root
    length = DEFAULT_CHAIN_LENGTH
    if len(args) > 1:
        try:
            length = int(args[1])
        except ValueError:
            return f"! Invalid chain length: {args[1]!r}\n  try: chain E 4"
        if not 1 <= length <= 12:
            return f"! Chain length must be 1-12, got {length}"
    return f"Dominant chain from {note_name(root)}7: {format_chords(build_dominant_chain(root, length))}"


def _query_coltrane(args: list[str], prog: Progression) -> str:
    key = resolve_key(_first(args), prog.key_root)
    if isinstance(key, str):
        return key
    lines = [
        f"Coltrane centers from {note_name(key)}: {format_notes(get_coltrane_triangle(key))}",
        f"  cycle: {format_chords(generate_coltrane_substitution(key))}",
        f"  ii-V expansion: {format_chords(expand_ii_v_coltrane(key))}",
    ]
    if not args and prog.chords:
        analysis = analyze_coltrane_progression(prog.chord_values())
        if analysis.detected:
            lines.append(
                f"  progression: cycle through {format_notes(analysis.tonal_centers)} "
                f"(confidence {analysis.confidence:.2f})"
            )
        else:
            lines.append("  progression: no major-third cycle")
    return "\n".join(lines)


def _query_bridges(args: list[str], prog: Progression) -> str:
    if len(args) == 1:
        return "! Need two chords or none.\n  try: bridges C Am  or  bridges"
    if args:
        a = resolve_chord_or_index(args[0], prog, "bridges")
        if isinstance(a, str):
            return a
        b = resolve_chord_or_index(args[1], prog, "bridges")
        if isinstance(b, str):
            return b
        bridges = suggest_bridge_chords(a, b)
        if not bridges:
            return f"No bridge chords between {chord_name(a)} and {chord_name(b)}."
        lines = [f"Bridges {chord_name(a)} -> {chord_name(b)}:"]
        for br in bridges:
            chromatic = " [chromatic bass]" if br.creates_chromatic_bass else ""
            lines.append(f"  {br.type.value:14s} {br.reason}{chromatic}")
        return "\n".join(lines)

    if len(prog.chords) < 2:
        return "! Need at least two chords.\n  try: bridges C Am"
    chords = prog.chord_values()
    lines = ["Bridge suggestions:"]
    for s in suggest_bridges_for_progression(chords):
        before, after = chords[s.position], chords[s.position + 1]
        lines.append(
            f"  {s.position + 1}-{s.position + 2} {chord_name(before)} -> {chord_name(after)}: "
            f"{chord_name(s.bridge.chord)} ({s.bridge.type.value})"
        )
    for span in find_chromatic_bass_lines(chords):
        lines.append(f"  chromatic bass {span.direction.value} {span.start + 1}-{span.end + 1}")
    return "\n".join(lines)


def _query_voicing(args: list[str], prog: Progression) -> str:
    if not prog.chords:
        return "! Progression is empty.\n  try: template ii-V-I"
    chords = prog.chord_values()
    voicings = voice_progression(chords)
    quality = analyze_voice_leading(voicings)
    lines = [
        f"Voice leading: {quality.total_movement} semitones, "
        f"avg {quality.average_movement:.1f} ({smoothness_rating(quality.average_movement).value})"
    ]
    for i, (c, v) in enumerate(zip(chords, voicings)):
        moved = f"  moved {quality.transitions[i - 1].movement}" if i else ""
        lines.append(f"  {i + 1}. {chord_name(c):8s} {' '.join(str(n) for n in v)}{moved}")
    return "\n".join(lines)


def _query_templates(args: list[str], prog: Progression) -> str:
    key = resolve_key(_first(args), prog.key_root)
    if isinstance(key, str):
        return key
    lines = [f"Templates in {note_name(key)} major:"]
    for t in TEMPLATES:
        lines.append(f"  {t.short_name:14s} {format_chords(transpose_template(t, key)):28s} {t.description}")
    return "\n".join(lines)


def _query_library(args: list[str], prog: Progression) -> str:
    category = (_first(args) or "").lower()
    if category:
        if category not in {c.value for c in LIBRARY_CATEGORIES}:
            names = ", ".join(c.value for c in LIBRARY_CATEGORIES)
            return f"! Unknown category: {category!r}\n  try: library {names}"
        entries = get_library_by_category(category)
    else:
        entries = list(PROGRESSION_LIBRARY)
    lines = [f"Library ({len(entries)}):"]
    for e in entries:
        lines.append(
            f"  {e.name:20s} {e.category.value:9s} {note_name(e.key):3s} {format_chords(e.chords)}"
        )
    return "\n".join(lines)


_QUERIES = {
    "map": _query_map,
    "diatonic": _query_diatonic,
    "next": _query_next,
    "borrowed": _query_borrowed,
    "secondary": _query_secondary,
    "modulate": _query_modulate,
    "distance": _query_distance,
    "negative": _query_negative,
    "scales": _query_scales,
    "shapes": _query_shapes,
    "identify": _query_identify,
    "ust": _query_ust,
    "symmetric": _query_symmetric,
    "relate": _query_relate,
    "proximity": _query_proximity,
    "altered": _query_altered,
    "iivi": _query_iivi,
    "chain": _query_chain,
    "coltrane": _query_coltrane,
    "bridges": _query_bridges,
    "voicing": _query_voicing,
    "templates": _query_templates,
    "library": _query_library,
}
