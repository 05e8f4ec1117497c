"""Range grammar compiler.

Turns a range expression into primitive comparator sets:

- hyphen ranges ``A - B`` -> ``>=A <=B`` (partial bounds widened)
- caret ranges ``^1.2.3`` -> ``>=1.2.3 <2.0.0``
- tilde ranges ``~1.2.3`` -> ``>=1.2.3 <1.3.0``
- x-ranges ``1.2.x`` / ``1.2`` -> ``>=1.2.0 <1.3.0``; ``*`` -> any version
- explicit comparators ``>=1.2.3`` pass through unchanged

Each ``replace_*`` helper rewrites a string into the primitive comparator
syntax so the expansion can be inspected on its own.
"""

from __future__ import annotations

import logging
import re

from ..errors import InvalidRange
from ..models.comparator import Comparator
from ..models.options import Options, resolve
from . import grammar
from .grammar import is_any

logger = logging.getLogger(__name__)

NULL_COMPARATOR = "<0.0.0-0"


def _prerelease_suffix(prerelease: str | None) -> str:
    return f"-{prerelease}" if prerelease else ""


def replace_hyphen(segment: str, loose: bool = False) -> str:
    """Rewrite a whole-segment hyphen range; other input is returned as is."""
    pattern = grammar.HYPHEN_RANGE_LOOSE if loose else grammar.HYPHEN_RANGE
    m = pattern.match(segment)
    if not m:
        return segment

    (frm, f_major, f_minor, f_patch, _f_pre, _f_build,
     to, t_major, t_minor, t_patch, t_pre, _t_build) = m.groups()

    if is_any(f_major):
        lower = ""
    elif is_any(f_minor):
        lower = f">={f_major}.0.0"
    elif is_any(f_patch):
        lower = f">={f_major}.{f_minor}.0"
    else:
        lower = f">={frm.strip()}"

    # Partial upper bounds become exclusive bounds on the next component.
    if is_any(t_major):
        upper = ""
    elif is_any(t_minor):
        upper = f"<{int(t_major) + 1}.0.0"
    elif is_any(t_patch):
        upper = f"<{t_major}.{int(t_minor) + 1}.0"
    elif t_pre:
        upper = f"<={t_major}.{t_minor}.{t_patch}-{t_pre}"
    else:
        upper = f"<={to.strip()}"

    return f"{lower} {upper}".strip()


def _caret(m: re.Match[str]) -> str:
    major, minor, patch, pre = m.group(1), m.group(2), m.group(3), m.group(4)
    if is_any(major):
        return ""
    if is_any(minor):
        return f">={major}.0.0 <{int(major) + 1}.0.0"
    if is_any(patch):
        if major == "0":
            return f">={major}.{minor}.0 <{major}.{int(minor) + 1}.0"
        return f">={major}.{minor}.0 <{int(major) + 1}.0.0"

    lower = f">={major}.{minor}.{patch}{_prerelease_suffix(pre)}"
    if major == "0":
        if minor == "0":
            return f"{lower} <{major}.{minor}.{int(patch) + 1}"
        return f"{lower} <{major}.{int(minor) + 1}.0"
    return f"{lower} <{int(major) + 1}.0.0"


def replace_carets(comp: str, loose: bool = False) -> str:
    """``^1.2.3`` -> ``>=1.2.3 <2.0.0``: the left-most non-zero part is fixed."""
    comp = comp.strip()
    if comp == "^":
        return "*"
    pattern = grammar.CARET_LOOSE if loose else grammar.CARET
    return pattern.sub(_caret, comp)


def _tilde(m: re.Match[str]) -> str:
    major, minor, patch, pre = m.group(1), m.group(2), m.group(3), m.group(4)
    if is_any(major):
        return ""
    if is_any(minor):
        return f">={major}.0.0 <{int(major) + 1}.0.0"
    if is_any(patch):
        return f">={major}.{minor}.0 <{major}.{int(minor) + 1}.0"
    return f">={major}.{minor}.{patch}{_prerelease_suffix(pre)} <{major}.{int(minor) + 1}.0"


def replace_tildes(comp: str, loose: bool = False) -> str:
    """``~1.2.3`` -> ``>=1.2.3 <1.3.0``; ``~1`` -> ``>=1.0.0 <2.0.0``."""
    comp = comp.strip()
    if comp == "~":
        return "*"
    pattern = grammar.TILDE_LOOSE if loose else grammar.TILDE
    return pattern.sub(_tilde, comp)


def _xrange(m: re.Match[str]) -> str:
    gtlt, major, minor, patch = m.group(1), m.group(2), m.group(3), m.group(4)
    any_major = is_any(major)
    any_minor = any_major or is_any(minor)
    any_patch = any_minor or is_any(patch)

    if gtlt == "=" and any_patch:
        gtlt = ""

    if any_major:
        if gtlt in (">", "<"):
            # Nothing is allowed.
            return NULL_COMPARATOR
        return "*"

    if gtlt and any_patch:
        new_major, new_minor = int(major), 0 if any_minor else int(minor)
        if gtlt == ">":
            # >1 => >=2.0.0, >1.2 => >=1.3.0
            gtlt = ">="
            if any_minor:
                new_major += 1
            else:
                new_minor += 1
        elif gtlt == "<=":
            # <=0.7.x is actually <0.8.0
            gtlt = "<"
            if any_minor:
                new_major += 1
            else:
                new_minor += 1
        return f"{gtlt}{new_major}.{new_minor}.0"

    if any_minor:
        return f">={major}.0.0 <{int(major) + 1}.0.0"
    if any_patch:
        return f">={major}.{minor}.0 <{major}.{int(minor) + 1}.0"
    return m.group(0)


def replace_xranges(comp: str, loose: bool = False) -> str:
    """Widen wildcard or omitted trailing components to their full span."""
    pattern = grammar.XRANGE_LOOSE if loose else grammar.XRANGE
    return " ".join(pattern.sub(_xrange, part) for part in comp.split())


def replace_stars(comp: str) -> str:
    """Drop the remaining ``*`` forms; an empty comparator means any version."""
    return grammar.STAR.sub("", comp.strip())


def expand_token(token: str, loose: bool = False) -> str:
    """Expand one whitespace-free token into primitive comparators."""
    comp = replace_carets(token, loose)
    comp = " ".join(replace_tildes(part, loose) for part in comp.split()) if comp else comp
    comp = replace_xranges(comp, loose)
    return replace_stars(comp)


def desugar(segment: str, loose: bool = False) -> list[str]:
    """Rewrite one ``||`` segment into primitive comparator strings."""
    segment = replace_hyphen(segment.strip(), loose)
    segment = grammar.COMPARATOR_TRIM.sub(r"\1\2\3", segment)
    segment = grammar.TILDE_TRIM.sub(r"\1~", segment)
    segment = grammar.CARET_TRIM.sub(r"\1^", segment)

    expanded = " ".join(expand_token(token, loose) for token in segment.split(" "))
    comps = [grammar.GTE0.sub("", comp.strip()) for comp in grammar.SPACES.split(expanded)]
    if loose:
        comps = [comp for comp in comps if grammar.COMPARATOR_LOOSE.match(comp)]
    return comps


def compile_segment(segment: str, options: Options | None = None) -> list[Comparator]:
    """Parse one ``||`` segment into its AND-ed comparators."""
    opts = resolve(options)
    by_value: dict[str, Comparator] = {}
    for text in desugar(segment, opts.loose):
        comp = Comparator.parse(text, opts)
        if str(comp) == NULL_COMPARATOR:
            return [comp]
        by_value.setdefault(str(comp), comp)

    if len(by_value) > 1 and "" in by_value:
        del by_value[""]
    return list(by_value.values())


def compile_range(text: str, options: Options | None = None) -> list[list[Comparator]]:
    """Parse a full range expression into OR-ed comparator sets.

    Raises:
        InvalidRange: if a token is not a comparator or no set survives.
    """
    if not isinstance(text, str):
        raise InvalidRange(str(text), "range must be a string")

    opts = resolve(options)
    raw = " ".join(text.split())
    sets = [c for c in (compile_segment(s, opts) for s in raw.split("||")) if c]
    if not sets:
        raise InvalidRange(text, "no comparators")

    if len(sets) > 1:
        first = sets[0]
        sets = [c for c in sets if str(c[0]) != NULL_COMPARATOR] or [first]
        if len(sets) > 1:
            for c in sets:
                if len(c) == 1 and c[0].is_any:
                    sets = [c]
                    break

    logger.debug(
        "Compiled range %r -> %r",
        text,
        "||".join(" ".join(str(c) for c in s) for s in sets),
    )
    return sets
