"""Plain-text rendering of helper cards and pagination for terminal output."""

from __future__ import annotations

from typing import List

from .models import Helper, PageResult, Skill

NO_RESULTS = "No Helpers Found\nTry adjusting your search criteria or using different keywords"

# Badge order on a card.
BADGES = [
    (Skill.HOUSEKEEPING, "Housekeep"),
    (Skill.COOKING, "Cooking"),
    (Skill.PET_CARE, "Pet Care"),
    (Skill.CHILD_CARE, "Child Care"),
    (Skill.INFANT_CARE, "Infant Care"),
    (Skill.ELDER_CARE, "Elder Care"),
]


def render_card(h: Helper) -> str:
    badges = " ".join(f"[{'x' if h.has_skill(skill) else ' '}] {label}" for skill, label in BADGES)
    lines = [
        f"{h.name} ({h.code})",
        f"  Nationality:       {h.nationality}",
        f"  Experience:        {h.experience}",
        f"  Age:               {h.age if h.age is not None else 'N/A'} years",
        f"  Height & Weight:   {h.height or 'N/A'} cm | {h.weight or 'N/A'} kg",
        f"  Rest day & Salary: {h.rest_day or 'N/A'} | {h.salary or 'N/A'}",
        f"  Religion:          {h.religion or 'N/A'}",
        f"  {badges}",
        f"  Comments: {h.comments}",
    ]
    return "\n".join(lines)


def render_pager(result: PageResult) -> str:
    buttons = " ".join(f"[{p}]" if p == result.page else str(p) for p in result.page_buttons)
    prev = "<" if result.has_prev else " "
    nxt = ">" if result.has_next else " "
    return f"{prev} {buttons} {nxt}  {result.page_info}".strip()


def render_page(result: PageResult) -> str:
    """Render a full result: summary, cards (or the empty message) and pager."""
    if result.error:
        return f"Error Loading Data\n{result.error}"
    parts: List[str] = [result.summary, ""]
    if result.records:
        parts.append("\n\n".join(render_card(h) for h in result.records))
    else:
        parts.append(NO_RESULTS)
    parts.extend(["", render_pager(result)])
    return "\n".join(parts)
