"""Framework-specific guideline blocks for the code-style document.

A free-text framework name is classified into a :class:`FrameworkFamily`
first, and the family selects the guideline block.  Classification is an
explicit, ordered keyword lookup on the lower-cased value: react/next, then
vue, then angular, then flutter.  The first family whose keyword appears
anywhere in the value wins, so "Vue3", "NextJS 14" and "React + Vue" all
classify.  A value containing no keyword falls back to
``FrameworkFamily.GENERIC``, which has no block.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class FrameworkFamily(str, Enum):
    """Framework families that carry their own code-style guidance."""

    REACT = "react"
    VUE = "vue"
    ANGULAR = "angular"
    FLUTTER = "flutter"
    GENERIC = "generic"


class FrameworkGuideline(BaseModel):
    """A titled bullet list appended to the code-style document."""

    title: str = Field(..., description="Heading text, e.g. 'React/Next.js'")
    rules: list[str] = Field(default_factory=list)


GUIDELINES: dict[FrameworkFamily, FrameworkGuideline] = {
    FrameworkFamily.REACT: FrameworkGuideline(
        title="React/Next.js",
        rules=[
            "Use functional components with hooks instead of class components",
            "Implement proper state management patterns",
            "Follow the React component lifecycle best practices",
            "Structure components using the recommended patterns",
            "Implement proper error boundaries",
        ],
    ),
    FrameworkFamily.VUE: FrameworkGuideline(
        title="Vue.js",
        rules=[
            "Follow Vue's Single-File Component pattern",
            "Implement the recommended component communication patterns",
            "Use Vue's reactivity system effectively",
            "Structure Vuex modules properly",
            "Follow Vue's lifecycle hook best practices",
        ],
    ),
    FrameworkFamily.ANGULAR: FrameworkGuideline(
        title="Angular",
        rules=[
            "Follow Angular's style guide for components, services, and modules",
            "Implement proper dependency injection patterns",
            "Structure modules according to feature",
            "Use Angular's change detection efficiently",
            "Follow RxJS best practices for handling asynchronous operations",
        ],
    ),
    FrameworkFamily.FLUTTER: FrameworkGuideline(
        title="Flutter",
        rules=[
            "Follow Flutter's widget composition patterns",
            "Implement proper state management with providers or Riverpod",
            "Structure the widget tree for maximum reusability",
            "Follow performance best practices",
            "Implement proper navigation patterns",
        ],
    ),
}

# Checked in order; the first family with a matching substring wins.
_KEYWORDS: tuple[tuple[FrameworkFamily, tuple[str, ...]], ...] = (
    (FrameworkFamily.REACT, ("react", "next")),
    (FrameworkFamily.VUE, ("vue",)),
    (FrameworkFamily.ANGULAR, ("angular",)),
    (FrameworkFamily.FLUTTER, ("flutter",)),
)


def classify_framework(framework: str | None) -> FrameworkFamily:
    """Map a free-text framework name to its :class:`FrameworkFamily`.

    Examples::

        classify_framework("Next.js")       -> FrameworkFamily.REACT
        classify_framework("React Native")  -> FrameworkFamily.REACT
        classify_framework("Vue3")          -> FrameworkFamily.VUE
        classify_framework("NextJS 14")     -> FrameworkFamily.REACT
        classify_framework("Django")        -> FrameworkFamily.GENERIC
        classify_framework("React + Vue")   -> FrameworkFamily.REACT
    """
    if not framework:
        return FrameworkFamily.GENERIC

    value = framework.lower()
    for family, keywords in _KEYWORDS:
        if any(keyword in value for keyword in keywords):
            return family
    return FrameworkFamily.GENERIC


def guideline_for(framework: str | None) -> FrameworkGuideline | None:
    """Return the guideline block for *framework*, or ``None`` for generic."""
    return GUIDELINES.get(classify_framework(framework))
