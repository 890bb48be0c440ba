"""
Noise filtering for AI-generated analysis text.

Generated analyses carry recurring junk: orphaned all-caps project titles,
words broken apart by PDF extraction, meta-commentary about the analysis
itself. Each kind of junk is an ExclusionRule; a NoiseFilter applies an
ordered list of them, so rules can be added, removed or replaced without
touching the reconstruction pipeline.
"""

import re
import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 15

BULLET_LINE_PATTERN = re.compile(r"^[-•*]\s+")
SECTION_HEADER_PATTERN = re.compile(r"^(?:\d+\.\s*)?[A-Z][A-Z\s&\-']{3,}:$")
ALL_CAPS_LINE_PATTERN = re.compile(r"^[A-Z\s]{3,}$")


class ExclusionRule(ABC):
    """A single named step that removes unwanted content from text."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def apply(self, text: str) -> str:
        """Return `text` with this rule's matches removed."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class PatternRule(ExclusionRule):
    """Removes every regex match from the text."""

    def __init__(self, name: str, pattern: str, flags: int = re.MULTILINE, replacement: str = ""):
        super().__init__(name)
        self.pattern = re.compile(pattern, flags)
        self.replacement = replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


class LineRule(ExclusionRule):
    """Drops whole lines for which `should_drop` returns True."""

    def __init__(self, name: str, should_drop: Callable[[str], bool]):
        super().__init__(name)
        self.should_drop = should_drop

    def apply(self, text: str) -> str:
        kept = [line for line in text.split("\n") if not self.should_drop(line.strip())]
        return "\n".join(kept)


def _is_short_non_bullet(line: str) -> bool:
    # Blank lines separate paragraphs and are collapsed later
    if not line or len(line) >= MIN_LINE_LENGTH:
        return False
    return not (BULLET_LINE_PATTERN.match(line) or SECTION_HEADER_PATTERN.match(line))


def _is_caps_fragment(line: str) -> bool:
    return bool(line) and bool(ALL_CAPS_LINE_PATTERN.match(line))


def default_rules() -> List[ExclusionRule]:
    """Build the standard rule list, in application order."""
    return [
        # "DASHBOARD FOR SALES ANALYTICS" with no surrounding context
        PatternRule(
            "caps_title_fragment",
            r"^\"?[A-Z \t]{3,}(?:FOR|TO|OF|WITH|IN|USING|BY)[ \t]+[A-Z \t]{3,}\"?[ \t]*$",
        ),
        PatternRule(
            "caps_project_blurb",
            r"^\"?(?:[A-Z]{2,}[ \t]*){2,}(?:Develop(?:ed)?|Create[d]?|Buil[dt]|Design(?:ed)?)[ \t]+[a-z \t]{5,50}\"?[ \t]*$",
        ),
        # Extraction artifacts such as "m od el"
        PatternRule(
            "broken_spacing",
            r"\b[a-z](?: [a-z]{1,2}){2,}\b",
            flags=0,
        ),
        PatternRule(
            "bare_acronym",
            r"^[ \t]*(?:LLM\d*|API|SDK|ML|AI|NLP|SQL)[ \t]*[a-z \t]{0,10}$",
        ),
        PatternRule(
            "generic_project_prefix",
            r"^\"?(?:Developed?|Created?|Built|Designed?)[ \t]+(?:(?:a|an|the)[ \t]+)?[^.\n]{5,30}\"?[ \t]*$",
        ),
        PatternRule(
            "single_statement_commentary",
            r"^.*(?:This single|powerful statement|reveals a candidate).*$",
            flags=re.MULTILINE | re.IGNORECASE,
        ),
        PatternRule(
            "breakdown_commentary",
            r"^.*(?:Here's a structured breakdown|structured analysis).*$",
            flags=re.MULTILINE | re.IGNORECASE,
        ),
        PatternRule(
            "hands_on_commentary",
            r"^.*(?:demonstrates hands-on experience with).*$",
            flags=re.MULTILINE | re.IGNORECASE,
        ),
        PatternRule("orphan_quote", r"^\"[^\"\n]{5,50}\"[ \t]*$"),
        PatternRule("acronym_line", r"^[ \t]*(?:[A-Z]{2,}[ \t]*){2,}[a-z \t]{0,20}$"),
        LineRule("short_line", _is_short_non_bullet),
        LineRule("caps_line", _is_caps_fragment),
    ]


class NoiseFilter:
    """
    Applies an ordered list of exclusion rules to text.

    The rule list is a plain attribute; callers can pass their own list or
    adjust the default one with add_rule / remove_rule.
    """

    def __init__(self, rules: Optional[Iterable[ExclusionRule]] = None):
        self.rules: List[ExclusionRule] = list(rules) if rules is not None else default_rules()

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self.rules]

    def add_rule(self, rule: ExclusionRule, index: Optional[int] = None) -> None:
        if index is None:
            self.rules.append(rule)
        else:
            self.rules.insert(index, rule)

    def remove_rule(self, name: str) -> bool:
        """Remove the rule called `name`. Returns False if no such rule exists."""
        for i, rule in enumerate(self.rules):
            if rule.name == name:
                del self.rules[i]
                return True
        return False

    def filter(self, text: str) -> str:
        """
        Remove unwanted content from AI-generated text.

        Args:
            text: Raw AI-generated text

        Returns:
            Text with every rule applied and blank runs collapsed
        """
        if not text:
            return ""

        filtered = text
        for rule in self.rules:
            before = len(filtered)
            filtered = rule.apply(filtered)
            if len(filtered) != before:
                logger.debug(f"Rule {rule.name} removed {before - len(filtered)} characters")

        filtered = re.sub(r"^[ \t]+$", "", filtered, flags=re.MULTILINE)
        filtered = re.sub(r"\n{3,}", "\n\n", filtered)
        return filtered.strip()


def filter_unwanted_content(text: str) -> str:
    """Filter text with the default rule set."""
    return NoiseFilter().filter(text)
