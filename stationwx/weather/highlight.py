"""Line-by-line minima highlighting of multi-line report text."""

from typing import Optional

from stationwx.weather.models import Minima, HighlightedLine, HighlightResult
from stationwx.weather.parser import ReportLineParser
from stationwx.weather.minima import meets_minima


class TextHighlighter:
    """
    Mark report lines that fall below minima.

    Each line becomes a <div> fragment; lines below minima get the violation
    class. Report text is inserted as-is: the rendering layer receives the
    raw report characters.

    Example:
        result = TextHighlighter.highlight(metar_and_taf, Minima(500, 1))
        if result.has_violations:
            ...
    """

    LINE_TEMPLATE = '<div>{}</div>'
    VIOLATION_TEMPLATE = '<div class="text-red-400 font-bold">{}</div>'

    LINE_SUFFIX = '</div>'

    # Report lines never contain a newline, so it separates fragments
    FRAGMENT_SEPARATOR = '\n'

    @classmethod
    def highlight(cls, raw_text: Optional[str], minima: Minima) -> HighlightResult:
        """
        Highlight every line of a report against minima.

        A line is a violation only when it reports a ceiling or a visibility
        and fails minima, so remark lines without weather groups are never
        flagged.

        Args:
            raw_text: Multi-line report text
            minima: Minima to compare against

        Returns:
            HighlightResult; empty for blank input
        """
        if not raw_text or not raw_text.strip():
            return HighlightResult()

        lines = []
        for text in raw_text.split('\n'):
            conditions = ReportLineParser.parse_line(text)
            violation = (
                bool(text.strip())
                and conditions.has_data
                and not meets_minima(conditions, minima)
            )
            lines.append(HighlightedLine(text=text, conditions=conditions, violation=violation))

        html = cls.FRAGMENT_SEPARATOR.join(
            (cls.VIOLATION_TEMPLATE if line.violation else cls.LINE_TEMPLATE).format(line.text)
            for line in lines
        )
        return HighlightResult(
            html=html,
            has_violations=any(line.violation for line in lines),
            lines=lines,
        )

    @classmethod
    def strip_markup(cls, html: str) -> str:
        """
        Recover the report text from highlighted HTML.

        Each fragment loses its opening tag and trailing </div>; anything in
        between, markup included, is report text. Lines are rejoined with
        newlines, so highlighting the result again gives the same violations.
        """
        if not html:
            return ''
        prefixes = (
            cls.VIOLATION_TEMPLATE.split('{}')[0],
            cls.LINE_TEMPLATE.split('{}')[0],
        )
        lines = []
        for fragment in html.split(cls.FRAGMENT_SEPARATOR):
            for prefix in prefixes:
                if fragment.startswith(prefix):
                    fragment = fragment[len(prefix):]
                    break
            if fragment.endswith(cls.LINE_SUFFIX):
                fragment = fragment[:-len(cls.LINE_SUFFIX)]
            lines.append(fragment)
        return '\n'.join(lines)


def highlight(raw_text: Optional[str], minima: Minima) -> HighlightResult:
    """Module-level shortcut for TextHighlighter.highlight."""
    return TextHighlighter.highlight(raw_text, minima)
