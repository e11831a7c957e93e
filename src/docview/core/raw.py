"""Line-numbered raw text rendering with per-line highlighting"""

from docview.core.highlight.highlight import highlight_line


LINE_TEMPLATE = '<div class="raw-line"><span class="line-num">{num}</span><span class="line-content">{content}</span></div>'


def render_raw(content: str, ext: str) -> str:
    """Render one raw-line unit per '\\n'-separated line of content, trailing empty line included."""
    parts = []
    for num, line in enumerate(content.split('\n'), start=1):
        parts.append(LINE_TEMPLATE.format(num=num, content=highlight_line(line, ext) or '&nbsp;'))
    return ''.join(parts)
