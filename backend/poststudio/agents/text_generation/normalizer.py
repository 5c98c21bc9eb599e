# Converts rich editor HTML into the plain text LinkedIn (and the LLM) sees
import html
import re

from bs4 import BeautifulSoup, NavigableString, Tag


_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def _node_text(node) -> str:
    if isinstance(node, NavigableString):
        return str(node)
    if isinstance(node, Tag):
        if node.name == "br":
            return "\n"
        return "".join(_node_text(child) for child in node.children)
    return ""


def html_to_plain_text(content: str) -> str:
    """
    Convert HTML post content to plain text (for character counting).

    Paragraphs and divs become blocks separated by a blank line, unordered
    list items become "• " bullets and ordered ones are numbered. Plain text
    input passes through with entities decoded.
    """
    if not content or content.strip() == "":
        return ""

    soup = BeautifulSoup(content, "html.parser")
    parts: list[str] = []

    for node in soup.contents:
        name = node.name if isinstance(node, Tag) else None

        if name in ("ul", "ol"):
            items = node.find_all("li")
            for index, item in enumerate(items, 1):
                text = _node_text(item).strip()
                if not text:
                    continue
                prefix = "•" if name == "ul" else f"{index}."
                parts.append(f"{prefix} {text}\n")
        elif name in ("p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote"):
            text = _node_text(node).strip()
            if text:
                parts.append(text + "\n\n")
        elif name == "br":
            parts.append("\n")
        else:
            parts.append(_node_text(node))

    result = "".join(parts).replace("\xa0", " ")
    result = _EXCESS_NEWLINES.sub("\n\n", result)
    return result.strip()


def plain_text_to_html(text: str) -> str:
    """Convert plain text to HTML (used when loading old drafts into the editor)."""
    if not text or text.strip() == "":
        return ""

    return html.escape(text, quote=True).replace("\n", "<br>")
